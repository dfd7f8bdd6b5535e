"""
Unit tests for the filter expression compiler.
Covers the selectable and free-text operator tables and the permissive fallbacks.
"""

import pytest

from app.query import (
    filter_column,
    Eq,
    NotEq,
    Like,
    NotLike,
    IsNull,
    IsNotNull,
    InList,
    NotInList,
)


class TestEmptyValues:
    """Empty values contribute no predicate"""

    @pytest.mark.parametrize("value", [None, "", "~", "~eq", "~ilike", "~~"])
    def test_free_text_empty_value_is_absent(self, value):
        assert filter_column("title", value) is None

    @pytest.mark.parametrize("value", [None, "", "~eq", "~isNull"])
    def test_selectable_empty_value_is_absent(self, value):
        assert filter_column("status", value, is_selectable=True) is None


class TestSelectableFilters:
    """Enum-like columns filter by token membership"""

    def test_eq_splits_tokens_on_dot(self):
        assert filter_column("status", "todo.done~eq", is_selectable=True) == InList("status", ("todo", "done"))

    def test_eq_drops_empty_tokens(self):
        assert filter_column("status", "todo..done.~eq", is_selectable=True) == InList("status", ("todo", "done"))

    def test_eq_with_only_dots_gives_empty_membership(self):
        assert filter_column("status", "..~eq", is_selectable=True) == InList("status", ())

    def test_not_eq_negates_membership(self):
        assert filter_column("priority", "high.low~notEq", is_selectable=True) == NotInList(
            "priority", ("high", "low")
        )

    def test_tokens_are_case_folded(self):
        assert filter_column("status", "TODO.Done~eq", is_selectable=True) == InList("status", ("todo", "done"))

    @pytest.mark.parametrize("value", ["todo.done~isNull", "anything~isNull"])
    def test_is_null_ignores_tokens(self, value):
        assert filter_column("status", value, is_selectable=True) == IsNull("status")

    def test_is_not_null_ignores_tokens(self):
        assert filter_column("status", "todo.done~isNotNull", is_selectable=True) == IsNotNull("status")

    def test_missing_operator_defaults_to_membership(self):
        assert filter_column("status", "todo.done", is_selectable=True) == InList("status", ("todo", "done"))

    def test_unrecognized_operator_defaults_to_membership(self):
        assert filter_column("status", "todo~ilike", is_selectable=True) == InList("status", ("todo",))

    def test_default_branch_keeps_empty_tokens(self):
        assert filter_column("status", "todo.", is_selectable=True) == InList("status", ("todo", ""))


class TestFreeTextFilters:
    """Text columns filter by pattern or exact match"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("report~ilike", Like("title", "%report%")),
            ("report~notIlike", NotLike("title", "%report%")),
            ("report~startsWith", Like("title", "report%")),
            ("report~endsWith", Like("title", "%report")),
            ("report~eq", Eq("title", "report")),
            ("report~notEq", NotEq("title", "report")),
            ("report~isNull", IsNull("title")),
            ("report~isNotNull", IsNotNull("title")),
        ],
    )
    def test_operator_table(self, value, expected):
        assert filter_column("title", value) == expected

    def test_no_operator_is_case_folded_substring_match(self):
        assert filter_column("title", "FOO") == Like("title", "%foo%")

    def test_unrecognized_operator_matches_ilike(self):
        assert filter_column("title", "foo~zzz") == filter_column("title", "foo~ilike")

    def test_dots_are_not_split_for_text(self):
        assert filter_column("title", "v1.2~eq") == Eq("title", "v1.2")

    def test_extra_segments_are_ignored(self):
        assert filter_column("title", "foo~eq~startsWith") == Eq("title", "foo")

    def test_leading_delimiter_means_no_value(self):
        assert filter_column("title", "~foo~eq") is None

    def test_repeated_delimiters_are_collapsed(self):
        assert filter_column("title", "foo~~eq") == Eq("title", "foo")
