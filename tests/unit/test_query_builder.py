"""
Unit tests for predicate combination, sort parsing and SQL translation.
"""

import pytest
from datetime import datetime

from app.query import (
    PredicateBuilder,
    SortSpec,
    SortDirection,
    CombineOperator,
    combine,
    And,
    Or,
    Eq,
    Like,
    InList,
    Range,
)
from app.tasks.fields import column_map
from app.tasks.models import Task


@pytest.fixture
def builder():
    return PredicateBuilder(Task, column_map(), fallback_sort_column="id")


class TestCombine:
    def test_nothing_present_gives_none(self):
        assert combine([None, None]) is None
        assert combine([]) is None

    def test_single_predicate_is_returned_as_is(self):
        assert combine([None, Eq("title", "a")]) == Eq("title", "a")

    def test_and_is_default(self):
        predicates = [Like("title", "%a%"), InList("status", ("todo",))]
        assert combine(predicates) == And(tuple(predicates))
        assert combine(predicates, CombineOperator.AND) == And(tuple(predicates))

    def test_or_skips_absent_entries(self):
        predicates = [Like("title", "%a%"), None, InList("status", ("todo",))]
        assert combine(predicates, CombineOperator.OR) == Or((predicates[0], predicates[2]))


class TestSortSpec:
    def test_missing_sort_defaults_to_created_at_desc(self):
        assert SortSpec.parse(None) == SortSpec("created_at", SortDirection.DESC)

    def test_empty_segments_default_to_created_at_desc(self):
        assert SortSpec.parse(".") == SortSpec("created_at", SortDirection.DESC)

    def test_field_and_direction(self):
        assert SortSpec.parse("title.asc") == SortSpec("title", SortDirection.ASC)
        assert SortSpec.parse("title.desc") == SortSpec("title", SortDirection.DESC)

    def test_missing_or_unknown_direction_is_descending(self):
        assert SortSpec.parse("title") == SortSpec("title", SortDirection.DESC)
        assert SortSpec.parse("title.sideways") == SortSpec("title", SortDirection.DESC)


class TestPredicateBuilder:
    def test_unknown_sort_column_falls_back_to_id_desc(self, builder):
        clause = builder.build_order_by(SortSpec("nonexistent", SortDirection.ASC))
        assert str(clause) == str(Task.id.desc())

    def test_camel_case_alias_resolves(self, builder):
        clause = builder.build_order_by(SortSpec("createdAt", SortDirection.ASC))
        assert str(clause) == str(Task.created_at.asc())

    def test_known_sort_column(self, builder):
        clause = builder.build_order_by(SortSpec("title", SortDirection.DESC))
        assert str(clause) == str(Task.title.desc())

    def test_unknown_filter_column_raises(self, builder):
        with pytest.raises(ValueError):
            builder.build(Eq("nonexistent", "x"))

    def test_range_is_inclusive(self, builder):
        lower, upper = datetime(2024, 1, 1), datetime(2024, 2, 1)
        sql = str(builder.build(Range("created_at", lower, upper)))
        assert ">=" in sql and "<=" in sql

    def test_like_is_case_insensitive(self, builder):
        sql = str(builder.build(Like("title", "%a%"))).lower()
        assert "lower(" in sql or "ilike" in sql
