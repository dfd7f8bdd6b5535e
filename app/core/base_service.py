# app/core/base_service.py
"""Generic base service for business logic orchestration."""

from typing import Generic, TypeVar, List, Optional, Any
from pydantic import BaseModel
from abc import ABC
from app.core.base_dao import BaseDAO

ModelType = TypeVar("ModelType")
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)
ResponseSchemaType = TypeVar("ResponseSchemaType", bound=BaseModel)


class BaseService(Generic[ModelType, CreateSchemaType, UpdateSchemaType, ResponseSchemaType], ABC):
    """Generic service for business logic orchestration."""

    response_model: Optional[type] = None

    def __init__(self, dao: BaseDAO[ModelType]):
        self.dao = dao

    def get_all(self, skip: int = 0, limit: int = 100, **filters) -> List[ResponseSchemaType]:
        """Get all records with business logic applied."""
        records = self.dao.get_all(skip=skip, limit=limit, **filters)
        return [self._to_response(record) for record in records]

    def get_by_id(self, id: Any) -> Optional[ResponseSchemaType]:
        """Get record by ID with business logic applied."""
        record = self.dao.get_by_id(id)
        if record:
            return self._to_response(record)
        return None

    def create(self, create_data: CreateSchemaType, **extra_data) -> ResponseSchemaType:
        """Create new record with validation and business logic."""
        self._validate_create(create_data)

        data = create_data.model_dump()
        data.update(extra_data)
        record = self.dao.create(**data)

        return self._to_response(record)

    def update(self, id: Any, update_data: UpdateSchemaType, **extra_data) -> Optional[ResponseSchemaType]:
        """Update existing record, ignoring fields the caller did not set."""
        record = self.dao.get_by_id(id)
        if not record:
            return None

        self._validate_update(record, update_data)

        data = update_data.model_dump(exclude_unset=True)
        data.update(extra_data)
        updated_record = self.dao.update(record, **data)

        return self._to_response(updated_record)

    def delete(self, id: Any) -> bool:
        """Delete record with business logic."""
        record = self.dao.get_by_id(id)
        if not record:
            return False

        self._validate_delete(record)
        return self.dao.delete(id)

    def count(self, **filters) -> int:
        return self.dao.count(**filters)

    # ===== OVERRIDABLE HOOKS =====

    def _to_response(self, record: ModelType) -> ResponseSchemaType:
        """Convert database model to response schema."""
        if self.response_model is not None:
            return self.response_model.model_validate(record)
        raise NotImplementedError("Must implement _to_response or set response_model")

    def _validate_create(self, create_data: CreateSchemaType) -> None:
        pass

    def _validate_update(self, record: ModelType, update_data: UpdateSchemaType) -> None:
        pass

    def _validate_delete(self, record: ModelType) -> None:
        pass
