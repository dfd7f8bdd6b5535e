# app/core/base_dao.py
"""Generic base DAO for common database operations."""

from typing import Generic, TypeVar, List, Optional, Any, Type
from sqlalchemy.orm import Session
from sqlalchemy import select, and_, func
from abc import ABC
from app.core.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseDAO(Generic[ModelType], ABC):
    """Generic DAO for common database operations."""

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def _equality_filters(self, filters: dict) -> list:
        return [
            getattr(self.model, key) == value
            for key, value in filters.items()
            if hasattr(self.model, key) and value is not None
        ]

    def get_all(self, skip: int = 0, limit: int = 100, **filters) -> List[ModelType]:
        """Get all records with optional equality filtering."""
        query = select(self.model)
        conditions = self._equality_filters(filters)
        if conditions:
            query = query.where(and_(*conditions))

        query = query.offset(skip).limit(limit)
        result = self.db.execute(query)
        return list(result.scalars().all())

    def get_by_id(self, id: Any) -> Optional[ModelType]:
        """Get record by primary key."""
        return self.db.get(self.model, id)

    def get_by_field(self, field_name: str, value: Any) -> Optional[ModelType]:
        """Get single record by field value."""
        if not hasattr(self.model, field_name):
            return None

        query = select(self.model).where(getattr(self.model, field_name) == value)
        result = self.db.execute(query)
        return result.scalars().first()

    def create(self, **data) -> ModelType:
        """Create new record."""
        db_obj = self.model(**data)
        self.db.add(db_obj)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def update(self, db_obj: ModelType, **data) -> ModelType:
        """Update existing record."""
        for field, value in data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def delete(self, id: Any) -> bool:
        """Delete record by primary key."""
        db_obj = self.get_by_id(id)
        if db_obj:
            self.db.delete(db_obj)
            self.db.commit()
            return True
        return False

    def count(self, **filters) -> int:
        """Count records with optional equality filtering."""
        query = select(func.count()).select_from(self.model)
        conditions = self._equality_filters(filters)
        if conditions:
            query = query.where(and_(*conditions))

        result = self.db.execute(query)
        return result.scalar_one()

    def exists(self, **filters) -> bool:
        """Check if record exists with given filters."""
        return self.count(**filters) > 0
