"""
Base repository with standardized CRUD operations, transaction management, and error handling.

Provides the foundation for all entity repositories.
"""

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Query, Session

from dormitory.core.exceptions import (
    EntityAlreadyExistsError,
    RepositoryError,
)
from dormitory.core.logging import get_logger
from dormitory.models.base import BaseModel

logger = get_logger(__name__)

# Type variable for model classes
ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with standardized operations.

    Provides CRUD operations, transaction management, and error handling
    for all entity repositories.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    # ==================== Transaction Management ====================

    @contextmanager
    def transaction(self):
        """
        Transaction context manager with automatic rollback.

        Usage:
            with repository.transaction():
                repository.create(entity, commit=False)
                repository.update_entity(other, data, commit=False)
        """
        try:
            yield self.db
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Transaction rollback: {str(e)}", exc_info=True)
            if isinstance(e, IntegrityError):
                raise EntityAlreadyExistsError(f"{self.model.__name__} already exists") from e
            raise RepositoryError(f"Transaction failed: {str(e)}") from e
        except Exception:
            self.db.rollback()
            raise

    # ==================== Query helpers ====================

    def _query(self) -> Query:
        return self.db.query(self.model)

    def _apply_criteria(self, query: Query, criteria: Optional[Dict[str, Any]]) -> Query:
        for key, value in (criteria or {}).items():
            if hasattr(self.model, key):
                column = getattr(self.model, key)
                if isinstance(value, (list, tuple, set)):
                    query = query.filter(column.in_(list(value)))
                else:
                    query = query.filter(column == value)
        return query

    def _apply_order(self, query: Query, order_by: Optional[List[str]]) -> Query:
        for field in order_by or []:
            if field.startswith('-'):
                query = query.order_by(getattr(self.model, field[1:]).desc())
            else:
                query = query.order_by(getattr(self.model, field))
        return query

    # ==================== Create Operations ====================

    def create(self, entity: ModelType, commit: bool = True) -> ModelType:
        """
        Create new entity.

        Args:
            entity: Entity to create
            commit: Whether to commit immediately

        Returns:
            Created entity

        Raises:
            EntityAlreadyExistsError: If a unique constraint is violated
        """
        try:
            self.db.add(entity)

            if commit:
                self.db.commit()
                self.db.refresh(entity)
            else:
                self.db.flush()

            logger.info(f"Created {self.model.__name__} with id: {entity.id}")
            return entity

        except IntegrityError as e:
            self.db.rollback()
            raise EntityAlreadyExistsError(
                f"{self.model.__name__} already exists"
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Create failed: {str(e)}") from e

    def create_many(self, entities: List[ModelType], commit: bool = True) -> List[ModelType]:
        """Add several entities in one flush."""
        try:
            self.db.add_all(entities)
            if commit:
                self.db.commit()
            else:
                self.db.flush()

            logger.info(f"Bulk created {len(entities)} {self.model.__name__} entities")
            return entities

        except IntegrityError as e:
            self.db.rollback()
            raise EntityAlreadyExistsError(f"{self.model.__name__} already exists") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Bulk create failed: {str(e)}") from e

    # ==================== Read Operations ====================

    def find_by_id(self, id: str) -> Optional[ModelType]:
        """Find entity by primary key."""
        try:
            return self._query().filter(self.model.id == id).first()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Find by ID failed: {str(e)}") from e

    def find_all(
        self,
        skip: int = 0,
        limit: Optional[int] = None,
        order_by: Optional[List[str]] = None,
    ) -> List[ModelType]:
        """Find all entities, optionally paginated and ordered."""
        try:
            query = self._apply_order(self._query(), order_by)
            if skip:
                query = query.offset(skip)
            if limit is not None:
                query = query.limit(limit)
            return query.all()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Find all failed: {str(e)}") from e

    def find_by_criteria(
        self,
        criteria: Dict[str, Any],
        skip: int = 0,
        limit: Optional[int] = None,
        order_by: Optional[List[str]] = None,
    ) -> List[ModelType]:
        """
        Find entities matching criteria.

        Args:
            criteria: Filter criteria as key-value pairs (lists become IN)
            skip: Number of records to skip
            limit: Maximum number of records
            order_by: List of fields to order by (prefix with - for desc)
        """
        try:
            query = self._apply_criteria(self._query(), criteria)
            query = self._apply_order(query, order_by)
            if skip:
                query = query.offset(skip)
            if limit is not None:
                query = query.limit(limit)
            return query.all()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Find by criteria failed: {str(e)}") from e

    def find_one_by_criteria(self, criteria: Dict[str, Any]) -> Optional[ModelType]:
        """Find single entity matching criteria."""
        results = self.find_by_criteria(criteria, limit=1)
        return results[0] if results else None

    # ==================== Update Operations ====================

    def update_entity(self, entity: ModelType, data: Dict[str, Any], commit: bool = True) -> ModelType:
        """Apply data to an already loaded entity."""
        try:
            for key, value in data.items():
                if hasattr(entity, key):
                    setattr(entity, key, value)

            if commit:
                self.db.commit()
                self.db.refresh(entity)
            else:
                self.db.flush()

            logger.info(f"Updated {self.model.__name__} with id: {entity.id}")
            return entity

        except IntegrityError as e:
            self.db.rollback()
            raise EntityAlreadyExistsError(f"{self.model.__name__} already exists") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Update failed: {str(e)}") from e

    def update_many(
        self,
        criteria: Dict[str, Any],
        data: Dict[str, Any],
        commit: bool = True,
    ) -> int:
        """
        Bulk update entities matching criteria in one UPDATE statement.

        Returns:
            Number of updated entities
        """
        try:
            query = self._apply_criteria(self._query(), criteria)

            update_data = data.copy()
            if hasattr(self.model, 'updated_at'):
                update_data['updated_at'] = datetime.now(timezone.utc)

            count = query.update(update_data, synchronize_session='fetch')
            if commit:
                self.db.commit()
            else:
                self.db.flush()

            logger.info(f"Bulk updated {count} {self.model.__name__} entities")
            return count

        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Bulk update failed: {str(e)}") from e

    # ==================== Delete Operations ====================

    def delete_entity(self, entity: ModelType, commit: bool = True) -> None:
        try:
            self.db.delete(entity)
            if commit:
                self.db.commit()
            else:
                self.db.flush()

            logger.info(f"Deleted {self.model.__name__} with id: {entity.id}")

        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Delete failed: {str(e)}") from e

    def delete_many(self, criteria: Optional[Dict[str, Any]] = None, commit: bool = True) -> int:
        """Delete every entity matching criteria; no criteria deletes all rows."""
        try:
            query = self._apply_criteria(self._query(), criteria)
            count = query.delete(synchronize_session='fetch')
            if commit:
                self.db.commit()
            else:
                self.db.flush()

            logger.info(f"Bulk deleted {count} {self.model.__name__} entities")
            return count

        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Bulk delete failed: {str(e)}") from e

    # ==================== Count Operations ====================

    def count(self, criteria: Optional[Dict[str, Any]] = None) -> int:
        """Count entities matching criteria."""
        try:
            query = self._apply_criteria(self.db.query(func.count(self.model.id)), criteria)
            return query.scalar() or 0
        except SQLAlchemyError as e:
            raise RepositoryError(f"Count failed: {str(e)}") from e
