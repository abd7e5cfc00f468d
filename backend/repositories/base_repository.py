"""
Base repository providing common data access operations.
"""

from typing import Generic, TypeVar, Optional, Type
from sqlalchemy.orm import Session

from .specifications import Specification

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Generic base repository over one entity collection.

    All specific repositories should inherit from this class. Mutations are
    only staged on the session; nothing is durable until commit() is called.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session (one per request)
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def add(self, obj: T) -> T:
        """
        Stage a new record for insertion.

        Args:
            obj: Model instance to add

        Returns:
            The same model instance
        """
        self.db.add(obj)
        return obj

    def remove(self, obj: T) -> None:
        """
        Stage a record for deletion.

        Args:
            obj: Model instance to delete
        """
        self.db.delete(obj)

    def get_by_id(self, id: int) -> Optional[T]:
        """
        Retrieve a record by its primary key.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.get(self.model, id)

    def count(self) -> int:
        """
        Count total records.

        Returns:
            Total number of records
        """
        return self.db.query(self.model).count()

    def find_one(self, spec: Specification[T]) -> Optional[T]:
        """
        Find the first record matching a Specification.

        Args:
            spec: Specification to match records against

        Returns:
            First matching model instance, or None
        """
        return self.db.query(self.model).filter(spec.to_sql_filter()).first()

    def any(self, spec: Specification[T]) -> bool:
        """
        Check whether at least one record matches a Specification.

        Args:
            spec: Specification to match records against

        Returns:
            True if a matching record exists
        """
        query = self.db.query(self.model).filter(spec.to_sql_filter())
        return self.db.query(query.exists()).scalar()

    def commit(self) -> None:
        """Atomically persist all pending changes of the session."""
        self.db.commit()

    def rollback(self) -> None:
        """Discard all pending changes of the session."""
        self.db.rollback()
