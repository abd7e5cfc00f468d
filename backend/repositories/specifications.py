"""
Specification Pattern Implementation

Encapsulates "find-by-predicate" criteria as small composable objects that
can be evaluated in memory or turned into a SQLAlchemy filter expression.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from sqlalchemy import and_


T = TypeVar('T')


class Specification(ABC, Generic[T]):
    """
    Abstract base class for specifications.

    A specification encapsulates a single query criterion. Combine them
    with ``&``.
    """

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """Check if a loaded object satisfies this specification."""
        pass

    @abstractmethod
    def to_sql_filter(self):
        """Convert specification to a SQLAlchemy filter expression."""
        pass

    def __and__(self, other: "Specification[T]") -> "AndSpecification[T]":
        return AndSpecification(self, other)


class AndSpecification(Specification[T]):
    """Both specifications must hold."""

    def __init__(self, left: Specification[T], right: Specification[T]):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)

    def to_sql_filter(self):
        return and_(self.left.to_sql_filter(), self.right.to_sql_filter())

