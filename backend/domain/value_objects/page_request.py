"""
PageRequest Value Object

Immutable, validated pagination input.
"""

from dataclasses import dataclass

from constants import Messages
from exceptions import InvalidArgumentError


@dataclass(frozen=True)
class PageRequest:
    """
    One-based page number and page size.

    Both values must be strictly positive; construction fails with
    InvalidArgumentError otherwise.
    """

    page: int
    page_size: int

    def __post_init__(self):
        """Validate pagination bounds."""
        if self.page <= 0 or self.page_size <= 0:
            raise InvalidArgumentError(
                Messages.INVALID_PAGINATION,
                invalid_fields={"page": self.page, "pageSize": self.page_size}
            )

    @property
    def offset(self) -> int:
        """Number of rows to skip before this page."""
        return (self.page - 1) * self.page_size

    def starts_beyond(self, total_count: int) -> bool:
        """True when the page begins after the last of total_count rows."""
        return self.offset >= total_count

    def limit_within(self, total_count: int) -> int:
        """Page size clamped to the rows that remain after the offset."""
        return max(0, min(self.page_size, total_count - self.offset))

    def total_pages(self, total_count: int) -> int:
        """
        Number of pages needed for total_count rows.

        Args:
            total_count: Total number of rows available

        Returns:
            ceil(total_count / page_size), 0 when there are no rows
        """
        return -(-total_count // self.page_size)
