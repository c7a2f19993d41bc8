"""Interface for checking that tables and columns exist in backing storage."""

from __future__ import annotations

import abc


class SchemaInspector(abc.ABC):
    """Existence checks against the database schema.

    Implementations must answer from the current schema on every call;
    results are not cached between calls.
    """

    @abc.abstractmethod
    def has_table(self, table: str) -> bool:
        """Return True if ``table`` exists."""

    @abc.abstractmethod
    def has_column(self, table: str, column: str) -> bool:
        """Return True if ``table`` exists and has a column named ``column``."""
