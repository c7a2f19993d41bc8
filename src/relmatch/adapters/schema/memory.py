"""In-memory SchemaInspector for tests."""

from collections.abc import Iterable, Mapping

from relmatch.interfaces import SchemaInspector


class InMemorySchemaInspector(SchemaInspector):
    """SchemaInspector backed by a ``{table: columns}`` mapping.

    Note: tables can be added or dropped between evaluations with
    `create_table` / `drop_table`; lookups always see the current state.
    """

    def __init__(self, tables: Mapping[str, Iterable[str]] | None = None):
        self.tables: dict[str, set[str]] = {
            name: set(columns) for name, columns in (tables or {}).items()
        }

    def create_table(self, table: str, *columns: str) -> None:
        self.tables[table] = set(columns)

    def drop_table(self, table: str) -> None:
        self.tables.pop(table, None)

    def has_table(self, table: str) -> bool:
        return table in self.tables

    def has_column(self, table: str, column: str) -> bool:
        return column in self.tables.get(table, ())
