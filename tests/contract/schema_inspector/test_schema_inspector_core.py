"""Contract tests for the SchemaInspector port.

Behavior under test:
    - has_table() reports existing tables only
    - has_column() is true only for a column of an existing table
    - results follow schema changes made between calls (no caching)
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from sqlalchemy import Column, Integer, MetaData, String, Table

from relmatch.adapters.schema import InMemorySchemaInspector, SqlAlchemySchemaInspector
from relmatch.interfaces import SchemaInspector

# Deal with pytest fixtures
# pylint: disable=redefined-outer-name

# --- Fixtures ---

Creator = Callable[..., None]
Dropper = Callable[[str], None]


@pytest.fixture(params=["memory", "sql_memory"])
def schema(
    request: pytest.FixtureRequest, sqlite_engine_memory
) -> Iterator[tuple[SchemaInspector, Creator, Dropper]]:
    """Return a fresh inspector plus callables to create/drop tables.

    Supported params:
      - `"memory"` → InMemorySchemaInspector
      - `"sql_memory"` → SqlAlchemySchemaInspector over in-memory SQLite
    """
    match request.param:
        case "memory":
            inspector = InMemorySchemaInspector()
            yield inspector, inspector.create_table, inspector.drop_table
        case "sql_memory":
            metadata = MetaData()

            def create(name: str, *columns: str) -> None:
                table = Table(
                    name,
                    metadata,
                    *(Column(c, Integer if c.endswith("_id") else String) for c in columns),
                )
                table.create(sqlite_engine_memory)

            def drop(name: str) -> None:
                metadata.tables[name].drop(sqlite_engine_memory)
                metadata.remove(metadata.tables[name])

            yield SqlAlchemySchemaInspector(sqlite_engine_memory), create, drop
        case _:
            raise ValueError(f"unknown inspector type: {request.param}")


# --- Tests ---


def test_unknown_table(schema):
    """Tables that were never created do not exist."""
    inspector, _, _ = schema
    assert not inspector.has_table("children")
    assert not inspector.has_column("children", "parent_id")


def test_existing_table_and_columns(schema):
    """Created tables and their columns are reported."""
    inspector, create, _ = schema
    create("children", "id", "parent_id", "parent_type")
    assert inspector.has_table("children")
    assert inspector.has_column("children", "parent_id")
    assert inspector.has_column("children", "parent_type")


def test_missing_column_of_existing_table(schema):
    """Columns are looked up on their own table only."""
    inspector, create, _ = schema
    create("children", "id")
    create("parents", "id", "parent_id")
    assert not inspector.has_column("children", "parent_id")


def test_dropped_table_is_no_longer_reported(schema):
    """Answers follow schema changes between calls."""
    inspector, create, drop = schema
    create("people_relatives", "person_id", "relative_id")
    assert inspector.has_table("people_relatives")
    drop("people_relatives")
    assert not inspector.has_table("people_relatives")
    assert not inspector.has_column("people_relatives", "person_id")
