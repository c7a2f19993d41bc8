"""SchemaInspector implementation using SQLAlchemy's runtime inspection API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import inspect

from relmatch.interfaces import SchemaInspector

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger(__name__)


class SqlAlchemySchemaInspector(SchemaInspector):
    """Check tables and columns of a live database.

    A fresh `sqlalchemy.engine.Inspector` is created per call, so schema
    changes made between evaluations are always visible.
    """

    def __init__(self, bind: Engine | Connection, schema: str | None = None):
        self.bind = bind
        self.schema = schema

    def has_table(self, table: str) -> bool:
        return inspect(self.bind).has_table(table, schema=self.schema)

    def has_column(self, table: str, column: str) -> bool:
        inspector = inspect(self.bind)
        if not inspector.has_table(table, schema=self.schema):
            logger.debug("Table %s not found while looking for %s", table, column)
            return False
        columns = {c["name"] for c in inspector.get_columns(table, schema=self.schema)}
        return column in columns
