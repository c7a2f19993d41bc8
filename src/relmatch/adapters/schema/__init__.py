"""Schema inspector adapters."""

from .memory import InMemorySchemaInspector
from .sqlalchemy_inspector import SqlAlchemySchemaInspector

__all__ = ["InMemorySchemaInspector", "SqlAlchemySchemaInspector"]
