"""Interfaces (application boundary) for RELMATCH.

Defines the ports the matchers depend on: a metadata provider standing in for
an ORM's reflection API and a schema inspector standing in for database
introspection. Adapters in `relmatch.adapters` implement them.

Dependency rule: this package imports only from `relmatch.domain`.
"""

from .metadata_provider import MetadataProvider
from .schema_inspector import SchemaInspector

__all__ = ["MetadataProvider", "SchemaInspector"]
