"""Reflection reader: declared association + backing schema checks.

The reader asks the metadata provider for the association and then verifies
the storage it relies on:

- belongs_to: the foreign key (and, when polymorphic, the type column) on the
  owner's table.
- has_one / has_many: the foreign key (and, with ``as``, the type column) on
  the target's table. ``through`` associations have no direct key and are not
  checked.
- has_and_belongs_to_many: the join table.

For ``through`` associations it also records whether the owner declares the
association gone through.
"""

from __future__ import annotations

import logging

from relmatch.domain.errors import UnsupportedKindError
from relmatch.domain.value_objects import (
    AssociationDescriptor,
    AssociationKind,
    AssociationReading,
    BackingProblem,
    FailureReason,
)
from relmatch.interfaces import MetadataProvider, SchemaInspector

logger = logging.getLogger(__name__)


class ReflectionReader:
    """Read one association of a model type per call. Nothing is cached."""

    def __init__(self, provider: MetadataProvider, inspector: SchemaInspector):
        self.provider = provider
        self.inspector = inspector

    def read(self, model_type: type, name: str) -> AssociationReading | None:
        """Reflect on association ``name`` of ``model_type``.

        Args:
            model_type: The model class to inspect.
            name: The association name.

        Returns:
            AssociationReading | None: The descriptor and any missing storage,
            or ``None`` if the model declares no such association.
        """
        descriptor = self.provider.get_association(model_type, name)
        if descriptor is None:
            logger.debug("%s declares no association %s", model_type.__name__, name)
            return None
        return AssociationReading(
            descriptor,
            self._backing_problem(descriptor),
            through_declared=self._through_declared(model_type, descriptor),
        )

    def _through_declared(
        self, model_type: type, descriptor: AssociationDescriptor
    ) -> bool:
        if descriptor.through is None:
            return True
        if self.provider.get_association(model_type, descriptor.through) is None:
            logger.debug(
                "%s declares no association %s for %s to go through",
                model_type.__name__,
                descriptor.through,
                descriptor.name,
            )
            return False
        return True

    def _backing_problem(self, descriptor: AssociationDescriptor) -> BackingProblem | None:
        match descriptor.kind:
            case AssociationKind.HAS_AND_BELONGS_TO_MANY:
                return self._check_join_table(descriptor)
            case AssociationKind.BELONGS_TO:
                table = descriptor.owner_table
                columns = [descriptor.foreign_key]
                if descriptor.is_polymorphic:
                    columns.append(descriptor.type_column)
            case AssociationKind.HAS_ONE | AssociationKind.HAS_MANY:
                if descriptor.through is not None:
                    return None
                table = descriptor.target_table
                columns = [descriptor.foreign_key]
                if descriptor.as_name is not None:
                    columns.append(descriptor.type_column)
            case _:
                raise UnsupportedKindError(descriptor.kind)

        if table is None:
            logger.debug("No backing table known for %s", descriptor.name)
            return None
        missing = tuple(
            column
            for column in columns
            if column is not None and not self.inspector.has_column(table, column)
        )
        logger.debug(
            "Checked %s columns %s on %s: missing=%s",
            descriptor.name,
            columns,
            table,
            missing,
        )
        if missing:
            return BackingProblem(FailureReason.MISSING_FOREIGN_KEY, table, missing)
        return None

    def _check_join_table(self, descriptor: AssociationDescriptor) -> BackingProblem | None:
        if descriptor.join_table is None:
            return None
        if self.inspector.has_table(descriptor.join_table):
            return None
        logger.debug("Join table %s not found", descriptor.join_table)
        return BackingProblem(FailureReason.MISSING_JOIN_TABLE, descriptor.join_table)
