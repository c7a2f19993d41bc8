"""Interface for reading declared associations from model classes."""

from __future__ import annotations

import abc

from relmatch.domain.value_objects import AssociationDescriptor


class MetadataProvider(abc.ABC):
    """Reflection over the associations a model type declares."""

    @abc.abstractmethod
    def supports(self, model_type: type) -> bool:
        """Return True if this provider can reflect on ``model_type``.

        Args:
            model_type: The model class to reflect on.
        """

    @abc.abstractmethod
    def get_association(
        self, model_type: type, name: str
    ) -> AssociationDescriptor | None:
        """Describe the association ``name`` declared on ``model_type``.

        Args:
            model_type: The model class that declares the association.
            name: The association name (e.g. ``"children"``).

        Returns:
            AssociationDescriptor | None: A snapshot of the declaration, or
            ``None`` if the model declares no association of that name.
        """
