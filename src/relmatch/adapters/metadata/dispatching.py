"""MetadataProvider that delegates to the first provider supporting a model."""

from __future__ import annotations

from collections.abc import Iterable

from relmatch.domain.errors import UnsupportedModelError
from relmatch.domain.value_objects import AssociationDescriptor
from relmatch.interfaces import MetadataProvider


class DispatchingMetadataProvider(MetadataProvider):
    """Try each provider in order; the first whose `supports` is True answers."""

    def __init__(self, providers: Iterable[MetadataProvider]):
        self.providers = tuple(providers)

    def _provider_for(self, model_type: type) -> MetadataProvider | None:
        for provider in self.providers:
            if provider.supports(model_type):
                return provider
        return None

    def supports(self, model_type: type) -> bool:
        return self._provider_for(model_type) is not None

    def get_association(
        self, model_type: type, name: str
    ) -> AssociationDescriptor | None:
        """Delegate to the first supporting provider.

        Raises:
            UnsupportedModelError: If no provider supports ``model_type``.
        """
        if (provider := self._provider_for(model_type)) is None:
            raise UnsupportedModelError(model_type)
        return provider.get_association(model_type, name)
