"""Metadata provider adapters."""

from .declarative import (
    BelongsTo,
    DeclarativeMetadataProvider,
    HasAndBelongsToMany,
    HasMany,
    HasOne,
    Model,
)
from .dispatching import DispatchingMetadataProvider
from .sqlalchemy_orm import SqlAlchemyMetadataProvider

__all__ = [
    "BelongsTo",
    "DeclarativeMetadataProvider",
    "DispatchingMetadataProvider",
    "HasAndBelongsToMany",
    "HasMany",
    "HasOne",
    "Model",
    "SqlAlchemyMetadataProvider",
]
