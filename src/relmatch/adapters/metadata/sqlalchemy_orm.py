"""MetadataProvider for SQLAlchemy ORM mapped classes.

Association kinds are derived from the ``relationship()`` configuration:

| relationship                      | kind                      |
|-----------------------------------|---------------------------|
| MANYTOONE                         | belongs_to                |
| ONETOMANY, ``uselist=True``       | has_many                  |
| ONETOMANY, ``uselist=False``      | has_one                   |
| MANYTOMANY (``secondary=...``)    | has_and_belongs_to_many   |
| ``association_proxy(coll, attr)`` | has_many/has_one through ``coll`` |

SQLAlchemy has no native notion of polymorphic (generic foreign key)
associations or ActiveRecord-style ``dependent`` options, so they are read
from ``relationship(info={...})`` when present:

- ``info["dependent"]``: overrides the dependent option. Without it, a
  ``delete`` cascade is reported as ``destroy``.
- ``info["polymorphic"]``: marks a many-to-one as polymorphic; its type
  column defaults to ``<name>_type`` (override with ``info["type_column"]``).
- ``info["as"]``: the polymorphic interface name of a one-to-many; its type
  column defaults to ``<as>_type``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import inspect
from sqlalchemy.ext.associationproxy import AssociationProxy
from sqlalchemy.orm import Mapper, RelationshipDirection

from relmatch.domain.value_objects import (
    AssociationDescriptor,
    AssociationKind,
    DependentOption,
    freeze_options,
)
from relmatch.interfaces import MetadataProvider

if TYPE_CHECKING:
    from sqlalchemy.orm import RelationshipProperty

logger = logging.getLogger(__name__)


def _mapper_for(model_type: type) -> Mapper | None:
    mapper = inspect(model_type, raiseerr=False)
    return mapper if isinstance(mapper, Mapper) else None


def _kind_of(prop: RelationshipProperty) -> AssociationKind:
    match prop.direction:
        case RelationshipDirection.MANYTOONE:
            return AssociationKind.BELONGS_TO
        case RelationshipDirection.MANYTOMANY:
            return AssociationKind.HAS_AND_BELONGS_TO_MANY
        case _:
            if prop.uselist:
                return AssociationKind.HAS_MANY
            return AssociationKind.HAS_ONE


def _dependent_of(prop: RelationshipProperty) -> DependentOption | None:
    if (declared := prop.info.get("dependent")) is not None:
        return DependentOption.from_value(declared)
    if prop.cascade.delete:
        return DependentOption.DESTROY
    return None


def _foreign_key_of(prop: RelationshipProperty, kind: AssociationKind) -> str | None:
    """Name of the first foreign key column of the relationship.

    Composite keys are reduced to their first column.
    """
    if kind is AssociationKind.HAS_AND_BELONGS_TO_MANY:
        pairs = prop.synchronize_pairs
        return pairs[0][1].name if pairs else None
    pairs = prop.local_remote_pairs or []
    if not pairs:
        return None
    local, remote = pairs[0]
    return local.name if kind is AssociationKind.BELONGS_TO else remote.name


def _options_of(prop: RelationshipProperty) -> dict[str, Any]:
    options: dict[str, Any] = {
        "lazy": prop.lazy,
        "uselist": prop.uselist,
        "viewonly": prop.viewonly,
    }
    if prop.back_populates:
        options["back_populates"] = prop.back_populates
    options.update(prop.info)
    return options


class SqlAlchemyMetadataProvider(MetadataProvider):
    """Reflect on SQLAlchemy declarative / imperatively mapped classes."""

    def supports(self, model_type: type) -> bool:
        return _mapper_for(model_type) is not None

    def get_association(
        self, model_type: type, name: str
    ) -> AssociationDescriptor | None:
        mapper = _mapper_for(model_type)
        if mapper is None:
            return None
        mapper.registry.configure(cascade=True)

        if name in mapper.relationships:
            return self._describe_relationship(mapper, mapper.relationships[name])

        descriptor = mapper.all_orm_descriptors.get(name)
        if isinstance(descriptor, AssociationProxy):
            return self._describe_proxy(mapper, name, descriptor)

        return None

    @staticmethod
    def _describe_relationship(
        mapper: Mapper, prop: RelationshipProperty
    ) -> AssociationDescriptor:
        kind = _kind_of(prop)
        info = prop.info
        polymorphic = bool(info.get("polymorphic", False))
        as_name = info.get("as")
        type_column = info.get("type_column")
        if type_column is None and polymorphic:
            type_column = f"{prop.key}_type"
        elif type_column is None and as_name:
            type_column = f"{as_name}_type"

        return AssociationDescriptor(
            name=prop.key,
            kind=kind,
            owner_type_name=mapper.class_.__name__,
            target_type_name=prop.mapper.class_.__name__,
            foreign_key=_foreign_key_of(prop, kind),
            is_polymorphic=polymorphic,
            as_name=as_name,
            dependent=_dependent_of(prop),
            owner_table=mapper.local_table.name,
            target_table=prop.mapper.local_table.name,
            type_column=type_column,
            join_table=prop.secondary.name if prop.secondary is not None else None,
            options=freeze_options(_options_of(prop)),
        )

    @staticmethod
    def _describe_proxy(
        mapper: Mapper, name: str, proxy: AssociationProxy
    ) -> AssociationDescriptor | None:
        collection = proxy.target_collection
        if collection not in mapper.relationships:
            logger.debug(
                "Association proxy %s.%s targets unknown relationship %s",
                mapper.class_.__name__,
                name,
                collection,
            )
            return None
        through_prop = mapper.relationships[collection]
        through_mapper = through_prop.mapper

        target_type_name = target_table = None
        if proxy.value_attr in through_mapper.relationships:
            target_mapper = through_mapper.relationships[proxy.value_attr].mapper
            target_type_name = target_mapper.class_.__name__
            target_table = target_mapper.local_table.name

        return AssociationDescriptor(
            name=name,
            kind=(
                AssociationKind.HAS_MANY
                if through_prop.uselist
                else AssociationKind.HAS_ONE
            ),
            owner_type_name=mapper.class_.__name__,
            target_type_name=target_type_name,
            through=collection,
            owner_table=mapper.local_table.name,
            target_table=target_table,
            options=freeze_options({"through": collection}),
        )
