"""Declarative models with ActiveRecord-style association declarations.

Associations are declared as class attributes; the attribute name is the
association name::

    class Parent(Model):
        conceptions = HasMany()
        children = HasMany(through="conceptions", dependent="destroy")

    class Child(Model):
        parent = BelongsTo(foreign_key="guardian_id")

Names not given explicitly are derived with the usual ActiveRecord
conventions (via `inflection`):

| Value                | Default                                   |
|----------------------|-------------------------------------------|
| owner table          | ``tableize(OwnerClass)`` or ``__tablename__`` |
| belongs-to key       | ``<name>_id``                             |
| has-one/many key     | ``<owner>_id`` (``<as>_id`` with ``as_``) |
| type column          | ``<name>_type`` / ``<as>_type``           |
| habtm join table     | both table names sorted, joined by ``_``  |
"""

from __future__ import annotations

import abc
from typing import Any, ClassVar

import inflection

from relmatch.domain.value_objects import (
    AssociationDescriptor,
    AssociationKind,
    DependentOption,
    freeze_options,
)
from relmatch.interfaces import MetadataProvider

# pylint: disable=too-few-public-methods


def table_name_for(model_type: type) -> str:
    """Return the table backing a declarative model class."""
    if explicit := getattr(model_type, "__tablename__", None):
        return explicit
    return inflection.tableize(model_type.__name__)


class Association(abc.ABC):
    """Base class for association declarations.

    Declared options are recorded verbatim (``as_`` is recorded under
    ``"as"``); keyword options without a dedicated meaning, such as
    ``validate=False``, are kept so they can be matched with
    ``with_options``.
    """

    kind: ClassVar[AssociationKind]

    def __init__(
        self,
        *,
        class_name: str | None = None,
        foreign_key: str | None = None,
        dependent: DependentOption | str | None = None,
        **options: Any,
    ) -> None:
        self.name: str | None = None
        self.class_name = class_name
        self.foreign_key = foreign_key
        self.dependent = (
            DependentOption.from_value(dependent) if dependent is not None else None
        )
        declared = {
            "class_name": class_name,
            "foreign_key": foreign_key,
            "dependent": self.dependent,
        }
        self.options: dict[str, Any] = {
            key: value for key, value in declared.items() if value is not None
        }
        self.options.update(options)

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def target_class_name(self) -> str | None:
        return self.class_name or inflection.camelize(self.name)

    @abc.abstractmethod
    def describe(self, owner: type) -> AssociationDescriptor:
        """Build the descriptor for this declaration on ``owner``."""


class BelongsTo(Association):
    """``belongs_to``: the foreign key lives on the owner's table."""

    kind = AssociationKind.BELONGS_TO

    def __init__(self, *, polymorphic: bool = False, **options: Any) -> None:
        super().__init__(**options)
        self.polymorphic = polymorphic
        if polymorphic:
            self.options["polymorphic"] = True

    def target_class_name(self) -> str | None:
        if self.polymorphic:
            return None
        return super().target_class_name()

    def describe(self, owner: type) -> AssociationDescriptor:
        target = self.target_class_name()
        return AssociationDescriptor(
            name=self.name,
            kind=self.kind,
            owner_type_name=owner.__name__,
            target_type_name=target,
            foreign_key=self.foreign_key or f"{self.name}_id",
            is_polymorphic=self.polymorphic,
            dependent=self.dependent,
            owner_table=table_name_for(owner),
            target_table=inflection.tableize(target) if target else None,
            type_column=f"{self.name}_type" if self.polymorphic else None,
            options=freeze_options(self.options),
        )


class _HasAssociation(Association):
    """Shared behaviour of ``has_one`` and ``has_many``.

    The foreign key lives on the target's table; ``through`` associations
    have no direct key.
    """

    def __init__(
        self, *, through: str | None = None, as_: str | None = None, **options: Any
    ) -> None:
        super().__init__(**options)
        self.through = through
        self.as_name = as_
        if through is not None:
            self.options["through"] = through
        if as_ is not None:
            self.options["as"] = as_

    def _foreign_key(self, owner: type) -> str | None:
        if self.foreign_key:
            return self.foreign_key
        if self.through is not None:
            return None
        if self.as_name is not None:
            return f"{self.as_name}_id"
        return inflection.foreign_key(owner.__name__)

    def describe(self, owner: type) -> AssociationDescriptor:
        target = self.target_class_name()
        return AssociationDescriptor(
            name=self.name,
            kind=self.kind,
            owner_type_name=owner.__name__,
            target_type_name=target,
            foreign_key=self._foreign_key(owner),
            through=self.through,
            as_name=self.as_name,
            dependent=self.dependent,
            owner_table=table_name_for(owner),
            target_table=inflection.tableize(target),
            type_column=f"{self.as_name}_type" if self.as_name else None,
            options=freeze_options(self.options),
        )


class HasOne(_HasAssociation):
    """``has_one``."""

    kind = AssociationKind.HAS_ONE


class HasMany(_HasAssociation):
    """``has_many``; the association name is plural."""

    kind = AssociationKind.HAS_MANY

    def target_class_name(self) -> str | None:
        return self.class_name or inflection.camelize(
            inflection.singularize(self.name)
        )


class HasAndBelongsToMany(Association):
    """``has_and_belongs_to_many``: rows are linked through a join table."""

    kind = AssociationKind.HAS_AND_BELONGS_TO_MANY

    def __init__(self, *, join_table: str | None = None, **options: Any) -> None:
        super().__init__(**options)
        self.join_table = join_table
        if join_table is not None:
            self.options["join_table"] = join_table

    def target_class_name(self) -> str | None:
        return self.class_name or inflection.camelize(
            inflection.singularize(self.name)
        )

    def describe(self, owner: type) -> AssociationDescriptor:
        target = self.target_class_name()
        owner_table = table_name_for(owner)
        target_table = inflection.tableize(target)
        return AssociationDescriptor(
            name=self.name,
            kind=self.kind,
            owner_type_name=owner.__name__,
            target_type_name=target,
            foreign_key=self.foreign_key or inflection.foreign_key(owner.__name__),
            dependent=self.dependent,
            owner_table=owner_table,
            target_table=target_table,
            join_table=self.join_table
            or "_".join(sorted((owner_table, target_table))),
            options=freeze_options(self.options),
        )


class Model:
    """Base class for declarative models.

    Subclasses collect the `Association` attributes of their class body (and
    of their bases) into ``__associations__``.
    """

    __associations__: ClassVar[dict[str, Association]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        associations = dict(cls.__associations__)
        for name, value in vars(cls).items():
            if isinstance(value, Association):
                associations[name] = value
        cls.__associations__ = associations


class DeclarativeMetadataProvider(MetadataProvider):
    """MetadataProvider for `Model` subclasses."""

    def supports(self, model_type: type) -> bool:
        return isinstance(model_type, type) and issubclass(model_type, Model)

    def get_association(
        self, model_type: type, name: str
    ) -> AssociationDescriptor | None:
        if (declaration := model_type.__associations__.get(name)) is None:
            return None
        return declaration.describe(model_type)
