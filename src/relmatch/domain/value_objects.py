"""Value objects shared by the reflection reader, the rule evaluator and the matchers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from .errors import InvalidDependentOptionError, UnsupportedKindError

EMPTY_OPTIONS: Mapping[str, object] = MappingProxyType({})


def freeze_options(options: Mapping[str, object] | None) -> Mapping[str, object]:
    """Return a read-only copy of an option mapping (insertion order kept)."""
    if not options:
        return EMPTY_OPTIONS
    return MappingProxyType(dict(options))


class AssociationKind(str, Enum):
    """Kinds of association an ORM model can declare."""

    BELONGS_TO = "belongs_to"
    HAS_ONE = "has_one"
    HAS_MANY = "has_many"
    HAS_AND_BELONGS_TO_MANY = "has_and_belongs_to_many"

    @classmethod
    def from_value(cls, value: AssociationKind | str) -> AssociationKind:
        """Convert a kind name (e.g. ``"has_many"``) to an AssociationKind.

        Raises:
            UnsupportedKindError: if the value names no known kind.
        """
        try:
            return cls(value)
        except ValueError as e:
            raise UnsupportedKindError(value) from e

    @property
    def verb_phrase(self) -> str:
        """Phrase used in matcher descriptions, e.g. ``"have many"``."""
        return _VERB_PHRASES[self]


_VERB_PHRASES = {
    AssociationKind.BELONGS_TO: "belong to",
    AssociationKind.HAS_ONE: "have one",
    AssociationKind.HAS_MANY: "have many",
    AssociationKind.HAS_AND_BELONGS_TO_MANY: "have and belong to many",
}


class DependentOption(str, Enum):
    """Cascade behaviour applied to associated records when the owner is destroyed."""

    DESTROY = "destroy"
    DELETE = "delete"
    NULLIFY = "nullify"
    RESTRICT = "restrict"
    NONE = "none"

    @classmethod
    def from_value(cls, value: DependentOption | str) -> DependentOption:
        """Convert an option name (e.g. ``"destroy"``) to a DependentOption.

        Raises:
            InvalidDependentOptionError: if the value names no known option.
        """
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidDependentOptionError(value) from e


class FailureReason(Enum):
    """Why an evaluation failed. One reason per failed evaluation."""

    NO_SUCH_ASSOCIATION = "no_such_association"
    WRONG_KIND = "wrong_kind"
    MISSING_FOREIGN_KEY = "missing_foreign_key"
    MISSING_JOIN_TABLE = "missing_join_table"
    POLYMORPHIC_MISMATCH = "polymorphic_mismatch"
    THROUGH_MISSING = "through_missing"
    THROUGH_MISMATCH = "through_mismatch"
    AS_MISMATCH = "as_mismatch"
    DEPENDENT_MISMATCH = "dependent_mismatch"
    OPTION_MISMATCH = "option_mismatch"


@dataclass(frozen=True)
class AssociationDescriptor:  # pylint: disable=too-many-instance-attributes
    """Read-only snapshot of one declared association.

    Attributes:
        name: Association name as declared on the owner (e.g. ``"children"``).
        kind: The association kind.
        owner_type_name: Class name of the declaring model.
        target_type_name: Class name of the associated model. ``None`` for a
            polymorphic belongs-to, whose target is only known per row.
        foreign_key: Name of the foreign key column. ``None`` when the
            association has no direct key (``through`` or habtm).
        is_polymorphic: True for ``polymorphic`` belongs-to associations.
        through: Name of the intermediate association, if any.
        as_name: Polymorphic interface name on the target (``as`` option).
        dependent: Declared dependent option; ``None`` when undeclared.
        owner_table: Table backing the declaring model.
        target_table: Table backing the associated model, if known.
        type_column: Discriminator column for polymorphic / ``as`` associations.
        join_table: Join table for habtm associations.
        options: Options exactly as declared.
    """

    name: str
    kind: AssociationKind
    owner_type_name: str
    target_type_name: str | None
    foreign_key: str | None = None
    is_polymorphic: bool = False
    through: str | None = None
    as_name: str | None = None
    dependent: DependentOption | None = None
    owner_table: str | None = None
    target_table: str | None = None
    type_column: str | None = None
    join_table: str | None = None
    options: Mapping[str, object] = field(default=EMPTY_OPTIONS)

    def extended_options(self) -> dict[str, object]:
        """Declared options merged with the values derived from reflection.

        Derived values win so that an option matched through the extended set
        always agrees with the dedicated descriptor fields.
        """
        derived: dict[str, object] = {
            "foreign_key": self.foreign_key,
            "polymorphic": self.is_polymorphic,
            "through": self.through,
            "as": self.as_name,
            "dependent": self.dependent,
            "class_name": self.target_type_name,
            "join_table": self.join_table,
        }
        merged = dict(self.options)
        merged.update({k: v for k, v in derived.items() if v is not None})
        return merged


@dataclass(frozen=True)
class BackingProblem:
    """Storage required by an association that the schema does not provide."""

    reason: FailureReason
    table: str
    columns: tuple[str, ...] = ()


@dataclass(frozen=True)
class AssociationReading:
    """What the reflection reader found for one association.

    Attributes:
        descriptor: The declared association.
        backing_problem: Storage the schema is missing, if any.
        through_declared: False when the association goes ``through`` a name
            the owner declares no association for.
    """

    descriptor: AssociationDescriptor
    backing_problem: BackingProblem | None = None
    through_declared: bool = True


@dataclass(frozen=True)
class ExpectedConstraints:
    """Expectations configured on a matcher before evaluation.

    ``None`` means "not constrained" for every optional field.
    """

    kind: AssociationKind
    name: str
    polymorphic: bool | None = None
    through: str | None = None
    as_name: str | None = None
    dependent: DependentOption | None = None
    raw_options: Mapping[str, object] = field(default=EMPTY_OPTIONS)


@dataclass(frozen=True)
class MatchResult:
    """Outcome of one evaluation."""

    success: bool
    diagnostic: str = ""
    reason: FailureReason | None = None
