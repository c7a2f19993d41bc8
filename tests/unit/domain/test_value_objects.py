"""Unit tests for association value objects."""

import dataclasses

import pytest

from relmatch.domain.errors import InvalidDependentOptionError, UnsupportedKindError
from relmatch.domain.value_objects import (
    EMPTY_OPTIONS,
    AssociationKind,
    DependentOption,
    ExpectedConstraints,
    freeze_options,
)

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize("value", ["has_many", AssociationKind.HAS_MANY])
def test_kind_from_value(value):
    """Kinds convert from their names and from themselves."""
    assert AssociationKind.from_value(value) is AssociationKind.HAS_MANY


def test_kind_from_unknown_value_raises():
    """An unknown kind is a programming error."""
    with pytest.raises(UnsupportedKindError, match="Unsupported association kind: 'has_few'"):
        AssociationKind.from_value("has_few")


def test_kind_verb_phrases():
    """Each kind has a description phrase."""
    assert [k.verb_phrase for k in AssociationKind] == [
        "belong to",
        "have one",
        "have many",
        "have and belong to many",
    ]


def test_dependent_from_unknown_value_raises():
    """An unknown dependent option is a programming error."""
    with pytest.raises(InvalidDependentOptionError) as excinfo:
        DependentOption.from_value("obliterate")
    assert excinfo.value.option == "obliterate"


def test_dependent_compares_equal_to_its_name():
    """Dependent options are str enums."""
    assert DependentOption.from_value("destroy") == "destroy"


def test_freeze_options_is_read_only_copy():
    """Frozen options neither alias nor allow mutation."""
    source = {"validate": False}
    frozen = freeze_options(source)
    source["validate"] = True
    assert frozen["validate"] is False
    with pytest.raises(TypeError):
        frozen["validate"] = True  # type: ignore[index]


def test_freeze_empty_options_returns_shared_empty_mapping():
    """No options → the shared empty mapping."""
    assert freeze_options(None) is EMPTY_OPTIONS
    assert freeze_options({}) is EMPTY_OPTIONS


def test_expected_constraints_are_frozen():
    """Expectations cannot be mutated after construction."""
    expected = ExpectedConstraints(AssociationKind.HAS_ONE, "detail")
    with pytest.raises(dataclasses.FrozenInstanceError):
        expected.name = "other"  # type: ignore[misc]


def test_extended_options_merge_declared_and_derived(make_descriptor):
    """Derived values are added to (and win over) the declared options."""
    descriptor = make_descriptor(
        AssociationKind.HAS_MANY,
        dependent=DependentOption.DESTROY,
        options=freeze_options({"validate": False, "foreign_key": "stale"}),
    )
    assert descriptor.extended_options() == {
        "validate": False,
        "foreign_key": "parent_id",
        "polymorphic": False,
        "dependent": DependentOption.DESTROY,
        "class_name": "Child",
    }
