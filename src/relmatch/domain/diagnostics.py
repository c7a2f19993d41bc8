"""Sentence templates for matcher failure messages.

Every function here is pure: it takes the names involved in a failure and
returns a stable sentence. Names are interpolated verbatim.
"""

from __future__ import annotations

from enum import Enum

from .value_objects import AssociationKind, ExpectedConstraints


def _show(value: object) -> str:
    """Render an option value the way it is written in a declaration."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, Enum):
        return str(value.value)
    if value is None:
        return "nothing"
    return str(value)


def expectation(model_name: str, expected: ExpectedConstraints) -> str:
    """``"<Model> to have a <kind> association called <name>"``."""
    return (
        f"{model_name} to have a {expected.kind.value} association "
        f"called {expected.name}"
    )


def failure_message(model_name: str, expected: ExpectedConstraints, reason: str) -> str:
    """Wrap a reason into the full failure message."""
    return f"Expected {expectation(model_name, expected)} ({reason})"


def negative_failure_message(model_name: str, expected: ExpectedConstraints) -> str:
    """Message for a match that was expected to fail but succeeded."""
    return f"Did not expect {expectation(model_name, expected)}"


def description(expected: ExpectedConstraints) -> str:
    """Short description, e.g. ``"have many children through conceptions"``."""
    text = f"{expected.kind.verb_phrase} {expected.name}"
    if expected.through is not None:
        text += f" through {expected.through}"
    if expected.as_name is not None:
        text += f" as {expected.as_name}"
    if expected.polymorphic is not None:
        text += f", polymorphic => {_show(expected.polymorphic)}"
    if expected.dependent is not None:
        text += f", dependent => {_show(expected.dependent)}"
    for key, value in expected.raw_options.items():
        text += f", {key} => {_show(value)}"
    return text


# --- reasons ---


def no_such_association(model_name: str, name: str) -> str:
    return f"no such association: {model_name} has no association called {name}"


def wrong_kind(expected: AssociationKind, actual: AssociationKind) -> str:
    return (
        "association exists but is of the wrong kind: "
        f"expected {expected.value}, got {actual.value}"
    )


def missing_foreign_key(table: str, columns: tuple[str, ...]) -> str:
    noun = "column" if len(columns) == 1 else "columns"
    return f"missing foreign key: {table} does not have {noun} {', '.join(columns)}"


def missing_join_table(table: str) -> str:
    return f"missing join table: join table {table} does not exist"


def polymorphic_mismatch(expected: bool, actual: bool) -> str:
    return f"polymorphic should be {_show(expected)}, but got {_show(actual)}"


def through_missing(model_name: str, through: str) -> str:
    return f"{model_name} does not have any relationship to {through}"


def through_mismatch(name: str, expected: str, actual: str) -> str:
    return f"expected {name} through {expected}, but got it through {actual}"


def as_mismatch(name: str, expected: str, actual: str | None) -> str:
    return f"{name} should be as {expected}, but got {_show(actual)}"


def dependent_mismatch(name: str, expected: object, actual: object) -> str:
    return (
        f"{name} should have {_show(expected)} dependency, but got {_show(actual)}"
    )


def option_mismatch(key: str, expected: object, actual: object) -> str:
    return f"expected {key} to be {_show(expected)}, but got {_show(actual)}"
