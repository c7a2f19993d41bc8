"""Rule evaluator for association matchers.

`evaluate` runs the checks below in order and stops at the first failure, so
an evaluation produces at most one diagnostic:

1. the association exists
2. it is of the expected kind
3. its foreign key columns / join table exist
4. polymorphism, when expected
5. ``through``, when expected: declared, equal, and naming an association
   the owner declares
6. ``as``, when expected
7. ``dependent``, when expected
8. raw options, as a subset check
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from . import diagnostics
from .value_objects import (
    AssociationReading,
    ExpectedConstraints,
    FailureReason,
    MatchResult,
)

_MISSING = object()

Check = Callable[[AssociationReading, ExpectedConstraints, str], MatchResult | None]


def _fail(
    reason: FailureReason, model_name: str, expected: ExpectedConstraints, text: str
) -> MatchResult:
    return MatchResult(
        success=False,
        diagnostic=diagnostics.failure_message(model_name, expected, text),
        reason=reason,
    )


def options_equal(expected: object, actual: object) -> bool:
    """Compare an expected option value with a reflected one.

    Booleans only equal booleans (``1`` is not ``True``), enum members compare
    by value so ``"destroy"`` equals ``DependentOption.DESTROY``, everything
    else uses ``==``.
    """
    if isinstance(expected, bool) or isinstance(actual, bool):
        return (
            isinstance(expected, bool)
            and isinstance(actual, bool)
            and expected is actual
        )
    if isinstance(expected, Enum):
        expected = expected.value
    if isinstance(actual, Enum):
        actual = actual.value
    return expected == actual


# --- individual checks ---


def _check_kind(reading, expected, model_name):
    actual = reading.descriptor.kind
    if actual is expected.kind:
        return None
    return _fail(
        FailureReason.WRONG_KIND,
        model_name,
        expected,
        diagnostics.wrong_kind(expected.kind, actual),
    )


def _check_backing(reading, expected, model_name):
    if (problem := reading.backing_problem) is None:
        return None
    if problem.reason is FailureReason.MISSING_JOIN_TABLE:
        text = diagnostics.missing_join_table(problem.table)
    else:
        text = diagnostics.missing_foreign_key(problem.table, problem.columns)
    return _fail(problem.reason, model_name, expected, text)


def _check_polymorphic(reading, expected, model_name):
    if expected.polymorphic is None:
        return None
    actual = reading.descriptor.is_polymorphic
    if actual is expected.polymorphic:
        return None
    return _fail(
        FailureReason.POLYMORPHIC_MISMATCH,
        model_name,
        expected,
        diagnostics.polymorphic_mismatch(expected.polymorphic, actual),
    )


def _check_through(reading, expected, model_name):
    if expected.through is None:
        return None
    actual = reading.descriptor.through
    if actual is not None and actual != expected.through:
        return _fail(
            FailureReason.THROUGH_MISMATCH,
            model_name,
            expected,
            diagnostics.through_mismatch(expected.name, expected.through, actual),
        )
    if actual is None or not reading.through_declared:
        return _fail(
            FailureReason.THROUGH_MISSING,
            model_name,
            expected,
            diagnostics.through_missing(model_name, expected.through),
        )
    return None


def _check_as(reading, expected, model_name):
    if expected.as_name is None:
        return None
    actual = reading.descriptor.as_name
    if actual == expected.as_name:
        return None
    return _fail(
        FailureReason.AS_MISMATCH,
        model_name,
        expected,
        diagnostics.as_mismatch(expected.name, expected.as_name, actual),
    )


def _check_dependent(reading, expected, model_name):
    if expected.dependent is None:
        return None
    actual = reading.descriptor.dependent
    if actual is expected.dependent:
        return None
    return _fail(
        FailureReason.DEPENDENT_MISMATCH,
        model_name,
        expected,
        diagnostics.dependent_mismatch(expected.name, expected.dependent, actual),
    )


def _check_raw_options(reading, expected, model_name):
    if not expected.raw_options:
        return None
    actual_options = reading.descriptor.extended_options()
    for key, value in expected.raw_options.items():
        actual = actual_options.get(key, _MISSING)
        if actual is _MISSING or not options_equal(value, actual):
            return _fail(
                FailureReason.OPTION_MISMATCH,
                model_name,
                expected,
                diagnostics.option_mismatch(
                    key, value, None if actual is _MISSING else actual
                ),
            )
    return None


CHECKS: tuple[Check, ...] = (
    _check_kind,
    _check_backing,
    _check_polymorphic,
    _check_through,
    _check_as,
    _check_dependent,
    _check_raw_options,
)


def evaluate(
    reading: AssociationReading | None,
    expected: ExpectedConstraints,
    model_name: str,
) -> MatchResult:
    """Evaluate a reflected association against expectations.

    Args:
        reading: What the reflection reader found, or ``None`` when the model
            declares no association of the expected name.
        expected: The constraints configured on the matcher.
        model_name: Class name of the candidate, used in diagnostics.

    Returns:
        A successful `MatchResult`, or a failed one carrying the reason and
        diagnostic of the first failing check.
    """
    if reading is None:
        return _fail(
            FailureReason.NO_SUCH_ASSOCIATION,
            model_name,
            expected,
            diagnostics.no_such_association(model_name, expected.name),
        )
    for check in CHECKS:
        if (result := check(reading, expected, model_name)) is not None:
            return result
    return MatchResult(success=True)
