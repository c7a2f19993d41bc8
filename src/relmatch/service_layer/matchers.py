"""Association matchers.

A matcher is built for one association kind and name, optionally narrowed
with chained constraints, then evaluated against a model instance (or class)::

    matcher = have_many("children").through("conceptions").dependent("destroy")
    if not matcher.matches(Parent()):
        print(matcher.failure_message)

Chained calls never modify the matcher they are called on; each returns a new
matcher with merged constraints. ``matches`` reflects on the candidate afresh
on every call.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from relmatch import bootstrap
from relmatch.domain import diagnostics, rules
from relmatch.domain.errors import InvalidPolymorphicOptionError
from relmatch.domain.value_objects import (
    AssociationKind,
    DependentOption,
    ExpectedConstraints,
    MatchResult,
    freeze_options,
)
from relmatch.service_layer.reflection import ReflectionReader

logger = logging.getLogger(__name__)


class AssociationMatcher:
    """Check that a model declares an association as expected.

    Attributes:
        expected: The configured constraints.
        reader: Reflection reader to use; `bootstrap.get_default_reader` is
            used when ``None``.
        result: Outcome of the latest `matches` call, ``None`` before it.
    """

    def __init__(
        self, expected: ExpectedConstraints, reader: ReflectionReader | None = None
    ) -> None:
        self.expected = expected
        self.reader = reader
        self.result: MatchResult | None = None
        self._model_name: str | None = None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.description!r}>"

    # --- chainable configuration ---

    def _with(self, **changes: Any) -> AssociationMatcher:
        return AssociationMatcher(replace(self.expected, **changes), self.reader)

    def dependent(self, option: DependentOption | str) -> AssociationMatcher:
        """Require the given ``dependent`` option."""
        return self._with(dependent=DependentOption.from_value(option))

    def through(self, name: str) -> AssociationMatcher:
        """Require the association to go through association ``name``."""
        return self._with(through=name)

    def as_(self, name: str) -> AssociationMatcher:
        """Require the ``as`` (polymorphic interface) option to be ``name``."""
        return self._with(as_name=name)

    def with_options(
        self, options: Mapping[str, object] | None = None, **kwargs: object
    ) -> AssociationMatcher:
        """Require declared options; keys not given are not checked.

        ``as_`` is accepted as a spelling of ``as``.
        """
        merged = dict(self.expected.raw_options)
        merged.update(options or {})
        merged.update(kwargs)
        if "as_" in merged:
            merged["as"] = merged.pop("as_")
        return self._with(raw_options=freeze_options(merged))

    def using(self, reader: ReflectionReader) -> AssociationMatcher:
        """Evaluate with ``reader`` instead of the default reader."""
        return AssociationMatcher(self.expected, reader)

    # --- evaluation ---

    def matches(self, candidate: object) -> bool:
        """Evaluate the matcher against a model instance or model class.

        Args:
            candidate: A model instance or a model class.

        Returns:
            bool: True if the association is declared as expected.
        """
        model_type = candidate if isinstance(candidate, type) else type(candidate)
        self.result = None
        self._model_name = None
        reader = self.reader or bootstrap.get_default_reader()

        reading = reader.read(model_type, self.expected.name)
        self._model_name = model_type.__name__
        self.result = rules.evaluate(reading, self.expected, self._model_name)

        if self.result.success:
            logger.debug("%s: %s matched", self._model_name, self.description)
        else:
            logger.debug(
                "%s: %s failed (%s)",
                self._model_name,
                self.description,
                self.result.reason.value if self.result.reason else "unknown",
            )
        return self.result.success

    # --- messages ---

    @property
    def failure_message(self) -> str:
        """Why the latest `matches` call failed; empty if it succeeded or never ran."""
        return self.result.diagnostic if self.result is not None else ""

    @property
    def negative_failure_message(self) -> str:
        """Message for a match that was expected to fail."""
        if self._model_name is None:
            return ""
        return diagnostics.negative_failure_message(self._model_name, self.expected)

    @property
    def description(self) -> str:
        """Short description, e.g. ``"belong to parent"``."""
        return diagnostics.description(self.expected)


def _polymorphic_flag(value: object) -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    raise InvalidPolymorphicOptionError(value)


def _build(
    kind: AssociationKind,
    name: str,
    reader: ReflectionReader | None,
    options: dict[str, Any],
) -> AssociationMatcher:
    polymorphic = options.pop("polymorphic", None)
    dependent = options.pop("dependent", None)
    as_name = options.pop("as_", None)
    declared_as = options.pop("as", None)
    if as_name is None:
        as_name = declared_as
    expected = ExpectedConstraints(
        kind=kind,
        name=name,
        polymorphic=_polymorphic_flag(polymorphic),
        through=options.pop("through", None),
        as_name=as_name,
        dependent=None if dependent is None else DependentOption.from_value(dependent),
        raw_options=freeze_options(options),
    )
    return AssociationMatcher(expected, reader)


def belong_to(
    name: str, *, reader: ReflectionReader | None = None, **options: Any
) -> AssociationMatcher:
    """Matcher for a ``belongs_to`` association.

    Example:
        ``belong_to("gradeable", polymorphic=True)``
    """
    return _build(AssociationKind.BELONGS_TO, name, reader, options)


def have_one(
    name: str, *, reader: ReflectionReader | None = None, **options: Any
) -> AssociationMatcher:
    """Matcher for a ``has_one`` association."""
    return _build(AssociationKind.HAS_ONE, name, reader, options)


def have_many(
    name: str, *, reader: ReflectionReader | None = None, **options: Any
) -> AssociationMatcher:
    """Matcher for a ``has_many`` association."""
    return _build(AssociationKind.HAS_MANY, name, reader, options)


def have_and_belong_to_many(
    name: str, *, reader: ReflectionReader | None = None, **options: Any
) -> AssociationMatcher:
    """Matcher for a ``has_and_belongs_to_many`` association."""
    return _build(AssociationKind.HAS_AND_BELONGS_TO_MANY, name, reader, options)
