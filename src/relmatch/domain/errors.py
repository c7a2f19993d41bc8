"""Domain-layer error definitions.

Failed matches are never reported through exceptions; these errors signal
programming mistakes such as unknown constants, non-boolean flags or
unsupported model types.
"""


class MatcherError(Exception):
    """Base class for association matcher errors."""


class UnsupportedKindError(MatcherError):
    """Raised when an association kind string is not recognized."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"Unsupported association kind: {kind!r}")
        self.kind = kind


class InvalidDependentOptionError(MatcherError):
    """Raised when a dependent option string is not recognized."""

    def __init__(self, option: object) -> None:
        super().__init__(f"Invalid dependent option: {option!r}")
        self.option = option


class UnsupportedModelError(MatcherError):
    """Raised when no metadata provider can reflect on a model type."""

    def __init__(self, model_type: type) -> None:
        super().__init__(
            f"No metadata provider supports model type '{model_type.__name__}'."
        )
        self.model_type = model_type


class InvalidPolymorphicOptionError(MatcherError):
    """Raised when a polymorphic expectation is not a boolean."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid polymorphic option: {value!r} (expected a bool)")
        self.value = value
