"""Unit tests for domain error classes."""

from relmatch.domain import errors

# pylint: disable=magic-value-comparison


def test_unsupported_kind_sets_attributes():
    """The offending kind is kept on the exception."""
    exception = errors.UnsupportedKindError("has_few")
    assert exception.kind == "has_few"
    assert isinstance(exception, errors.MatcherError)


def test_unsupported_model_message():
    """The message names the model class."""

    class Widget:  # pylint: disable=too-few-public-methods
        """A class no provider knows about."""

    exception = errors.UnsupportedModelError(Widget)
    assert exception.model_type is Widget
    assert str(exception) == "No metadata provider supports model type 'Widget'."


def test_invalid_polymorphic_option_sets_attributes():
    """The rejected value is kept on the exception."""
    exception = errors.InvalidPolymorphicOptionError("false")
    assert exception.value == "false"
    assert isinstance(exception, errors.MatcherError)
    assert str(exception) == "Invalid polymorphic option: 'false' (expected a bool)"
