"""RELMATCH

Association matchers for ORM models. A matcher inspects a model's declared
relationships (belongs-to, has-one, has-many, has-and-belongs-to-many) and the
backing database schema, and reports whether the association is configured as
expected together with a human-readable failure message.

The package only logs through module loggers. To see what a matcher checked,
attach a Rich console handler with
``relmatch.logging.enable_console_logging()``.
"""

from relmatch.service_layer.matchers import (
    AssociationMatcher,
    belong_to,
    have_and_belong_to_many,
    have_many,
    have_one,
)

__all__ = [
    "AssociationMatcher",
    "__version__",
    "belong_to",
    "have_and_belong_to_many",
    "have_many",
    "have_one",
]
__version__ = "0.1.0"
