"""Configuration utilities for RELMATCH.

Matchers that are not given a reflection reader explicitly fall back to a
default reader built from the database named by ``RELMATCH_DB_URL``.
"""

import os

DB_URL_ENV_VAR = "RELMATCH_DB_URL"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """Raised when the RELMATCH_DB_URL environment variable is not set."""

    def __init__(self) -> None:
        super().__init__(
            f"{DB_URL_ENV_VAR} is not set; pass a reader to the matcher "
            "or configure one with relmatch.bootstrap.set_default_reader()."
        )


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `RELMATCH_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `RELMATCH_DB_URL` is not set.
    """
    if not (url := os.environ.get(DB_URL_ENV_VAR)):
        raise DatabaseUrlNotSetError
    return url
