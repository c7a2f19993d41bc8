"""Global pytest fixtures for RELMATCH."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from relmatch import bootstrap

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.datagen",
]


@pytest.fixture(autouse=True)
def _isolated_default_reader() -> Iterator[None]:
    """Make sure no test leaks a default reader into another."""
    bootstrap.reset_default_reader()
    yield
    bootstrap.reset_default_reader()
