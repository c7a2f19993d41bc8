"""Wire reflection readers from their adapters.

`build_reader` assembles a `ReflectionReader` from a database URL or engine;
`get_default_reader` returns the process-wide reader used by matchers that
were not given one, building it from `config.get_db_url` on first use.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.engine import URL

from relmatch import config
from relmatch.adapters.db.engine import make_engine
from relmatch.adapters.metadata import (
    DeclarativeMetadataProvider,
    DispatchingMetadataProvider,
    SqlAlchemyMetadataProvider,
)
from relmatch.adapters.schema import SqlAlchemySchemaInspector
from relmatch.service_layer.reflection import ReflectionReader

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

    from relmatch.interfaces import MetadataProvider

logger = logging.getLogger(__name__)

_default_reader: ReflectionReader | None = None


def build_metadata_provider() -> MetadataProvider:
    """Provider covering declarative models and SQLAlchemy mapped classes."""
    return DispatchingMetadataProvider(
        [DeclarativeMetadataProvider(), SqlAlchemyMetadataProvider()]
    )


def build_reader(
    bind: str | URL | Engine | Connection,
    provider: MetadataProvider | None = None,
) -> ReflectionReader:
    """Build a reflection reader against a database.

    Args:
        bind: A database URL, or an existing Engine / Connection.
        provider: Metadata provider; defaults to `build_metadata_provider()`.

    Returns:
        ReflectionReader: Reader using a `SqlAlchemySchemaInspector` on ``bind``.
    """
    if isinstance(bind, (str, URL)):
        bind = make_engine(bind)
    return ReflectionReader(
        provider or build_metadata_provider(), SqlAlchemySchemaInspector(bind)
    )


def set_default_reader(reader: ReflectionReader | None) -> None:
    """Set (or with ``None``, clear) the reader used by matchers without one."""
    global _default_reader  # pylint: disable=global-statement
    _default_reader = reader


def reset_default_reader() -> None:
    """Forget the default reader; the next lookup rebuilds it from config."""
    set_default_reader(None)


def get_default_reader() -> ReflectionReader:
    """Return the default reader, building it from the environment if needed.

    Raises:
        DatabaseUrlNotSetError: If no reader was set and `RELMATCH_DB_URL`
            is not set.
    """
    global _default_reader  # pylint: disable=global-statement
    if _default_reader is None:
        url = config.get_db_url()
        logger.info("Building default reflection reader from %s", config.DB_URL_ENV_VAR)
        _default_reader = build_reader(url)
    return _default_reader
