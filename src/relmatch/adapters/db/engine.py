"""Database engine factory.

Schema reflection only reads the catalog, so the one connection setting that
matters is SQLite's foreign key switch, which is off by default.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine
    from sqlalchemy.pool import ConnectionPoolEntry


def is_sqlite(url: str | URL) -> bool:
    """Return True if ``url`` names a SQLite database, whatever the driver."""
    return make_url(url).get_backend_name() == "sqlite"


def _enable_foreign_keys(  # pylint: disable=unused-argument
    dbapi_conn: SQLiteConnection, conn_record: ConnectionPoolEntry
) -> None:
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA foreign_keys=ON;")
    finally:
        cur.close()


def make_engine(url: str | URL, **engine_kwargs: Any) -> Engine:
    """Create the Engine a reflection reader inspects.

    Args:
        url: Database connection URL (str or :class:`URL`).
        **engine_kwargs: Passed on to :func:`sqlalchemy.create_engine`
            (e.g. ``echo=True``).

    Returns:
        Engine: New engine; SQLite connections enforce foreign keys.
    """
    engine = create_engine(url, **engine_kwargs)
    if is_sqlite(url):
        event.listen(engine, "connect", _enable_foreign_keys)
    return engine
