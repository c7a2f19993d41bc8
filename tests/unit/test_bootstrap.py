"""Unit tests for reader wiring in relmatch.bootstrap."""

from relmatch import bootstrap
from relmatch.adapters.metadata import (
    DeclarativeMetadataProvider,
    DispatchingMetadataProvider,
    SqlAlchemyMetadataProvider,
)
from relmatch.adapters.schema import SqlAlchemySchemaInspector


def test_build_metadata_provider_covers_both_model_styles():
    """The default provider dispatches to declarative then SQLAlchemy models."""
    provider = bootstrap.build_metadata_provider()
    assert isinstance(provider, DispatchingMetadataProvider)
    assert [type(p) for p in provider.providers] == [
        DeclarativeMetadataProvider,
        SqlAlchemyMetadataProvider,
    ]


def test_build_reader_from_url():
    """A URL string is turned into an engine-backed schema inspector."""
    reader = bootstrap.build_reader("sqlite+pysqlite:///:memory:")
    assert isinstance(reader.inspector, SqlAlchemySchemaInspector)
    assert reader.inspector.bind.dialect.name == "sqlite"


def test_build_reader_accepts_engine_and_provider(sqlite_engine_memory):
    """Engines are used as-is and custom providers are kept."""
    provider = DeclarativeMetadataProvider()
    reader = bootstrap.build_reader(sqlite_engine_memory, provider=provider)
    assert reader.inspector.bind is sqlite_engine_memory
    assert reader.provider is provider


def test_default_reader_is_built_once_from_environment(monkeypatch):
    """The default reader is built lazily from RELMATCH_DB_URL and reused."""
    monkeypatch.setenv("RELMATCH_DB_URL", "sqlite+pysqlite:///:memory:")
    first = bootstrap.get_default_reader()
    assert bootstrap.get_default_reader() is first

    bootstrap.reset_default_reader()
    assert bootstrap.get_default_reader() is not first


def test_set_default_reader(sqlite_reader):
    """An explicitly set reader is returned as the default."""
    bootstrap.set_default_reader(sqlite_reader)
    assert bootstrap.get_default_reader() is sqlite_reader
