from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.schema import MetaData

from rundown.core.exceptions import ConfigurationError
from rundown.infra.settings import settings

# Deterministic constraint/index names
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def _connect_args(url: str) -> dict[str, object]:
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.database_url,
    echo=settings.echo_sql,
    pool_pre_ping=True,
    future=True,
    connect_args=_connect_args(settings.database_url),
)


SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    future=True,
)


def get_engine(for_test: bool = False) -> Engine:
    """Get a database engine.

    Returns the global engine by default. When ``for_test`` is True a new
    engine is created for ``settings.test_database_url``; ConfigurationError is
    raised if that URL is not set, so test runs never touch the main database.
    """
    if not for_test:
        return engine

    if not settings.test_database_url:
        raise ConfigurationError("TEST_DATABASE_URL must be set to use the test database")

    return create_engine(
        settings.test_database_url,
        echo=False,
        pool_pre_ping=True,
        future=True,
        connect_args=_connect_args(settings.test_database_url),
    )


def get_sessionmaker(for_test: bool = False) -> sessionmaker:
    """Get a session factory.

    Returns the global sessionmaker for default usage. When ``for_test`` is True,
    returns a temporary sessionmaker bound to a test engine.
    """
    if not for_test:
        return SessionLocal
    test_engine = get_engine(for_test=True)
    return sessionmaker(bind=test_engine, autoflush=False, autocommit=False, future=True)


def init_db(bind: Engine | None = None) -> None:
    """Create the rundown tables if they do not exist yet."""
    # Register mapped tables on Base.metadata
    from rundown.infra import persistence  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)

