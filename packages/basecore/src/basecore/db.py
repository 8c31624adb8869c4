import functools

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from basecore.settings import get_settings

Base = declarative_base()


def _connect_args(url: str, statement_timeout: float) -> dict:
    if not statement_timeout:
        return {}
    if url.startswith("sqlite"):
        # sqlite3 only knows the lock wait timeout
        return {"timeout": statement_timeout}
    if url.startswith("postgresql"):
        return {"options": f"-c statement_timeout={int(statement_timeout * 1000)}"}
    return {}


def create_engine_from_url(url: str, **kwargs) -> Engine:
    """
    Create a SQLAlchemy engine for an explicit URL.

    Used by the CLI and tests, which do not go through the cached engine.
    Statement timeout and echo still come from settings unless overridden.
    """
    settings = get_settings()
    kwargs.setdefault("echo", settings.SQL_ECHO)
    kwargs.setdefault("connect_args", _connect_args(url, settings.STORE_STATEMENT_TIMEOUT))
    if not url.startswith("sqlite"):
        kwargs.setdefault("pool_pre_ping", True)
    return create_engine(url, **kwargs)


@functools.lru_cache()
def get_engine() -> Engine:
    """
    Get SQLAlchemy engine (cached).

    This function lazily initializes the engine to avoid import-time side effects.
    The engine is created using DATABASE_URL from settings.
    """
    settings = get_settings()
    return create_engine_from_url(settings.DATABASE_URL)


@functools.lru_cache()
def get_sessionmaker():
    """
    Get SQLAlchemy sessionmaker (cached).

    This function lazily initializes the sessionmaker to avoid import-time side effects.
    """
    engine = get_engine()
    # Records outlive their session; keep loaded state after commit
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
