"""
Pytest fixtures for autocrud tests.
"""

import pytest
from sqlalchemy.pool import StaticPool

from basecore.db import create_engine_from_url
from autocrud.engines import register_type
from autocrud.persistence import SQLAlchemyStore
from sample_models import SampleRecord


class RecordingLogger:
    """Logger that keeps every message it is given."""

    def __init__(self):
        self.messages: list[tuple[str, str]] = []

    def error(self, msg, *args, **kwargs):
        self.messages.append(("error", str(msg)))

    def warning(self, msg, *args, **kwargs):
        self.messages.append(("warning", str(msg)))

    def info(self, msg, *args, **kwargs):
        self.messages.append(("info", str(msg)))


@pytest.fixture
def db_engine():
    """Fresh in-memory SQLite database shared across threads."""
    engine = create_engine_from_url(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    yield engine
    engine.dispose()


@pytest.fixture
def store(db_engine):
    """SQLAlchemy store on the in-memory database."""
    return SQLAlchemyStore(db_engine)


@pytest.fixture
def log():
    """Recording logger."""
    return RecordingLogger()


@pytest.fixture
def sample_rt(store):
    """Registered SampleRecord type."""
    return register_type(SampleRecord, store)
