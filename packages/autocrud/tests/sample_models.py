"""
Record models used by the tests.
"""

import sqlalchemy as sa

from basecore.db import Base
from autocrud.persistence import RecordMixin


class SampleRecord(Base, RecordMixin):
    """The {String, Int} shape used by the end-to-end scenario."""

    __tablename__ = "sample_records"

    String = sa.Column(sa.String(255))
    Int = sa.Column(sa.Integer)


class Gadget(Base, RecordMixin):
    """Shape with a required column and non-JSON-native types."""

    __tablename__ = "gadgets"

    Name = sa.Column(sa.String(100), nullable=False)
    Price = sa.Column(sa.Float, nullable=True)
    InStock = sa.Column(sa.Boolean, nullable=False, default=True)
    ReleasedAt = sa.Column(sa.DateTime, nullable=True)


class EvolvingRecord(Base, RecordMixin):
    """Mapped with one more column than the table created by hand in the migration tests."""

    __tablename__ = "evolving_records"

    Name = sa.Column(sa.String(50))
    Note = sa.Column(sa.Text, server_default="none")
