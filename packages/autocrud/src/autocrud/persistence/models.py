"""
Record model helpers.

Any SQLAlchemy declarative model with an integer primary key named ID can be
registered. RecordMixin declares that key for models that want it.
"""

from typing import Any

from sqlalchemy import Column, Integer, inspect

ID_FIELD = "ID"

# largest value a signed 64-bit INTEGER column holds
MAX_ID = 2**63 - 1


class RecordMixin:
    """Common fields for all registered record types."""

    ID = Column(Integer, primary_key=True, autoincrement=True)


def record_fields(model: type) -> list[str]:
    """Attribute names of the mapped columns of model, ID first."""
    keys = [attr.key for attr in inspect(model).column_attrs]
    # mixin columns are mapped after the class's own columns
    if ID_FIELD in keys:
        keys.remove(ID_FIELD)
        keys.insert(0, ID_FIELD)
    return keys


def record_to_dict(record: Any) -> dict[str, Any]:
    """Convert a record to a plain dict keyed by attribute name."""
    return {key: getattr(record, key) for key in record_fields(type(record))}


def table_name(model: type) -> str:
    return inspect(model).local_table.name
