"""
Persistence

SQLAlchemy-backed Store, schema bootstrap and record model helpers.
"""

from autocrud.persistence.migrations import auto_migrate
from autocrud.persistence.models import ID_FIELD, RecordMixin, record_fields, record_to_dict
from autocrud.persistence.store import SQLAlchemyStore

__all__ = [
    "ID_FIELD",
    "RecordMixin",
    "SQLAlchemyStore",
    "auto_migrate",
    "record_fields",
    "record_to_dict",
]
