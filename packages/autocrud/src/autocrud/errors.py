"""
Exceptions raised by the store and decoder collaborators.

The engine converts these into a Status at its boundary; only
MigrationError (raised by register_type) reaches callers.
"""


class AutoCrudError(Exception):
    """Base class for all autocrud errors."""


class DecodeError(AutoCrudError, ValueError):
    """The wire payload could not be decoded onto a record."""


class StoreError(AutoCrudError):
    """Any failure of the persistence layer."""


class RecordNotFoundError(StoreError):
    """No row matches the given identifier."""

    def __init__(self, table: str, record_id: int):
        super().__init__(f"record not found: {table} ID={record_id}")
        self.table = table
        self.record_id = record_id


class MigrationError(StoreError):
    """Schema bootstrap for a record type failed."""
