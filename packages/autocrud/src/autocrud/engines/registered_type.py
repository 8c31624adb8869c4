"""
Registered Type Engine

Binds one record type to one store and implements the five CRUD
operations for it. Operations never raise: every failure is logged once
through the caller's logger and converted to a Status.

    rt = register_type(Widget, store)
    status = rt.create(log, JsonDecoder(body))
    widget, status = rt.read(log, 1)
"""

import logging
from typing import Generic, TypeVar

from autocrud.contracts.envelope import ListEnvelope
from autocrud.contracts.protocols import Decoder, Logger, Store
from autocrud.contracts.types import Status
from autocrud.errors import RecordNotFoundError, StoreError
from autocrud.persistence.models import ID_FIELD

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


def _store_failure_status(log: Logger, error: StoreError) -> Status:
    log.error(error)
    if isinstance(error, RecordNotFoundError):
        return Status.NOT_FOUND
    return Status.INTERNAL_ERROR


class RegisteredType(Generic[RecordT]):
    """
    A record type exposed through the CRUD operations.

    Attributes:
        model: Record class; model() must build a blank record
        store: Store the records live in
    """

    def __init__(self, model: type[RecordT], store: Store):
        self._model = model
        self._store = store

    @property
    def model(self) -> type[RecordT]:
        return self._model

    @property
    def store(self) -> Store:
        return self._store

    @property
    def name(self) -> str:
        return self._model.__name__

    def create(self, log: Logger, decoder: Decoder) -> Status:
        """Decode a new record and insert it. The record itself is not returned."""
        record = self._model()

        try:
            decoder.decode(record)
        except (ValueError, TypeError) as e:
            # Could also be our fault, but nearly always it is bad input
            log.error(e)
            return Status.BAD_REQUEST

        try:
            self._store.insert(record)
        except StoreError as e:
            return _store_failure_status(log, e)
        return Status.OK

    def read(self, log: Logger, record_id: int) -> tuple[RecordT | None, Status]:
        """Fetch a record by ID."""
        try:
            record = self._store.first_by_id(self._model, record_id)
        except StoreError as e:
            return None, _store_failure_status(log, e)
        return record, Status.OK

    def list(self, log: Logger, page: int, limit: int) -> tuple[ListEnvelope[RecordT] | None, Status]:
        """
        Fetch one page of records plus the total count.

        page and limit are 0 when unset. The offset is page * limit, so a
        nonzero page with no limit still starts at the first record.
        Count and fetch are separate reads; they are not a consistent
        snapshot.
        """
        try:
            total = self._store.count(self._model)
        except StoreError as e:
            return None, _store_failure_status(log, e)

        offset = page * limit if page > 0 else None
        try:
            data = self._store.query(
                self._model,
                offset=offset,
                limit=limit if limit > 0 else None,
            )
        except StoreError as e:
            return None, _store_failure_status(log, e)

        return ListEnvelope(page=page, limit=limit, total=total, data=data), Status.OK

    def update(self, log: Logger, record_id: int, decoder: Decoder) -> Status:
        """Load a record, decode the (partial) payload over it and save it back."""
        try:
            record = self._store.first_by_id(self._model, record_id)
        except StoreError as e:
            return _store_failure_status(log, e)

        try:
            decoder.decode(record)
        except (ValueError, TypeError) as e:
            log.error(e)
            return Status.BAD_REQUEST
        # the addressed record keeps its ID whatever the payload says
        setattr(record, ID_FIELD, record_id)

        try:
            self._store.save(record)
        except StoreError as e:
            return _store_failure_status(log, e)
        return Status.OK

    def delete(self, log: Logger, record_id: int) -> Status:
        try:
            self._store.delete(self._model, record_id)
        except StoreError as e:
            return _store_failure_status(log, e)
        return Status.OK


def register_type(model: type[RecordT], store: Store) -> RegisteredType[RecordT]:
    """
    Register a record type and bootstrap its schema.

    Raises:
        MigrationError: the store could not create or alter the table
    """
    rt = RegisteredType(model, store)
    try:
        store.migrate(model)
    except StoreError as e:
        logger.error(f"Failed to migrate {rt.name}: {e}", exc_info=True)
        raise
    logger.info(f"Registered type {rt.name}")
    return rt
