"""Capability contracts the engine depends on.

Purpose: keep RegisteredType independent of any concrete store, wire format
or logging backend. SQLAlchemyStore, JsonDecoder and logging.Logger satisfy
them.
"""

from typing import Any, Protocol, TypeVar

RecordT = TypeVar("RecordT")


class Decoder(Protocol):
    """Populates an existing record from a payload the decoder is bound to.

    decode() MUST preserve every field of target that is not present in the
    payload (merge by presence, not replace by default). Update relies on
    this to merge partial payloads onto the persisted record.
    Failures are raised as DecodeError, ValueError or TypeError.
    """

    def decode(self, target: Any) -> None: ...


class Logger(Protocol):
    """Anything with the logging.Logger message methods."""

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...
    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...
    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...


class Store(Protocol):
    """Relational persistence keyed by an integer ID attribute.

    first_by_id() and delete() raise RecordNotFoundError when no row matches;
    every other failure is raised as StoreError.
    """

    def migrate(self, model: type) -> None: ...
    def insert(self, record: Any) -> None: ...
    def first_by_id(self, model: type[RecordT], record_id: int) -> RecordT: ...
    def count(self, model: type) -> int: ...
    def query(self, model: type[RecordT], offset: int | None = None, limit: int | None = None) -> list[RecordT]: ...
    def save(self, record: Any) -> None: ...
    def delete(self, model: type, record_id: int) -> None: ...
