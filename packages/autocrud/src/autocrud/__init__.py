"""
autocrud - generic CRUD engine over SQLAlchemy models.

It provides:
- RegisteredType: create / read / list / update / delete for one model
- Capability contracts (Decoder, Logger, Store) and a SQLAlchemy Store
- A JSON decoder that merges partial payloads by presence
- HTTP adapters (FastAPI path style, Starlette query style) and a CLI

The engine never touches sockets and never raises from its operations:
every outcome is reported as a Status.
"""

from autocrud.contracts import EndpointTypes, ListEnvelope, Status
from autocrud.decoding import JsonDecoder
from autocrud.engines import RegisteredType, register_type
from autocrud.persistence import RecordMixin, SQLAlchemyStore

__all__ = [
    "EndpointTypes",
    "JsonDecoder",
    "ListEnvelope",
    "RecordMixin",
    "RegisteredType",
    "SQLAlchemyStore",
    "Status",
    "register_type",
]
