from autocrud.contracts.envelope import ListEnvelope
from autocrud.contracts.protocols import Decoder, Logger, Store
from autocrud.contracts.types import STATUS_HTTP_CODES, EndpointTypes, Status

__all__ = [
    "Decoder",
    "EndpointTypes",
    "ListEnvelope",
    "Logger",
    "STATUS_HTTP_CODES",
    "Status",
    "Store",
]
