"""
Status and endpoint-selection types.

Status is transport-agnostic; STATUS_HTTP_CODES is the mapping the HTTP
adapters apply when writing a response.
"""

from enum import Enum, IntFlag
from http import HTTPStatus


class Status(str, Enum):
    """Outcome of an engine operation."""

    OK = "ok"
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    INTERNAL_ERROR = "internal_error"


STATUS_HTTP_CODES: dict[Status, int] = {
    Status.OK: HTTPStatus.OK.value,
    Status.BAD_REQUEST: HTTPStatus.BAD_REQUEST.value,
    Status.NOT_FOUND: HTTPStatus.NOT_FOUND.value,
    Status.INTERNAL_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR.value,
}


class EndpointTypes(IntFlag):
    """Which endpoints an adapter should mount for a registered type."""

    CREATE = 1  # POST
    READ = 2  # GET with an id
    LIST = 4  # GET without an id
    UPDATE = 8  # PUT
    DELETE = 16  # DELETE
    ALL = CREATE | READ | LIST | UPDATE | DELETE
