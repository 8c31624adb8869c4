"""
Helpers shared by the HTTP adapters: parameter parsing and response writing.
"""

from typing import Any

from fastapi.encoders import jsonable_encoder
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from autocrud.contracts.envelope import ListEnvelope
from autocrud.contracts.protocols import Logger
from autocrud.contracts.types import STATUS_HTTP_CODES, Status
from autocrud.decoding import JsonDecoder
from autocrud.engines import RegisteredType
from autocrud.persistence.models import MAX_ID, record_to_dict


class ParameterError(ValueError):
    """A path or query parameter is not a non-negative integer."""


def parse_non_negative(name: str, raw: str | None, default: int | None = None) -> int:
    if raw is None or raw == "":
        if default is None:
            raise ParameterError(f"missing {name}")
        return default
    if not (raw.isascii() and raw.isdigit()):
        raise ParameterError(f"invalid {name}: {raw!r}")
    digits = raw.lstrip("0") or "0"
    # int() refuses very long digit strings, so compare lengths first
    if len(digits) > len(str(MAX_ID)) or int(digits) > MAX_ID:
        raise ParameterError(f"{name} out of range: {raw[:32]}")
    return int(digits)


def bad_request(log: Logger, error: Exception) -> Response:
    log.error(error)
    return Response(status_code=STATUS_HTTP_CODES[Status.BAD_REQUEST])


def status_response(status: Status) -> Response:
    return Response(status_code=STATUS_HTTP_CODES[status])


def value_response(log: Logger, value: Any, status: Status) -> Response:
    """Encode value as JSON when present, otherwise write only the status."""
    if value is None:
        return status_response(status)
    if isinstance(value, ListEnvelope):
        content = value.to_dict(record_to_dict)
    else:
        content = record_to_dict(value)
    try:
        body = jsonable_encoder(content)
    except (TypeError, ValueError) as e:
        log.error(e)
        return status_response(Status.INTERNAL_ERROR)
    return JSONResponse(content=body, status_code=STATUS_HTTP_CODES[status])


async def handle_create(rt: RegisteredType, log: Logger, request: Request) -> Response:
    body = await request.body()
    status = await run_in_threadpool(rt.create, log, JsonDecoder(body))
    return status_response(status)


async def handle_read(rt: RegisteredType, log: Logger, raw_id: str | None) -> Response:
    try:
        record_id = parse_non_negative("id", raw_id)
    except ParameterError as e:
        return bad_request(log, e)

    record, status = await run_in_threadpool(rt.read, log, record_id)
    return value_response(log, record, status)


async def handle_list(rt: RegisteredType, log: Logger, request: Request) -> Response:
    try:
        page = parse_non_negative("page", request.query_params.get("page"), default=0)
        limit = parse_non_negative("limit", request.query_params.get("limit"), default=0)
    except ParameterError as e:
        return bad_request(log, e)

    envelope, status = await run_in_threadpool(rt.list, log, page, limit)
    return value_response(log, envelope, status)


async def handle_update(rt: RegisteredType, log: Logger, raw_id: str | None, request: Request) -> Response:
    try:
        record_id = parse_non_negative("id", raw_id)
    except ParameterError as e:
        return bad_request(log, e)

    body = await request.body()
    status = await run_in_threadpool(rt.update, log, record_id, JsonDecoder(body))
    return status_response(status)


async def handle_delete(rt: RegisteredType, log: Logger, raw_id: str | None) -> Response:
    try:
        record_id = parse_non_negative("id", raw_id)
    except ParameterError as e:
        return bad_request(log, e)

    status = await run_in_threadpool(rt.delete, log, record_id)
    return status_response(status)
