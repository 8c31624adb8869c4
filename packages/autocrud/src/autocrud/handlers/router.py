"""
Path-style endpoints on a FastAPI APIRouter.

All endpoints share one prefix; ids go on the path:

    POST   <prefix>            full record (JSON)     -> 200, empty body
    GET    <prefix>/<id>                              -> 200, record JSON
    GET    <prefix>?page=x&limit=y  (both optional)   -> 200, {Page, Limit, Total, Data}
    PUT    <prefix>/<id>       partial record (JSON)  -> 200, empty body
    DELETE <prefix>/<id>                              -> 200, empty body
"""

from fastapi import APIRouter, Request, Response

from basecore.logging import SessionLoggerConfig
from autocrud.contracts.types import EndpointTypes
from autocrud.engines import RegisteredType
from autocrud.handlers.common import (
    handle_create,
    handle_delete,
    handle_list,
    handle_read,
    handle_update,
)


def create_endpoints(
    rt: RegisteredType,
    desired_endpoints: EndpointTypes,
    path: str,
    router: APIRouter,
    log_config: SessionLoggerConfig | None = None,
) -> None:
    """
    Mount the requested endpoint types for rt at path on router.

    path is a prefix and should not have a trailing slash.
    """
    log_config = log_config or SessionLoggerConfig()
    item_path = path + "/{id}"
    tag = rt.name

    if desired_endpoints & EndpointTypes.CREATE:

        async def create_record(request: Request) -> Response:
            log = log_config.new_session_logger(f"POST:{path}")
            return await handle_create(rt, log, request)

        router.add_api_route(path, create_record, methods=["POST"], name=f"create_{tag}", tags=[tag])

    if desired_endpoints & EndpointTypes.READ:

        async def read_record(request: Request) -> Response:
            log = log_config.new_session_logger(f"GET:{path}/<id>")
            return await handle_read(rt, log, request.path_params.get("id"))

        router.add_api_route(item_path, read_record, methods=["GET"], name=f"read_{tag}", tags=[tag])

    if desired_endpoints & EndpointTypes.LIST:

        async def list_records(request: Request) -> Response:
            log = log_config.new_session_logger(f"GET:{path}")
            return await handle_list(rt, log, request)

        router.add_api_route(path, list_records, methods=["GET"], name=f"list_{tag}", tags=[tag])

    if desired_endpoints & EndpointTypes.UPDATE:

        async def update_record(request: Request) -> Response:
            log = log_config.new_session_logger(f"PUT:{path}/<id>")
            return await handle_update(rt, log, request.path_params.get("id"), request)

        router.add_api_route(item_path, update_record, methods=["PUT"], name=f"update_{tag}", tags=[tag])

    if desired_endpoints & EndpointTypes.DELETE:

        async def delete_record(request: Request) -> Response:
            log = log_config.new_session_logger(f"DELETE:{path}/<id>")
            return await handle_delete(rt, log, request.path_params.get("id"))

        router.add_api_route(item_path, delete_record, methods=["DELETE"], name=f"delete_{tag}", tags=[tag])
