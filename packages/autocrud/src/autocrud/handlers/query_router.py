"""
Query-style endpoints: one Starlette route per prefix, dispatching on the
HTTP method, with the id passed as a query variable.

    POST   <prefix>                  full record (JSON)
    GET    <prefix>?id=<id>          one record
    GET    <prefix>?page=x&limit=y   list (both optional)
    PUT    <prefix>?id=<id>          partial record (JSON)
    DELETE <prefix>?id=<id>

Prefer the path-style endpoints in handlers.router; this variant exists for
plain Starlette apps and clients that cannot put ids on the path.
"""

from starlette.requests import Request
from starlette.responses import Response

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

_METHOD_ENDPOINTS = {
    "POST": EndpointTypes.CREATE,
    "GET": EndpointTypes.READ | EndpointTypes.LIST,
    "PUT": EndpointTypes.UPDATE,
    "DELETE": EndpointTypes.DELETE,
}


def create_query_endpoints(
    rt: RegisteredType,
    desired_endpoints: EndpointTypes,
    path: str,
    router,
    log_config: SessionLoggerConfig | None = None,
) -> None:
    """
    Mount the requested endpoint types for rt at path.

    router is anything with Starlette's add_route() (a Starlette app, a
    starlette.routing.Router, or a FastAPI APIRouter).
    """
    log_config = log_config or SessionLoggerConfig()
    methods = [
        method
        for method, endpoints in _METHOD_ENDPOINTS.items()
        if desired_endpoints & endpoints
    ]
    if not methods:
        return

    async def dispatch(request: Request) -> Response:
        raw_id = request.query_params.get("id")

        if request.method == "POST":
            log = log_config.new_session_logger(f"POST:{path}")
            return await handle_create(rt, log, request)

        if request.method == "GET":
            if not raw_id:
                if not desired_endpoints & EndpointTypes.LIST:
                    return Response(status_code=405)
                log = log_config.new_session_logger(f"GET:{path}")
                return await handle_list(rt, log, request)

            if not desired_endpoints & EndpointTypes.READ:
                return Response(status_code=405)
            log = log_config.new_session_logger(f"GET:{path}?id=<id>")
            return await handle_read(rt, log, raw_id)

        if request.method == "PUT":
            log = log_config.new_session_logger(f"PUT:{path}?id=<id>")
            return await handle_update(rt, log, raw_id, request)

        log = log_config.new_session_logger(f"DELETE:{path}?id=<id>")
        return await handle_delete(rt, log, raw_id)

    router.add_route(path, dispatch, methods=methods, name=f"{rt.name}_query_endpoints")
