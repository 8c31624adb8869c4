"""
FastAPI application factory.

Registers each record type against the configured database and mounts its
path-style endpoints under API_PREFIX:

    app = create_app({"/widgets": Widget, "/gadgets": Gadget})
"""

import logging
from collections.abc import Mapping

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from basecore.db import get_engine, get_sessionmaker
from basecore.logging import SessionLoggerConfig, setup_logging
from basecore.settings import get_settings
from autocrud.contracts.types import EndpointTypes
from autocrud.engines import RegisteredType, register_type
from autocrud.handlers import create_endpoints
from autocrud.persistence import SQLAlchemyStore

logger = logging.getLogger(__name__)


def create_app(
    models: Mapping[str, type],
    engine: Engine | None = None,
    endpoints: EndpointTypes = EndpointTypes.ALL,
) -> FastAPI:
    """
    Build the API app.

    Args:
        models: Mount path (no trailing slash) -> record model class
        engine: SQLAlchemy engine; defaults to the one built from settings
        endpoints: Endpoint types to mount for every model

    Raises:
        MigrationError: a table could not be created or altered
    """
    setup_logging()
    settings = get_settings()

    if engine is None:
        store = SQLAlchemyStore(get_engine(), get_sessionmaker())
    else:
        store = SQLAlchemyStore(engine)
    log_config = SessionLoggerConfig()
    router = APIRouter()

    registered: dict[str, RegisteredType] = {}
    for path, model in models.items():
        rt = register_type(model, store)
        create_endpoints(rt, endpoints, path, router, log_config)
        registered[path] = rt

    app = FastAPI(
        title="autocrud",
        description="Generic CRUD endpoints for registered record types",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router, prefix=settings.API_PREFIX)
    app.state.registered_types = registered

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "ok", "types": sorted(rt.name for rt in registered.values())}

    logger.info(f"Mounted {len(registered)} record types under {settings.API_PREFIX or '/'}")
    return app
