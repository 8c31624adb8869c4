"""
HTTP adapters - translate requests into RegisteredType calls.
"""

from autocrud.handlers.query_router import create_query_endpoints
from autocrud.handlers.router import create_endpoints

__all__ = ["create_endpoints", "create_query_endpoints"]
