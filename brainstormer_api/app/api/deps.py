"""
Helpers shared by the versioned routers.

``get_handler`` is a FastAPI dependency returning the handler that
``create_app`` stored on the application state.
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from .handler import ApiResponse, RequestHandler


def get_handler(request: Request) -> RequestHandler:
    """Return the handler wired up by ``create_app``."""
    return request.app.state.handler


def to_json_response(response: ApiResponse) -> JSONResponse:
    return JSONResponse(status_code=response.status_code, content=response.body)
