"""
Main entrypoint for the Brainstormer API.

This module assembles the FastAPI application.  ``create_app`` sets
up logging, builds the repository, service and request handler
explicitly and mounts the versioned routers.  An application instance
is created at import time so it can be served directly, e.g.::

    uvicorn brainstormer_api.app.main:app --reload
"""

import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.handler import RequestHandler
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.seed import demo_sessions
from .repositories.session_repository import InMemorySessionRepository
from .services.session_service import SessionService

logger = logging.getLogger(__name__)


def binding_errors(exc: RequestValidationError) -> Dict[str, str]:
    """Flatten FastAPI binding errors into a field -> reason mapping."""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        field = location[-1] if location else "body"
        errors.setdefault(field, error.get("msg", "Invalid value"))
    return errors


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unbindable input with the same 400 shape as rule violations."""
    errors = binding_errors(exc)
    logger.info("Rejected malformed request to %s: %s", request.url.path, errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors)


def create_app(
    repository: Optional[InMemorySessionRepository] = None,
    settings: Settings = default_settings,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    repository : Optional[InMemorySessionRepository]
        Store to serve.  When omitted a fresh in-memory repository is
        created, preloaded with demo data if ``settings.seed_demo_data``
        is set.
    settings : Settings
        Configuration to use; defaults to the environment driven
        module level settings.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that start-up can log.
    setup_logging(settings)

    if repository is None:
        seed = demo_sessions() if settings.seed_demo_data else []
        repository = InMemorySessionRepository(seed)
        if seed:
            logger.info("Seeded %d demo session(s)", len(seed))

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.handler = RequestHandler(SessionService(repository, settings=settings))
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
