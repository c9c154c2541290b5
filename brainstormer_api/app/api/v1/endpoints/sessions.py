"""
Session endpoints for API v1.

Sessions can be listed, fetched individually and created.  Sessions
are never deleted.  All routes delegate to the ``RequestHandler``
stored on ``app.state``; the declared response models document the
success payloads.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Path, status
from fastapi.responses import JSONResponse

from brainstormer_api.app.api.deps import get_handler, to_json_response
from brainstormer_api.app.api.handler import RequestHandler
from brainstormer_api.app.schemas.session import NewSessionRequest, SessionSummaryView, SessionView

router = APIRouter()


@router.get("/list", response_model=List[SessionSummaryView])
async def list_sessions(handler: RequestHandler = Depends(get_handler)) -> JSONResponse:
    """Return every session with its number of ideas, oldest first."""
    return to_json_response(await handler.dispatch("sessions/list"))


@router.get(
    "/{sessionId}",
    response_model=SessionView,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Unknown session id; the body is the requested id"}},
)
async def get_session(
    session_id: int = Path(..., alias="sessionId"),
    handler: RequestHandler = Depends(get_handler),
) -> JSONResponse:
    """Retrieve a single session including its ideas.

    Returns HTTP 404 with the requested id as the body if the session
    does not exist.
    """
    return to_json_response(await handler.dispatch("sessions/get", {"sessionId": session_id}))


@router.post(
    "/create",
    response_model=SessionView,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Mapping of invalid field names to reasons"}},
)
async def create_session(
    session_in: Optional[NewSessionRequest] = Body(None),
    handler: RequestHandler = Depends(get_handler),
) -> JSONResponse:
    """Create a new, empty session.

    ``sessionName`` is required.  Returns HTTP 400 with a mapping of
    field name to reason when it is missing, blank or too long.
    """
    payload = session_in.model_dump(by_alias=True) if session_in is not None else {}
    return to_json_response(await handler.dispatch("sessions/create", payload))
