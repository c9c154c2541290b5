"""
Idea endpoints for API v1.

Ideas always belong to a session: they are listed per session and
created by posting the owning ``sessionId`` with the idea.  Ideas are
never modified or removed once created.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Path, status
from fastapi.responses import JSONResponse

from brainstormer_api.app.api.handler import RequestHandler
from brainstormer_api.app.api.deps import get_handler, to_json_response
from brainstormer_api.app.schemas.idea import IdeaView, NewIdeaRequest
from brainstormer_api.app.schemas.session import SessionView

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Unknown session id; the body is the requested id"}}


@router.get("/forSession/{sessionId}", response_model=List[IdeaView], responses=NOT_FOUND)
async def list_ideas_for_session(
    session_id: int = Path(..., alias="sessionId"),
    handler: RequestHandler = Depends(get_handler),
) -> JSONResponse:
    """List the ideas of a session in the order they were added.

    Returns HTTP 404 with the requested id as the body if the session
    does not exist.
    """
    return to_json_response(await handler.dispatch("ideas/forSession", {"sessionId": session_id}))


@router.post(
    "/create",
    response_model=SessionView,
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Mapping of invalid field names to reasons"},
        **NOT_FOUND,
    },
)
async def create_idea(
    idea_in: Optional[NewIdeaRequest] = Body(None),
    handler: RequestHandler = Depends(get_handler),
) -> JSONResponse:
    """Add an idea to a session and return the updated session.

    Field errors (HTTP 400) are reported before a missing session
    (HTTP 404), so an invalid idea is rejected even if its session
    does not exist.
    """
    payload = idea_in.model_dump(by_alias=True) if idea_in is not None else {}
    return to_json_response(await handler.dispatch("ideas/create", payload))
