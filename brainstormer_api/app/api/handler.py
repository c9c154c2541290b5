"""
Transport independent request dispatch.

``RequestHandler`` owns a dispatch table from operation names (such as
``"ideas/create"``) to coroutines that call :class:`SessionService`
and translate the tagged result into an :class:`ApiResponse`:

* success -> ``200`` with the shaped result
* :class:`ValidationError` -> ``400`` with the field -> reason mapping
* :class:`NotFoundError` -> ``404`` with the missing id as the body

Operations that take a ``sessionId`` reject a missing or non-integer
id with ``400`` before calling the service.

Bodies are plain JSON-compatible values, so the FastAPI routers only
wrap them in a ``JSONResponse``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder

from ..core.errors import NotFoundError, ValidationError
from ..services.mapping import to_session_view
from ..services.session_service import SessionService
from ..services.validation import SESSION_ID_RULES, validate

logger = logging.getLogger(__name__)


@dataclass
class ApiResponse:
    """Status code and JSON-compatible body of a dispatched operation."""

    status_code: int
    body: Any = None


def _ok(content: Any) -> ApiResponse:
    return ApiResponse(status.HTTP_200_OK, jsonable_encoder(content, by_alias=True))


def _invalid_session_id(payload: Mapping[str, Any]) -> Optional[ApiResponse]:
    result = validate(payload, SESSION_ID_RULES)
    if result.valid:
        return None
    return ApiResponse(status.HTTP_400_BAD_REQUEST, result.errors)


def _failure(outcome: Exception) -> Optional[ApiResponse]:
    if isinstance(outcome, ValidationError):
        return ApiResponse(status.HTTP_400_BAD_REQUEST, dict(outcome.errors))
    if isinstance(outcome, NotFoundError):
        return ApiResponse(status.HTTP_404_NOT_FOUND, outcome.identifier)
    return None


class RequestHandler:
    """Dispatches named operations to the session service."""

    def __init__(self, service: SessionService) -> None:
        self.service = service
        self._operations: Dict[str, Callable[[Mapping[str, Any]], Awaitable[ApiResponse]]] = {
            "sessions/list": self.list_sessions,
            "sessions/get": self.get_session,
            "sessions/create": self.create_session,
            "ideas/forSession": self.list_ideas,
            "ideas/create": self.create_idea,
        }

    @property
    def operations(self):
        """Names accepted by :meth:`dispatch`, sorted."""
        return sorted(self._operations)

    async def dispatch(self, operation: str, payload: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        """Run ``operation`` with ``payload``.

        Raises ``KeyError`` for an unknown operation name.
        """
        try:
            call = self._operations[operation]
        except KeyError:
            raise KeyError(f"Unknown operation: {operation}") from None
        response = await call(payload or {})
        logger.debug("%s -> %s", operation, response.status_code)
        return response

    async def list_sessions(self, payload: Mapping[str, Any]) -> ApiResponse:
        """200 with a summary of every session."""
        return _ok(await self.service.list_sessions())

    async def get_session(self, payload: Mapping[str, Any]) -> ApiResponse:
        """200 with the full session, 400 for a bad id, 404 if absent."""
        invalid = _invalid_session_id(payload)
        if invalid is not None:
            return invalid
        outcome = await self.service.get_session(payload["sessionId"])
        return _failure(outcome) or _ok(to_session_view(outcome))

    async def create_session(self, payload: Mapping[str, Any]) -> ApiResponse:
        """200 with the new session or 400 with field errors."""
        outcome = await self.service.create_session(payload)
        return _failure(outcome) or _ok(to_session_view(outcome))

    async def list_ideas(self, payload: Mapping[str, Any]) -> ApiResponse:
        """200 with the session's ideas, 400 for a bad id, 404 if absent."""
        invalid = _invalid_session_id(payload)
        if invalid is not None:
            return invalid
        outcome = await self.service.list_ideas(payload["sessionId"])
        return _failure(outcome) or _ok(outcome)

    async def create_idea(self, payload: Mapping[str, Any]) -> ApiResponse:
        """200 with the updated session, 400 with field errors, or 404."""
        outcome = await self.service.add_idea(payload)
        return _failure(outcome) or _ok(to_session_view(outcome))
