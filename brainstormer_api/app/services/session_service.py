"""
Business logic for brainstorm sessions and their ideas.

``SessionService`` receives its repository explicitly; nothing is
looked up from a container.  Operations never raise for expected
failures.  They return either the result or an error value
(:class:`ValidationError` or :class:`NotFoundError`) which the API
layer maps onto a response code.  Requests are validated before any
repository access, so an invalid request never reaches the store even
when it references a session that does not exist.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Callable, List, Mapping, Union

from pydantic import BaseModel

from ..core.config import Settings, settings as default_settings
from ..core.errors import NotFoundError, ValidationError
from ..models.session import BrainstormSession, Idea
from ..repositories.session_repository import InMemorySessionRepository
from ..schemas.idea import IdeaView
from ..schemas.session import SessionSummaryView
from .mapping import to_idea_view, to_session_summary
from .validation import as_record, new_idea_rules, new_session_rules, validate

logger = logging.getLogger(__name__)

Request = Union[BaseModel, Mapping[str, Any], None]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionService:
    """Use cases for listing and creating sessions and ideas."""

    def __init__(
        self,
        repository: InMemorySessionRepository,
        clock: Callable[[], datetime] = utcnow,
        settings: Settings = default_settings,
    ) -> None:
        self.repository = repository
        self.clock = clock
        self._session_rules = new_session_rules(settings)
        self._idea_rules = new_idea_rules(settings)
        # Serializes the fetch, append, update sequence of add_idea so
        # two concurrent additions cannot overwrite each other.
        self._idea_lock = asyncio.Lock()

    async def list_sessions(self) -> List[SessionSummaryView]:
        """Return a summary of every session in creation order."""
        sessions = await self.repository.list()
        return [to_session_summary(session) for session in sessions]

    async def get_session(self, session_id: int) -> Union[BrainstormSession, NotFoundError]:
        """Return the stored session or :class:`NotFoundError`."""
        session = await self.repository.get_by_id(session_id)
        if session is None:
            logger.info("Session %s not found", session_id)
            return NotFoundError(session_id)
        return session

    async def create_session(self, request: Request) -> Union[BrainstormSession, ValidationError]:
        """Validate ``request`` and store a new, empty session.

        Returns the stored session with its assigned id, or a
        :class:`ValidationError` if ``sessionName`` is missing or
        invalid.  Nothing is stored in the error case.
        """
        record = as_record(request)
        result = validate(record, self._session_rules)
        if not result.valid:
            logger.info("Rejected new session: %s", result.errors)
            return ValidationError(result.errors)

        session = await self.repository.add(
            BrainstormSession(name=record["sessionName"], date_created=self.clock())
        )
        logger.info("Created session %s '%s'", session.id, session.name)
        return session

    async def list_ideas(self, session_id: int) -> Union[List[IdeaView], NotFoundError]:
        """Return the ideas of a session in the order they were added."""
        session = await self.repository.get_by_id(session_id)
        if session is None:
            logger.info("Session %s not found", session_id)
            return NotFoundError(session_id)
        return [to_idea_view(idea) for idea in session.ideas]

    async def add_idea(
        self, request: Request
    ) -> Union[BrainstormSession, ValidationError, NotFoundError]:
        """Append a new idea to the session named by ``sessionId``.

        Validation errors take precedence over a missing session.  On
        success the updated session, including the new idea as its
        last element, is returned.
        """
        record = as_record(request)
        result = validate(record, self._idea_rules)
        if not result.valid:
            logger.info("Rejected new idea: %s", result.errors)
            return ValidationError(result.errors)

        session_id = record["sessionId"]
        async with self._idea_lock:
            session = await self.repository.get_by_id(session_id)
            if session is None:
                logger.info("Cannot add idea, session %s not found", session_id)
                return NotFoundError(session_id)
            idea = session.add_idea(
                Idea(
                    name=record["name"],
                    description=record.get("description"),
                    date_created=self.clock(),
                )
            )
            try:
                session = await self.repository.update(session)
            except NotFoundError as exc:
                logger.warning("Session %s disappeared while adding an idea", session_id)
                return exc
        logger.info("Added idea %s to session %s", idea.id, session.id)
        return session
