"""
In-memory repository of brainstorm sessions.

Sessions are kept in a dict keyed by id; dicts preserve insertion
order, which is the order ``list`` returns.  The repository owns the
stored records: callers always receive copies and must hand a
modified copy back through ``update``.  Every operation runs under an
``asyncio.Lock`` so id assignment and replacements never interleave.
"""

from __future__ import annotations

import asyncio
import copy
import logging
from typing import Dict, Iterable, List, Optional

from ..core.errors import NotFoundError
from ..models.session import BrainstormSession

logger = logging.getLogger(__name__)


class InMemorySessionRepository:
    """Session store backed by a plain dict."""

    def __init__(self, sessions: Iterable[BrainstormSession] = ()) -> None:
        self._sessions: Dict[int, BrainstormSession] = {}
        self._lock = asyncio.Lock()
        for session in sessions:
            if session.id in self._sessions:
                raise ValueError(f"Duplicate session id {session.id}")
            self._sessions[session.id] = copy.deepcopy(session)
        self._next_id = max(self._sessions, default=0) + 1

    async def list(self) -> List[BrainstormSession]:
        """Return all sessions in insertion order."""
        async with self._lock:
            return [copy.deepcopy(session) for session in self._sessions.values()]

    async def get_by_id(self, session_id: int) -> Optional[BrainstormSession]:
        """Return the session with ``session_id`` or ``None``."""
        async with self._lock:
            session = self._sessions.get(session_id)
            return copy.deepcopy(session) if session is not None else None

    async def add(self, session: BrainstormSession) -> BrainstormSession:
        """Store ``session`` under a newly assigned id and return it.

        Any id already set on ``session`` is ignored.
        """
        async with self._lock:
            stored = copy.deepcopy(session)
            stored.id = self._next_id
            self._next_id += 1
            self._sessions[stored.id] = stored
            logger.debug("Stored session %s", stored.id)
            return copy.deepcopy(stored)

    async def update(self, session: BrainstormSession) -> BrainstormSession:
        """Replace the stored session with the same id.

        Raises :class:`NotFoundError` if no such session exists.
        """
        async with self._lock:
            if session.id not in self._sessions:
                raise NotFoundError(session.id)
            self._sessions[session.id] = copy.deepcopy(session)
            logger.debug("Updated session %s", session.id)
            return copy.deepcopy(session)

    async def count(self) -> int:
        async with self._lock:
            return len(self._sessions)
