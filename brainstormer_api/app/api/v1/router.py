"""
Top‑level router for version 1 of the API.

Aggregates the resource routers under a unified prefix.  Add new
resources here when they are introduced.
"""

from fastapi import APIRouter

from .endpoints import ideas, sessions

router = APIRouter()

router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
router.include_router(ideas.router, prefix="/ideas", tags=["ideas"])
