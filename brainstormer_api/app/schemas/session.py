"""
Pydantic models for brainstorm sessions.

``NewSessionRequest`` is the body of ``POST /sessions/create``.
``SessionSummaryView`` is a list entry with the number of ideas and
``SessionView`` the full session including its ideas.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .idea import IdeaView

CAMEL_CASE = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class NewSessionRequest(BaseModel):
    """Schema for creating a session."""

    model_config = CAMEL_CASE

    # Checked by the request validator, not by binding.
    session_name: Optional[Any] = Field(None, examples=["Product ideas"])


class SessionSummaryView(BaseModel):
    """Schema for a session in the session list."""

    model_config = CAMEL_CASE

    id: int
    name: str
    date_created: datetime
    idea_count: int


class SessionView(BaseModel):
    """Schema for a full session, ideas included."""

    model_config = CAMEL_CASE

    id: int
    name: str
    date_created: datetime
    ideas: List[IdeaView] = Field(default_factory=list)
