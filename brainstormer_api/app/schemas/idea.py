"""
Pydantic models for ideas.

``NewIdeaRequest`` carries the owning ``sessionId`` together with the
idea itself; ``IdeaView`` is how an idea is returned.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class NewIdeaRequest(BaseModel):
    """Schema for adding an idea to a session."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Passed through untouched; types are checked by the request validator.
    session_id: Optional[Any] = Field(None, examples=[1])
    name: Optional[Any] = Field(None, examples=["Dark mode"])
    description: Optional[Any] = Field(None, examples=["Offer a dark colour scheme"])


class IdeaView(BaseModel):
    """Schema for reading an idea from the API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    date_created: datetime
