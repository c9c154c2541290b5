"""Projections of domain records onto response schemas."""

from ..models.session import BrainstormSession, Idea
from ..schemas.idea import IdeaView
from ..schemas.session import SessionSummaryView, SessionView


def to_idea_view(idea: Idea) -> IdeaView:
    """Copy the public fields of ``idea``."""
    return IdeaView(
        id=idea.id,
        name=idea.name,
        description=idea.description,
        date_created=idea.date_created,
    )


def to_session_summary(session: BrainstormSession) -> SessionSummaryView:
    """Project ``session`` onto a list entry carrying its idea count."""
    return SessionSummaryView(
        id=session.id,
        name=session.name,
        date_created=session.date_created,
        idea_count=session.idea_count,
    )


def to_session_view(session: BrainstormSession) -> SessionView:
    """Project ``session`` with every idea, in insertion order."""
    return SessionView(
        id=session.id,
        name=session.name,
        date_created=session.date_created,
        ideas=[to_idea_view(idea) for idea in session.ideas],
    )
