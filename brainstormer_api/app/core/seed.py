"""Demo content for an otherwise empty in-memory store."""

from datetime import datetime, timezone
from typing import List

from ..models.session import BrainstormSession, Idea


def demo_sessions() -> List[BrainstormSession]:
    """Return the sample session shown when ``SEED_DEMO_DATA`` is enabled."""
    created = datetime(2016, 8, 1, tzinfo=timezone.utc)
    session = BrainstormSession(id=1, name="Test Session 1", date_created=created)
    session.add_idea(
        Idea(name="Awesome idea", description="Totally awesome idea", date_created=created)
    )
    return [session]
