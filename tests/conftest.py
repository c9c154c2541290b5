from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from brainstormer_api.app.main import create_app
from brainstormer_api.app.models.session import BrainstormSession, Idea
from brainstormer_api.app.repositories.session_repository import InMemorySessionRepository
from brainstormer_api.app.services.session_service import SessionService

NOW = datetime(2016, 7, 3, 12, 0, tzinfo=timezone.utc)


def make_session(session_id, name, *idea_names, created=NOW):
    session = BrainstormSession(id=session_id, name=name, date_created=created)
    for idea_name in idea_names:
        session.add_idea(Idea(name=idea_name, description=f"{idea_name} description", date_created=created))
    return session


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def test_sessions():
    return [
        make_session(1, "Test One", created=datetime(2016, 7, 2, tzinfo=timezone.utc)),
        make_session(2, "Test Two", created=datetime(2016, 7, 1, tzinfo=timezone.utc)),
    ]


@pytest.fixture
def repository(test_sessions):
    return InMemorySessionRepository(test_sessions)


@pytest.fixture
def empty_repository():
    return InMemorySessionRepository()


@pytest.fixture
def session_with_idea():
    """Session 123 holding a single idea named "One"."""
    return InMemorySessionRepository([make_session(123, "Session 123", "One")])


@pytest.fixture
def service(repository, clock):
    return SessionService(repository, clock=clock)


@pytest.fixture
def client(repository):
    with TestClient(create_app(repository)) as test_client:
        yield test_client
