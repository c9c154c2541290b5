import asyncio
from datetime import datetime, timezone

import pytest

from brainstormer_api.app.core.errors import NotFoundError, ValidationError
from brainstormer_api.app.schemas.idea import NewIdeaRequest
from brainstormer_api.app.schemas.session import NewSessionRequest
from brainstormer_api.app.repositories.session_repository import InMemorySessionRepository
from brainstormer_api.app.services.session_service import SessionService
from tests.conftest import NOW, make_session


class RecordingRepository:
    """Wraps a repository and records which methods were called."""

    def __init__(self, inner):
        self.inner = inner
        self.calls = []

    def __getattr__(self, name):
        method = getattr(self.inner, name)

        async def wrapper(*args):
            self.calls.append(name)
            return await method(*args)

        return wrapper


async def test_list_sessions_returns_summaries(service):
    summaries = await service.list_sessions()
    assert len(summaries) == 2
    assert [s.name for s in summaries] == ["Test One", "Test Two"]
    assert summaries[0].date_created == datetime(2016, 7, 2, tzinfo=timezone.utc)
    assert summaries[1].date_created == datetime(2016, 7, 1, tzinfo=timezone.utc)
    assert all(s.idea_count == 0 for s in summaries)


async def test_create_session(service):
    session = await service.create_session(NewSessionRequest(session_name="Fresh"))
    assert session.id == 3
    assert session.name == "Fresh"
    assert session.date_created == NOW
    assert session.ideas == []
    assert [s.id for s in await service.list_sessions()][-1] == 3


async def test_create_session_accepts_plain_mapping(service):
    session = await service.create_session({"sessionName": "Mapped"})
    assert session.name == "Mapped"


@pytest.mark.parametrize("name", [None, "", "  "])
async def test_create_session_with_blank_name_is_rejected(repository, clock, name):
    recording = RecordingRepository(repository)
    service = SessionService(recording, clock=clock)

    outcome = await service.create_session(NewSessionRequest(session_name=name))

    assert isinstance(outcome, ValidationError)
    assert "sessionName" in outcome.errors
    assert recording.calls == []
    assert await repository.count() == 2


async def test_list_ideas_for_missing_session(service):
    assert await service.list_ideas(404) == NotFoundError(404)


async def test_list_ideas(session_with_idea, clock):
    service = SessionService(session_with_idea, clock=clock)
    ideas = await service.list_ideas(123)
    assert len(ideas) == 1
    assert ideas[0].name == "One"


async def test_add_idea(session_with_idea, clock):
    service = SessionService(session_with_idea, clock=clock)
    request = NewIdeaRequest(session_id=123, name="test name", description="test description")

    session = await service.add_idea(request)

    assert len(session.ideas) == 2
    assert session.ideas[-1].name == "test name"
    assert session.ideas[-1].description == "test description"
    assert session.ideas[-1].date_created == NOW
    assert session.ideas[-1].id == 2
    stored = await session_with_idea.get_by_id(123)
    assert [idea.name for idea in stored.ideas] == ["One", "test name"]


async def test_add_idea_without_description(session_with_idea, clock):
    service = SessionService(session_with_idea, clock=clock)
    session = await service.add_idea({"sessionId": 123, "name": "bare"})
    assert session.ideas[-1].description is None


async def test_add_idea_to_missing_session(service):
    outcome = await service.add_idea(NewIdeaRequest(session_id=999, name="n", description="d"))
    assert outcome == NotFoundError(999)


@pytest.mark.parametrize("session_id", [1, 999])
async def test_add_idea_with_empty_name_is_rejected(repository, clock, session_id):
    recording = RecordingRepository(repository)
    service = SessionService(recording, clock=clock)

    outcome = await service.add_idea(NewIdeaRequest(session_id=session_id, name=""))

    assert isinstance(outcome, ValidationError)
    assert outcome.errors.keys() == {"name"}
    assert recording.calls == []


async def test_add_idea_reports_every_invalid_field(service):
    outcome = await service.add_idea({"name": "  "})
    assert outcome.errors.keys() == {"sessionId", "name"}


async def test_get_session(service):
    session = await service.get_session(2)
    assert session.name == "Test Two"
    assert await service.get_session(3) == NotFoundError(3)


async def test_ideas_keep_insertion_order(session_with_idea, clock):
    service = SessionService(session_with_idea, clock=clock)
    for name in ["Two", "Three", "Four"]:
        await service.add_idea({"sessionId": 123, "name": name})
    ideas = await service.list_ideas(123)
    assert [idea.name for idea in ideas] == ["One", "Two", "Three", "Four"]
    assert [idea.id for idea in ideas] == [1, 2, 3, 4]


async def test_concurrent_idea_additions_are_not_lost(session_with_idea, clock):
    service = SessionService(session_with_idea, clock=clock)
    await asyncio.gather(
        *(service.add_idea({"sessionId": 123, "name": f"idea {i}"}) for i in range(20))
    )
    ideas = await service.list_ideas(123)
    assert len(ideas) == 21
    assert len({idea.id for idea in ideas}) == 21


class VanishingRepository(InMemorySessionRepository):
    """A store whose sessions disappear between read and write."""

    async def update(self, session):
        raise NotFoundError(session.id)


async def test_add_idea_when_session_vanishes_before_update(clock):
    repository = VanishingRepository([make_session(7, "Short lived")])
    service = SessionService(repository, clock=clock)

    outcome = await service.add_idea({"sessionId": 7, "name": "late"})

    assert outcome == NotFoundError(7)
    assert (await repository.get_by_id(7)).ideas == []
