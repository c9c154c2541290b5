import requests

from brainstormer_client import BrainstormerAPI


class FakeResponse:
    def __init__(self, status_code, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text
        self.content = b"" if payload is None and not text else b"x"

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc is not None:
            raise self.exc
        return self.response


def make_client(**kwargs):
    session = FakeSession(**kwargs)
    return BrainstormerAPI(base_url="http://api.local/", session=session), session


def test_list_sessions():
    client, session = make_client(response=FakeResponse(200, [{"id": 1}]))
    data, error = client.list_sessions()
    assert (data, error) == ([{"id": 1}], None)
    assert session.calls[0]["method"] == "GET"
    assert session.calls[0]["url"] == "http://api.local/api/v1/sessions/list"


def test_create_idea_sends_camel_case_body():
    client, session = make_client(response=FakeResponse(200, {"id": 4, "ideas": []}))
    client.create_idea(4, "name", "desc")
    assert session.calls[0]["url"].endswith("/ideas/create")
    assert session.calls[0]["json"] == {"sessionId": 4, "name": "name", "description": "desc"}


def test_validation_error_is_returned():
    client, _ = make_client(response=FakeResponse(400, {"sessionName": "The sessionName field is required."}))
    data, error = client.create_session("")
    assert data is None
    assert error == {
        "status_code": 400,
        "message": {"sessionName": "The sessionName field is required."},
    }


def test_not_found_carries_id():
    client, _ = make_client(response=FakeResponse(404, 12))
    data, error = client.list_ideas(12)
    assert data is None
    assert error == {"status_code": 404, "message": 12}


def test_non_json_error_uses_text():
    client, _ = make_client(response=FakeResponse(500, text="boom"))
    _, error = client.get_session(1)
    assert error == {"status_code": 500, "message": "boom"}


def test_connection_error():
    client, _ = make_client(exc=requests.ConnectionError("refused"))
    data, error = client.list_sessions()
    assert data is None
    assert error["status_code"] is None
    assert "refused" in error["message"]
