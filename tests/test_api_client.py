from __future__ import annotations

import json

import pytest
import requests

from feedback_ui.services import api_client
from feedback_ui.services.api_client import (
    APIConnectionError,
    APIHTTPError,
    APITimeoutError,
)

RECORD = {
    "id": 1,
    "rating": 4,
    "comment": "Great!",
    "timestamp": "2026-01-01T00:00:00.000Z",
    "clientInfo": "python-requests",
}


def _response(status_code: int, body: dict, reason: str = "OK") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = reason
    resp.url = "http://localhost:3000/feedback"
    resp._content = json.dumps(body).encode("utf-8")
    return resp


class _Calls(list):
    """Outgoing requests, plus the canned responses that answer them."""

    def __init__(self):
        super().__init__()
        self.queue = []


@pytest.fixture
def fake(monkeypatch):
    recorded = _Calls()

    def _fake_request(method, url, **kwargs):
        recorded.append({"method": method, "url": url, **kwargs})
        outcome = recorded.queue.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    monkeypatch.setattr(api_client.requests, "request", _fake_request)
    return recorded


def test_create_feedback_posts_json(fake):
    fake.queue.append(_response(201, {"message": "Feedback created successfully", "feedback": RECORD}))

    record = api_client.create_feedback(rating=4, comment="Great!")

    assert record == RECORD
    assert fake[0]["method"] == "POST"
    assert fake[0]["url"].endswith("/feedback")
    assert fake[0]["json"] == {"rating": 4, "comment": "Great!"}


def test_list_feedback(fake):
    fake.queue.append(_response(200, {"message": "ok", "count": 1, "feedback": [RECORD]}))
    assert api_client.list_feedback() == {"count": 1, "feedback": [RECORD]}
    assert fake[0]["params"] is None


def test_get_and_delete_send_id_param(fake):
    fake.queue.append(_response(200, {"message": "ok", "feedback": RECORD}))
    fake.queue.append(_response(200, {"message": "ok", "deletedFeedback": RECORD}))

    assert api_client.get_feedback(1) == RECORD
    assert api_client.delete_feedback(1) == RECORD
    assert [(c["method"], c["params"]) for c in fake] == [("GET", {"id": 1}), ("DELETE", {"id": 1})]


def test_http_error_carries_status_and_server_message(fake):
    fake.queue.append(
        _response(404, {"error": "Feedback with ID 9 not found"}, reason="Not Found")
    )

    with pytest.raises(APIHTTPError) as excinfo:
        api_client.get_feedback(9)

    assert excinfo.value.status_code == 404
    assert "Feedback with ID 9 not found" in str(excinfo.value)
    assert "Feedback with ID 9 not found" in excinfo.value.response_body


def test_connection_error(fake):
    fake.queue.append(requests.exceptions.ConnectionError("refused"))
    with pytest.raises(APIConnectionError):
        api_client.list_feedback()


def test_timeout(fake):
    fake.queue.append(requests.exceptions.ReadTimeout("slow"))
    with pytest.raises(APITimeoutError):
        api_client.list_feedback()
