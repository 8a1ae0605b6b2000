import copy
from typing import Any, Dict, List, Optional

import httpx
import pytest

from sentry_api import Client, ClientConfig

BASE_URL = "https://sentry.example.com/api/0/"
TOKEN = "secret-token"

ISSUE: Dict[str, Any] = {
    "id": "123",
    "shortId": "WEB-1A",
    "title": "ZeroDivisionError: division by zero",
    "culprit": "app.views.checkout",
    "permalink": "https://sentry.example.com/acme/web/issues/123/",
    "level": "error",
    "logger": None,
    "type": "error",
    "status": "unresolved",
    "statusDetails": {},
    "count": "42",
    "userCount": 7,
    "numComments": 0,
    "firstSeen": "2018-11-06T21:19:55Z",
    "lastSeen": "2018-11-07T09:01:12Z",
    "hasSeen": False,
    "isBookmarked": False,
    "isPublic": False,
    "isSubscribed": True,
    "subscriptionDetails": {"reason": "unknown"},
    "assignedTo": None,
    "annotations": [],
    "metadata": {"type": "ZeroDivisionError", "value": "division by zero"},
    "project": {"id": "2", "slug": "web", "name": "Web"},
    "stats": {"24h": [[1541455200, 3], [1541458800, 0]]},
    "tags": [{"key": "environment", "name": "Environment", "uniqueValues": 1}],
    "shareId": None,
    "inbox": {"reason": 0},
}

EVENT: Dict[str, Any] = {
    "id": "9999",
    "eventID": "9fac2ceed9344f2bbfdd1fdacb0ed9b1",
    "groupID": "123",
    "message": "division by zero",
    "platform": "python",
    "dateCreated": "2018-11-06T21:19:55Z",
    "dateReceived": "2018-11-06T21:19:56Z",
    "size": 7092,
    "tags": [{"key": "environment", "value": "production"}],
    "user": {"id": "1", "email": "jane@example.com", "ip_address": "127.0.0.1"},
    "previousEventID": None,
    "nextEventID": "a1b2c3",
    "entries": [
        {"type": "message", "data": {"formatted": "division by zero"}},
        {
            "type": "exception",
            "data": {
                "values": [
                    {
                        "type": "ZeroDivisionError",
                        "value": "division by zero",
                        "module": None,
                        "mechanism": {"type": "generic", "handled": True},
                        "stacktrace": {
                            "frames": [
                                {
                                    "filename": "app/views.py",
                                    "function": "checkout",
                                    "lineNo": 12,
                                    "inApp": True,
                                    "context": [[11, "    total = 0"], [12, "    return 1 / total"]],
                                }
                            ],
                            "hasSystemFrames": False,
                        },
                    }
                ],
                "excOmitted": None,
            },
        },
    ],
}


@pytest.fixture
def issue_json() -> Dict[str, Any]:
    return copy.deepcopy(ISSUE)


@pytest.fixture
def event_json() -> Dict[str, Any]:
    return copy.deepcopy(EVENT)


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(base_url=BASE_URL, auth_token=TOKEN)


class Recorder:
    """Mock transport handler answering every request with one canned response."""

    def __init__(self, status: int = 200, json: Any = None, headers: Optional[Dict[str, str]] = None,
                 content: Optional[bytes] = None) -> None:
        self.status = status
        self.json = json
        self.headers = headers or {}
        self.content = content
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status, content=self.content, headers=self.headers)
        if self.json is None:
            return httpx.Response(self.status, headers=self.headers)
        return httpx.Response(self.status, json=self.json, headers=self.headers)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def make_client(config):
    """Build a Client whose requests are answered by ``handler``."""
    opened = []

    def factory(handler) -> Client:
        http = httpx.Client(transport=httpx.MockTransport(handler))
        opened.append(http)
        return Client(config, http_client=http)

    yield factory
    for http in opened:
        http.close()


@pytest.fixture
def recorder_client(make_client):
    """Return ``(client, recorder)`` for a canned response."""

    def factory(**kwargs):
        recorder = Recorder(**kwargs)
        return make_client(recorder), recorder

    return factory
