"""End-to-end run against an in-process fake of the Sentry API built with FastAPI."""

import copy
from typing import Any, Dict, List, Optional

import pytest
from fastapi import FastAPI, Header, HTTPException, Request, Response
from fastapi.testclient import TestClient

from sentry_api import (
    APIError,
    Client,
    Issue,
    Status,
    delete_issue,
    get_issue,
    get_issue_hashes,
    get_issues,
    get_latest_event,
    update_issue,
)

from conftest import BASE_URL, EVENT, ISSUE, TOKEN

PAGE_SIZE = 2


def create_fake_sentry() -> FastAPI:
    app = FastAPI()
    issues: Dict[str, Dict[str, Any]] = {}
    for n in range(1, 6):
        issue = copy.deepcopy(ISSUE)
        issue.update(id=str(n), shortId=f"WEB-{n}")
        issues[issue["id"]] = issue
    app.state.issues = issues

    def check_auth(authorization: Optional[str]) -> None:
        if authorization != f"Bearer {TOKEN}":
            raise HTTPException(status_code=401, detail="Invalid token")

    def find(issue_id: str) -> Dict[str, Any]:
        if issue_id not in issues:
            raise HTTPException(status_code=404, detail="The requested resource does not exist")
        return issues[issue_id]

    def link_header(url: str, offset: int, total: int) -> str:
        prev_offset = max(offset - PAGE_SIZE, 0)
        return (
            f'<{url}?cursor=0:{prev_offset}:1>; rel="previous"; '
            f'results="{"true" if offset > 0 else "false"}"; cursor="0:{prev_offset}:1", '
            f'<{url}?cursor=0:{offset + PAGE_SIZE}:0>; rel="next"; '
            f'results="{"true" if offset + PAGE_SIZE < total else "false"}"; cursor="0:{offset + PAGE_SIZE}:0"'
        )

    @app.get("/api/0/projects/{org}/{project}/issues")
    def list_issues(org: str, project: str, request: Request, response: Response,
                    cursor: Optional[str] = None, statsPeriod: Optional[str] = None,
                    authorization: Optional[str] = Header(None)) -> List[Dict[str, Any]]:
        check_auth(authorization)
        if (org, project) != ("acme", "web"):
            raise HTTPException(status_code=404, detail="The requested resource does not exist")
        offset = int(cursor.split(":")[1]) if cursor else 0
        ordered = sorted(issues.values(), key=lambda i: int(i["id"]))
        url = f"{BASE_URL}projects/{org}/{project}/issues"
        response.headers["Link"] = link_header(url, offset, len(ordered))
        page = ordered[offset:offset + PAGE_SIZE]
        if statsPeriod == "":
            page = [{k: v for k, v in i.items() if k != "stats"} for i in page]
        return page

    @app.get("/api/0/issues/{issue_id}")
    def read_issue(issue_id: str, authorization: Optional[str] = Header(None)) -> Dict[str, Any]:
        check_auth(authorization)
        return find(issue_id)

    @app.put("/api/0/issues/{issue_id}")
    async def write_issue(issue_id: str, request: Request,
                          authorization: Optional[str] = Header(None)) -> Dict[str, Any]:
        check_auth(authorization)
        issue = find(issue_id)
        body = await request.json()
        for key in ("status", "assignedTo", "hasSeen", "isBookmarked", "isSubscribed"):
            if key in body:
                issue[key] = body[key]
        return issue

    @app.delete("/api/0/issues/{issue_id}", status_code=202)
    def remove_issue(issue_id: str, authorization: Optional[str] = Header(None)) -> Response:
        check_auth(authorization)
        find(issue_id)
        del issues[issue_id]
        return Response(status_code=202)

    @app.get("/api/0/issues/{issue_id}/hashes")
    def list_hashes(issue_id: str, authorization: Optional[str] = Header(None)) -> List[Dict[str, Any]]:
        check_auth(authorization)
        find(issue_id)
        return [{"id": f"hash-{issue_id}"}]

    @app.get("/api/0/issues/{issue_id}/events/latest")
    def latest_event(issue_id: str, authorization: Optional[str] = Header(None)) -> Dict[str, Any]:
        check_auth(authorization)
        find(issue_id)
        return dict(EVENT, groupID=issue_id)

    return app


@pytest.fixture
def fake_sentry():
    return create_fake_sentry()


@pytest.fixture
def client(fake_sentry, config):
    with TestClient(fake_sentry) as http:
        yield Client(config, http_client=http)


def test_list_first_page(client):
    issues, link = get_issues(client, "acme", "web", stats_period="14d")

    assert [i.short_id for i in issues] == ["WEB-1", "WEB-2"]
    assert link.has_next
    assert not link.has_previous


def test_walk_every_page(client):
    issues = client.all_pages(get_issues(client, "acme", "web"), List[Issue])
    assert [i.id for i in issues] == ["1", "2", "3", "4", "5"]


def test_follow_next_page(client):
    _, link = get_issues(client, "acme", "web")

    second, link = client.get_page(link.next, List[Issue])

    assert [i.id for i in second] == ["3", "4"]
    assert link.has_previous
    assert link.has_next


def test_unknown_project(client):
    with pytest.raises(APIError) as excinfo:
        get_issues(client, "acme", "mobile")
    assert excinfo.value.status_code == 404
    assert excinfo.value.detail == "The requested resource does not exist"


def test_bad_token(fake_sentry, config):
    with TestClient(fake_sentry) as http:
        client = Client(config.model_copy(update={"auth_token": None}), http_client=http)
        with pytest.raises(APIError) as excinfo:
            get_issue(client, "1")
    assert excinfo.value.status_code == 401
    assert excinfo.value.detail == "Invalid token"


def test_resolve_and_delete(client, fake_sentry):
    issue = get_issue(client, "2")
    issue.status = Status.RESOLVED
    issue.is_bookmarked = True

    updated = update_issue(client, issue)

    assert updated.status is Status.RESOLVED
    assert updated.is_bookmarked is True
    assert fake_sentry.state.issues["2"]["status"] == "resolved"

    delete_issue(client, updated)

    assert "2" not in fake_sentry.state.issues
    with pytest.raises(APIError) as excinfo:
        get_issue(client, "2")
    assert excinfo.value.status_code == 404


def test_hashes_and_latest_event(client):
    issue = get_issue(client, "3")

    hashes, link = get_issue_hashes(client, issue)
    event = get_latest_event(client, issue)

    assert [h.id for h in hashes] == ["hash-3"]
    assert link is None
    assert event.group_id == "3"
    assert [tag for tag, _ in event.interfaces()] == ["message", "exception"]
