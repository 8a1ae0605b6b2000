"""
services/issues.py
------------------

Endpoints for issues and their sub-resources.

Listing endpoints return ``(items, link)``; pass the tuple to
:meth:`sentry_api.Client.all_pages` to walk the remaining pages.
Updates send the whole issue back with ``PUT``; Sentry only applies the
mutable fields (status, assignment, seen, bookmark and subscription
flags).
"""

from __future__ import annotations

from typing import List, Optional, Tuple, Union

from sentry_api.client import Client
from sentry_api.logging_config import log_call
from sentry_api.schemas.common import Organization, Project
from sentry_api.schemas.events import Event
from sentry_api.schemas.issues import Hash, Issue, IssueQuery, IssueTag, IssueTagValue
from sentry_api.services._ids import issue_id_of, slug_of, tag_key_of
from sentry_api.utils.pagination import Link


@log_call
def get_issues(
    client: Client,
    org: Union[Organization, str],
    project: Union[Project, str],
    stats_period: Optional[str] = None,
    short_id_lookup: Optional[bool] = None,
    query: Optional[str] = None,
) -> Tuple[List[Issue], Optional[Link]]:
    """List the issues of a project.

    :param stats_period: ``"24h"``, ``"14d"`` or empty to disable stats
    :param short_id_lookup: also match ``query`` against issue short ids
    :param query: Sentry search query, e.g. ``"is:unresolved"``
    """
    filters = IssueQuery(stats_period=stats_period, short_id_lookup=short_id_lookup, query=query)
    path = f"projects/{slug_of(org, 'organization')}/{slug_of(project, 'project')}/issues"
    return client.do_with_pagination("GET", path, List[Issue], query=filters)


@log_call
def get_issue(client: Client, issue_id: str) -> Issue:
    return client.do("GET", f"issues/{issue_id_of(issue_id)}", Issue)


@log_call
def get_issue_hashes(client: Client, issue: Union[Issue, str]) -> Tuple[List[Hash], Optional[Link]]:
    return client.do_with_pagination("GET", f"issues/{issue_id_of(issue)}/hashes", List[Hash])


@log_call
def get_issue_tags(client: Client, issue: Union[Issue, str]) -> Tuple[List[IssueTag], Optional[Link]]:
    return client.do_with_pagination("GET", f"issues/{issue_id_of(issue)}/tags", List[IssueTag])


@log_call
def get_issue_tag(client: Client, issue: Union[Issue, str], tag_name: str) -> IssueTag:
    """Fetch one tag of an issue, e.g. ``environment``, ``release`` or ``server_name``."""
    return client.do("GET", f"issues/{issue_id_of(issue)}/tags/{tag_key_of(tag_name)}", IssueTag)


@log_call
def get_issue_tag_values(client: Client, issue: Union[Issue, str],
                         tag: Union[IssueTag, str]) -> Tuple[List[IssueTagValue], Optional[Link]]:
    path = f"issues/{issue_id_of(issue)}/tags/{tag_key_of(tag)}/values"
    return client.do_with_pagination("GET", path, List[IssueTagValue])


@log_call
def get_issue_events(client: Client, issue: Union[Issue, str]) -> Tuple[List[Event], Optional[Link]]:
    return client.do_with_pagination("GET", f"issues/{issue_id_of(issue)}/events", List[Event])


@log_call
def get_issue_events_full(client: Client, issue: Union[Issue, str]) -> Tuple[List[Event], Optional[Link]]:
    """Like :func:`get_issue_events` but with entries and contexts included."""
    return client.do_with_pagination("GET", f"issues/{issue_id_of(issue)}/events/?full=true", List[Event])


@log_call
def update_issue(client: Client, issue: Issue) -> Issue:
    """Send the whole issue back and return the record Sentry answers with."""
    updated = client.do("PUT", f"issues/{issue_id_of(issue)}", Issue, payload=issue)
    return updated if updated is not None else issue


@log_call
def delete_issue(client: Client, issue: Union[Issue, str]) -> None:
    client.do("DELETE", f"issues/{issue_id_of(issue)}")
