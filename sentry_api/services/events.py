"""
services/events.py
------------------

Endpoints returning a single event.
"""

from __future__ import annotations

from typing import Union
from urllib.parse import quote

from sentry_api.client import Client
from sentry_api.logging_config import log_call
from sentry_api.schemas.common import Organization, Project
from sentry_api.schemas.events import Event
from sentry_api.schemas.issues import Issue
from sentry_api.services._ids import issue_id_of, slug_of


@log_call
def get_project_event(client: Client, org: Union[Organization, str], project: Union[Project, str],
                      event_id: str) -> Event:
    """Fetch one event of a project by its event id."""
    if not event_id:
        raise ValueError("event id is required")
    path = f"projects/{slug_of(org, 'organization')}/{slug_of(project, 'project')}/events/{quote(event_id, safe='')}"
    return client.do("GET", path, Event)


@log_call
def get_latest_event(client: Client, issue: Union[Issue, str]) -> Event:
    """Fetch the most recent event of an issue."""
    return client.do("GET", f"issues/{issue_id_of(issue)}/events/latest", Event)


@log_call
def get_oldest_event(client: Client, issue: Union[Issue, str]) -> Event:
    """Fetch the first event recorded for an issue."""
    return client.do("GET", f"issues/{issue_id_of(issue)}/events/oldest", Event)
