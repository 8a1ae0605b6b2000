"""
Per-endpoint operations.

Each function takes a :class:`sentry_api.Client` first, builds the
resource path from its identifiers and delegates to the client.
"""

from .events import get_latest_event, get_oldest_event, get_project_event
from .issues import (
    delete_issue,
    get_issue,
    get_issue_events,
    get_issue_events_full,
    get_issue_hashes,
    get_issue_tag,
    get_issue_tag_values,
    get_issue_tags,
    get_issues,
    update_issue,
)

__all__ = [
    "get_latest_event",
    "get_oldest_event",
    "get_project_event",
    "delete_issue",
    "get_issue",
    "get_issue_events",
    "get_issue_events_full",
    "get_issue_hashes",
    "get_issue_tag",
    "get_issue_tag_values",
    "get_issue_tags",
    "get_issues",
    "update_issue",
]
