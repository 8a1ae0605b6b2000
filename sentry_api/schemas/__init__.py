"""
Models mirroring the Sentry API JSON schema.

Everything is re-exported here so callers can write
``from sentry_api.schemas import Issue`` without caring which module a
record lives in.
"""

from .base import SentryModel
from .common import Avatar, InternalUser, Organization, Project, Release
from .events import Entry, Event, EventUser, Tag
from .interfaces import (
    INTERFACES,
    Breadcrumb,
    Breadcrumbs,
    EntryType,
    ExceptionInterface,
    ExceptionValue,
    Frame,
    Mechanism,
    Message,
    Query,
    Request,
    Stacktrace,
    Template,
    UserInterface,
    decode_interface,
)
from .issues import Activity, Hash, Issue, IssueQuery, IssueStats, IssueTag, IssueTagValue, Stat, Status

__all__ = [
    "SentryModel",
    "Avatar",
    "InternalUser",
    "Organization",
    "Project",
    "Release",
    "Entry",
    "Event",
    "EventUser",
    "Tag",
    "INTERFACES",
    "Breadcrumb",
    "Breadcrumbs",
    "EntryType",
    "ExceptionInterface",
    "ExceptionValue",
    "Frame",
    "Mechanism",
    "Message",
    "Query",
    "Request",
    "Stacktrace",
    "Template",
    "UserInterface",
    "decode_interface",
    "Activity",
    "Hash",
    "Issue",
    "IssueQuery",
    "IssueStats",
    "IssueTag",
    "IssueTagValue",
    "Stat",
    "Status",
]
