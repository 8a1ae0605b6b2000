"""
schemas/issues.py
-----------------

Models for issues (groups of events sharing a signature) and the
records returned by the issue sub-resources: hashes, tags, tag values
and activity.  :class:`IssueQuery` holds the filters accepted by the
project issue listing.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

import httpx
from pydantic import BaseModel, Field, field_validator

from sentry_api.schemas.base import SentryModel
from sentry_api.schemas.common import InternalUser, Project
from sentry_api.schemas.events import Event


class Status(str, Enum):
    RESOLVED = "resolved"
    UNRESOLVED = "unresolved"
    IGNORED = "ignored"


_STATUS_VALUES = {s.value for s in Status}


# [unix timestamp, event count]
Stat = Tuple[Union[int, float], Union[int, float]]


class Hash(SentryModel):
    """Fingerprint that groups events into an issue."""

    id: Optional[str] = None


class IssueStats(SentryModel):
    twenty_four_hours: Optional[List[Stat]] = Field(None, alias="24h")
    thirty_days: Optional[List[Stat]] = Field(None, alias="30d")


class IssueTagValue(SentryModel):
    id: Optional[str] = None
    key: Optional[str] = None
    name: Optional[str] = None
    value: Optional[str] = None
    count: Optional[int] = None
    first_seen: Optional[datetime] = Field(None, alias="firstSeen")
    last_seen: Optional[datetime] = Field(None, alias="lastSeen")


class IssueTag(SentryModel):
    id: Optional[str] = None
    key: Optional[str] = None
    name: Optional[str] = None
    unique_values: Optional[int] = Field(None, alias="uniqueValues")
    top_values: Optional[List[IssueTagValue]] = Field(None, alias="topValues")


class Activity(SentryModel):
    id: Optional[str] = None
    type: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    date_created: Optional[datetime] = Field(None, alias="dateCreated")
    user: Optional[InternalUser] = None


class Issue(SentryModel):
    id: Optional[str] = None
    short_id: Optional[str] = Field(None, alias="shortId")
    share_id: Optional[str] = Field(None, alias="shareId")
    title: Optional[str] = None
    culprit: Optional[str] = None
    permalink: Optional[str] = None
    level: Optional[str] = None
    logger: Optional[str] = None
    type: Optional[str] = None
    # statuses outside Status (e.g. "reprocessing") are kept as plain strings
    status: Optional[Union[Status, str]] = None
    status_details: Optional[Dict[str, Any]] = Field(None, alias="statusDetails")
    # Sentry reports the event count as a string
    count: Optional[str] = None
    user_count: Optional[int] = Field(None, alias="userCount")
    user_report_count: Optional[int] = Field(None, alias="userReportCount")
    num_comments: Optional[int] = Field(None, alias="numComments")
    first_seen: Optional[datetime] = Field(None, alias="firstSeen")
    last_seen: Optional[datetime] = Field(None, alias="lastSeen")
    has_seen: Optional[bool] = Field(None, alias="hasSeen")
    is_bookmarked: Optional[bool] = Field(None, alias="isBookmarked")
    is_public: Optional[bool] = Field(None, alias="isPublic")
    is_subscribed: Optional[bool] = Field(None, alias="isSubscribed")
    subscription_details: Optional[Dict[str, Any]] = Field(None, alias="subscriptionDetails")
    assigned_to: Optional[InternalUser] = Field(None, alias="assignedTo")
    annotations: Optional[List[str]] = None
    activity: Optional[List[Activity]] = None
    metadata: Optional[Dict[str, Any]] = None
    project: Optional[Project] = None
    stats: Optional[IssueStats] = None
    tags: Optional[List[IssueTag]] = None
    events: Optional[List[Event]] = Field(None, alias="_events")

    @field_validator("status", mode="after")
    @classmethod
    def known_status(cls, v: Optional[Union[Status, str]]) -> Optional[Union[Status, str]]:
        if isinstance(v, str) and not isinstance(v, Status) and v in _STATUS_VALUES:
            return Status(v)
        return v


class IssueQuery(BaseModel):
    """Filters for the project issue listing.

    Only the filters that are set end up in the query string, in the
    order ``statsPeriod``, ``shortIdLookup``, ``query``.
    """

    stats_period: Optional[str] = None
    short_id_lookup: Optional[bool] = None
    query: Optional[str] = None

    def to_query_string(self) -> str:
        params: List[Tuple[str, str]] = []
        if self.stats_period is not None:
            params.append(("statsPeriod", self.stats_period))
        if self.short_id_lookup is not None:
            params.append(("shortIdLookup", "true" if self.short_id_lookup else "false"))
        if self.query is not None:
            params.append(("query", self.query))
        return str(httpx.QueryParams(params))
