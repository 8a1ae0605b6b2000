"""
schemas/common.py
-----------------

Records shared by events and issues: the organization and project an
endpoint is scoped to, releases, and Sentry's own (internal) users.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from sentry_api.schemas.base import SentryModel


class Organization(SentryModel):
    id: Optional[str] = None
    slug: Optional[str] = None
    name: Optional[str] = None
    date_created: Optional[datetime] = Field(None, alias="dateCreated")
    is_early_adopter: Optional[bool] = Field(None, alias="isEarlyAdopter")


class Project(SentryModel):
    id: Optional[str] = None
    slug: Optional[str] = None
    name: Optional[str] = None
    platform: Optional[str] = None
    status: Optional[str] = None
    color: Optional[str] = None
    date_created: Optional[datetime] = Field(None, alias="dateCreated")
    is_public: Optional[bool] = Field(None, alias="isPublic")
    is_bookmarked: Optional[bool] = Field(None, alias="isBookmarked")
    first_event: Optional[datetime] = Field(None, alias="firstEvent")
    features: Optional[List[str]] = None
    organization: Optional[Organization] = None


class Release(SentryModel):
    """A deployed version of the application the event came from."""

    version: Optional[str] = None
    short_version: Optional[str] = Field(None, alias="shortVersion")
    ref: Optional[str] = None
    url: Optional[str] = None
    owner: Optional[Dict[str, Any]] = None
    data: Optional[Dict[str, Any]] = None
    new_groups: Optional[int] = Field(None, alias="newGroups")
    date_created: Optional[datetime] = Field(None, alias="dateCreated")
    date_released: Optional[datetime] = Field(None, alias="dateReleased")
    first_event: Optional[datetime] = Field(None, alias="firstEvent")
    last_event: Optional[datetime] = Field(None, alias="lastEvent")


class Avatar(SentryModel):
    avatar_type: Optional[str] = Field(None, alias="avatarType")
    avatar_uuid: Optional[str] = Field(None, alias="avatarUuid")


class InternalUser(SentryModel):
    """A member of the Sentry organization, as opposed to an end user of the app."""

    id: Optional[str] = None
    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = Field(None, alias="avatarUrl")
    avatar: Optional[Avatar] = None
    date_joined: Optional[datetime] = Field(None, alias="dateJoined")
    last_login: Optional[datetime] = Field(None, alias="lastLogin")
    has_2fa: Optional[bool] = Field(None, alias="has2fa")
    is_active: Optional[bool] = Field(None, alias="isActive")
    is_managed: Optional[bool] = Field(None, alias="isManaged")
