"""
schemas/events.py
-----------------

Models for a single reported occurrence (an *event*) and its parts.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from pydantic import Field

from sentry_api.schemas.base import SentryModel
from sentry_api.schemas.common import Release
from sentry_api.schemas.interfaces import decode_interface


class Tag(SentryModel):
    key: Optional[str] = None
    value: Optional[str] = None


class EventUser(SentryModel):
    """The end user of the application that was affected."""

    id: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    ip_address: Optional[str] = None
    data: Optional[Dict[str, Any]] = None


class Entry(SentryModel):
    """A typed section of an event (message, stacktrace, exception, ...).

    ``data`` is kept exactly as received; call :meth:`get_interface` to
    decode it into the model matching ``type``.
    """

    type: Optional[str] = None
    data: Optional[Any] = None

    def get_interface(self) -> Tuple[str, SentryModel]:
        """Return ``(type, payload)`` with the payload decoded by type tag.

        :raises DecodeError: for an unknown type or a malformed payload
        """
        return decode_interface(self.type, self.data)


class Event(SentryModel):
    id: Optional[str] = None
    event_id: Optional[str] = Field(None, alias="eventID")
    group_id: Optional[str] = Field(None, alias="groupID")
    user_report: Optional[Any] = Field(None, alias="userReport")
    next_event_id: Optional[str] = Field(None, alias="nextEventID")
    previous_event_id: Optional[str] = Field(None, alias="previousEventID")
    message: Optional[str] = None
    title: Optional[str] = None
    size: Optional[int] = None
    platform: Optional[str] = None
    type: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    tags: Optional[List[Tag]] = None
    date_created: Optional[datetime] = Field(None, alias="dateCreated")
    date_received: Optional[datetime] = Field(None, alias="dateReceived")
    user: Optional[EventUser] = None
    entries: Optional[List[Entry]] = None
    packages: Optional[Dict[str, str]] = None
    sdk: Optional[Dict[str, Any]] = None
    contexts: Optional[Dict[str, Any]] = None
    context: Optional[Dict[str, Any]] = None
    release: Optional[Release] = None

    def interfaces(self) -> List[Tuple[str, SentryModel]]:
        """Decode every entry, in order."""
        return [entry.get_interface() for entry in self.entries or []]
