"""
errors.py
---------

Exceptions raised by the Sentry API client.

Every failure on the request pathway is surfaced to the caller as one
of the classes below; nothing is retried or swallowed locally.  All of
them derive from :class:`SentryError` so callers can catch the whole
family at once.
"""

from __future__ import annotations

from typing import Optional


class SentryError(Exception):
    """Base class for every error raised by this package."""


class TransportError(SentryError):
    """The request never produced a response (DNS, TLS, connect, timeout)."""


class APIError(SentryError):
    """Sentry answered with a non-2xx status.

    ``detail`` carries the message from the response's ``detail`` key
    when the body is JSON, otherwise the raw body text.
    """

    def __init__(self, status_code: int, detail: Optional[str] = None) -> None:
        self.status_code = status_code
        self.detail = detail or ""
        super().__init__(f"sentry: {self.detail} (status {status_code})")


class DecodeError(SentryError):
    """A body or entry payload does not match the expected shape."""


class LinkParseError(SentryError):
    """A ``Link`` pagination header is present but malformed."""
