"""Transport wrappers used by :class:`sentry_api.Client`."""

from .http_client import HTTPClient

__all__ = ["HTTPClient"]
