"""
core/config.py
----------------

Client configuration module.

Defines strongly‑typed settings loaded from the environment using
``pydantic-settings``. These settings control the API root, the
credentials sent with every request, the HTTP timeout and the guards
applied when walking paginated listings. A configuration object is
immutable once built and is handed explicitly to :class:`sentry_api.Client`,
so several clients pointed at different Sentry installations can live in
the same process.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sentry_api import __version__

DEFAULT_BASE_URL = "https://sentry.io/api/0/"


class ClientConfig(BaseSettings):
    """Client settings loaded from environment variables.

    The settings structure is flat and uses environment variables
    prefixed with ``SENTRY_``.  For example, to point the client at a
    self-hosted installation you can set
    ``SENTRY_BASE_URL=https://sentry.internal/api/0/``.

    Instances are frozen; build a new one with :meth:`model_copy` to
    change a value.
    """

    base_url: str = Field(DEFAULT_BASE_URL, description="API root every relative path is resolved against.")
    auth_token: Optional[SecretStr] = Field(None, description="Bearer token sent in the Authorization header.")
    http_timeout: float = Field(60.0, gt=0, description="Hard timeout for HTTP requests in seconds.")
    user_agent: str = Field(f"sentry-api-python/{__version__}", description="User-Agent header value.")

    # Pagination guards
    max_pages: int = Field(50, ge=1, description="Maximum number of pages to request when paginating.")
    max_items: int = Field(1000, ge=1, description="Maximum number of items to retrieve during pagination.")

    model_config = SettingsConfigDict(env_prefix="SENTRY_", env_file=None, case_sensitive=False, frozen=True)

    @field_validator("base_url")
    @classmethod
    def normalize_base_url(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must be an absolute http(s) URL")
        if not v.endswith("/"):
            v += "/"
        return v


@lru_cache()
def get_settings() -> ClientConfig:
    """Return a cached instance of the client settings.

    Using a cache prevents expensive environment parsing on every call.
    The returned object is immutable and safe to share across threads.
    """
    return ClientConfig()
