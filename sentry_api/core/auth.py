"""
core/auth.py
-------------

Utility functions for building authenticated requests to Sentry.

These helpers centralise construction of endpoint URLs and the HTTP
headers required to call the Sentry API. They ensure the bearer token
is read from the configuration at the last possible moment so it is
not inadvertently logged elsewhere in the library.
"""

from __future__ import annotations

from typing import Dict

from sentry_api.core.config import ClientConfig


def build_url(base_url: str, path: str) -> str:
    """Join a relative resource path onto the API root.

    Absolute URLs (as found in pagination links) are returned unchanged.
    Leading slashes on ``path`` are ignored so ``"issues/1"`` and
    ``"/issues/1"`` address the same resource.

    :param base_url: API root, already normalised to end in ``/``
    :param path: relative resource path, optionally with a query string
    :return: the absolute URL
    """
    if path.startswith(("http://", "https://")):
        return path
    return base_url + path.lstrip("/")


def build_auth_headers(config: ClientConfig) -> Dict[str, str]:
    """Create a dictionary of HTTP headers required for an authenticated call.

    The token is included as a Bearer token when one is configured;
    anonymous clients only send the content negotiation headers.

    :param config: the client configuration
    :return: a dictionary of headers suitable for use with httpx
    """
    headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "User-Agent": config.user_agent,
    }
    if config.auth_token is not None:
        headers["Authorization"] = f"Bearer {config.auth_token.get_secret_value()}"
    return headers
