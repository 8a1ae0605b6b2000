"""
clients/http_client.py
----------------------

HTTP client wrapper around ``httpx``.  A single instance is owned by
each :class:`sentry_api.Client` and reused for every call so that
connections are pooled by the underlying ``httpx.Client``.

Requests are sent exactly once.  Connection level failures are logged
and re-raised as :class:`sentry_api.errors.TransportError`; HTTP error
statuses are returned to the caller untouched, interpreting them is
the job of the request layer.
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Optional, Tuple

import httpx

from sentry_api.core.auth import build_auth_headers
from sentry_api.core.config import ClientConfig
from sentry_api.errors import TransportError
from sentry_api.logging_config import log_http_request, logger


def _origin(url: httpx.URL) -> Tuple[str, str, Optional[int]]:
    return url.scheme, url.host, url.port


class HTTPClient:
    """Thin synchronous HTTP client bound to one configuration.

    The auth headers are computed once from the configuration and sent
    with every request.  Pass ``client`` to supply a pre-built
    ``httpx.Client`` (custom transport, proxies, test doubles); it is
    then the caller's job to close it.
    """

    def __init__(self, config: ClientConfig, client: Optional[httpx.Client] = None) -> None:
        self.config = config
        self.headers = build_auth_headers(config)
        self._owns_client = client is None
        self._api_origin = _origin(httpx.URL(config.base_url))
        # HTTPX Client uses connection pooling
        self._client = client if client is not None else httpx.Client(timeout=config.http_timeout)

    def close(self) -> None:
        """Close the underlying HTTPX client and release resources."""
        if self._owns_client:
            self._client.close()

    def request(self, method: str, url: str, *, json_body: Any = None,
                headers: Optional[Dict[str, str]] = None) -> httpx.Response:
        """Perform a single HTTP request.

        :param method: HTTP method, already upper-cased
        :param url: absolute URL
        :param json_body: JSON-serialisable payload, sent only when not ``None``
        :param headers: extra headers merged over the auth headers
        :raises TransportError: if no response could be obtained
        :return: the raw response, whatever its status
        """
        merged = dict(self.headers)
        if headers:
            merged.update(headers)
        # the token only goes to the configured API host
        if _origin(httpx.URL(url)) != self._api_origin:
            merged.pop("Authorization", None)
        # timeouts come from the httpx.Client, so an injected one keeps its own
        kwargs: Dict[str, Any] = {"headers": merged}
        if json_body is not None:
            kwargs["json"] = json_body

        log_http_request(method, url, headers=merged, json_body=json_body)
        start_time = time.time()
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(json.dumps({
                "event": "http_error",
                "method": method,
                "url": url,
                "detail": str(exc),
                "duration_ms": round(duration_ms, 2),
            }))
            raise TransportError(f"{method} {url}: {exc}") from exc
        duration_ms = (time.time() - start_time) * 1000
        log_http_request(method, url, status=response.status_code, duration_ms=duration_ms)
        return response
