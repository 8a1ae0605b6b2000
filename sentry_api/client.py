"""
client.py
---------

The request pathway shared by every endpoint.

:class:`Client` turns ``(method, relative path, payload)`` into one HTTP
round trip against the configured API root and decodes the JSON body
into the requested type.  The paginated variant additionally parses
the ``Link`` header into a :class:`~sentry_api.utils.pagination.Link`.
There is no retry, caching or local recovery: every failure surfaces as
one of the exceptions in :mod:`sentry_api.errors`.

Usage example::

    from sentry_api import Client, ClientConfig, get_issue

    with Client(ClientConfig(auth_token="...")) as client:
        issue = get_issue(client, "1234")
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Iterator, List, Mapping, Optional, Protocol, Tuple

import httpx
from pydantic import TypeAdapter, ValidationError

from sentry_api.clients.http_client import HTTPClient
from sentry_api.core.auth import build_url
from sentry_api.core.config import ClientConfig, get_settings
from sentry_api.errors import APIError, DecodeError
from sentry_api.logging_config import logger
from sentry_api.schemas.base import SentryModel
from sentry_api.utils.pagination import Link, Page, iter_pages, parse_link_header

METHODS = {"GET", "POST", "PUT", "DELETE"}


class QuerySource(Protocol):
    def to_query_string(self) -> str: ...


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def _with_query(path: str, query: Optional[QuerySource]) -> str:
    if query is None:
        return path
    qs = query.to_query_string()
    if not qs:
        return path
    return f"{path}{'&' if '?' in path else '?'}{qs}"


class Client:
    """Sentry API client bound to one immutable :class:`ClientConfig`.

    :param config: client configuration; defaults to :func:`get_settings`
    :param http_client: optional pre-built ``httpx.Client`` to send
        requests with (custom transport, proxies, tests)
    """

    def __init__(self, config: Optional[ClientConfig] = None, http_client: Optional[httpx.Client] = None) -> None:
        self.config = config if config is not None else get_settings()
        self._http = HTTPClient(self.config, client=http_client)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _send(self, method: str, path: str, payload: Any) -> httpx.Response:
        method = method.upper()
        if method not in METHODS:
            raise ValueError(f"unsupported HTTP method {method!r}")
        if isinstance(payload, SentryModel):
            body = payload.to_payload()
        elif isinstance(payload, Mapping):
            body = dict(payload)
        else:
            body = payload
        url = build_url(self.config.base_url, path)
        response = self._http.request(method, url, json_body=body)
        if not response.is_success:
            raise self._api_error(method, url, response)
        return response

    @staticmethod
    def _api_error(method: str, url: str, response: httpx.Response) -> APIError:
        try:
            body = response.json()
            detail = body.get("detail") if isinstance(body, dict) else None
        except ValueError:
            detail = None
        if detail is None:
            detail = response.text
        logger.warning(json.dumps({
            "event": "api_error",
            "method": method,
            "url": url,
            "status": response.status_code,
            "detail": str(detail),
        }))
        return APIError(response.status_code, str(detail))

    @staticmethod
    def _decode(response: httpx.Response, result_type: Any) -> Any:
        if result_type is None or not response.content.strip():
            return None
        try:
            return _adapter(result_type).validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(f"unexpected response body from {response.request.url}: {exc}") from exc

    def do(self, method: str, path: str, result_type: Any = None, payload: Any = None) -> Any:
        """Perform one call and decode the response.

        :param method: ``GET``, ``POST``, ``PUT`` or ``DELETE``
        :param path: resource path relative to the API root
        :param result_type: type to decode the JSON body into, e.g.
            ``Issue`` or ``List[Hash]``; ``None`` skips decoding
        :param payload: a :class:`SentryModel` or mapping sent as JSON
        :raises TransportError: if the request could not be sent
        :raises APIError: on a non-2xx response
        :raises DecodeError: if the body does not match ``result_type``
        :return: the decoded body, or ``None`` for an empty body
        """
        response = self._send(method, path, payload)
        return self._decode(response, result_type)

    def do_with_pagination(
        self,
        method: str,
        path: str,
        result_type: Any,
        payload: Any = None,
        query: Optional[QuerySource] = None,
    ) -> Tuple[Any, Optional[Link]]:
        """Like :meth:`do`, also returning the parsed ``Link`` header.

        :param query: object whose ``to_query_string()`` is appended to the path
        :raises LinkParseError: if the ``Link`` header is malformed
        :return: ``(decoded body, link or None)``
        """
        response = self._send(method, _with_query(path, query), payload)
        result = self._decode(response, result_type)
        return result, parse_link_header(response.headers.get("link"))

    def get_page(self, page: Page, result_type: Any) -> Tuple[Any, Optional[Link]]:
        """Fetch the listing page a :class:`Page` points at."""
        return self.do_with_pagination("GET", page.url, result_type)

    def iter_pages(self, first: Tuple[List[Any], Optional[Link]], result_type: Any) -> Iterator[List[Any]]:
        """Yield a paginated listing page by page, starting from its first page.

        Pages are fetched as the iterator advances, within the
        ``max_pages`` and ``max_items`` bounds of the configuration.
        """
        return iter_pages(
            first,
            lambda page: self.get_page(page, result_type),
            max_pages=self.config.max_pages,
            max_items=self.config.max_items,
        )

    def all_pages(self, first: Tuple[List[Any], Optional[Link]], result_type: Any) -> List[Any]:
        """Collect a paginated listing, starting from its first page.

        The walk is bounded by ``max_pages`` and ``max_items`` from the
        configuration::

            issues = client.all_pages(get_issues(client, org, project), List[Issue])
        """
        items: List[Any] = []
        for page_items in self.iter_pages(first, result_type):
            items.extend(page_items)
        return items
