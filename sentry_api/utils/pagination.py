"""
utils/pagination.py
--------------------

Cursor based pagination helpers.

Sentry paginates list endpoints with a ``Link`` response header that
carries one URL per direction, for example::

    <https://sentry.io/api/0/issues/1/events/?&cursor=0:0:1>;
        rel="previous"; results="false"; cursor="0:0:1",
    <https://sentry.io/api/0/issues/1/events/?&cursor=0:100:0>;
        rel="next"; results="true"; cursor="0:100:0"

``results`` tells whether following that URL yields anything.
:func:`parse_link_header` turns the header into a :class:`Link` holding
an optional :class:`Page` per direction.  :func:`iter_pages` walks the
``next`` pages and enforces sensible limits to avoid infinite loops or
API misuse.  It stops when one of the following conditions is met:

* A page returns an empty list of items.
* There is no ``next`` page, or it is flagged as having no results.
* The next cursor is identical to the previous cursor.
* The configured maximum number of pages or items is reached.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Tuple, TypeVar

from sentry_api.errors import LinkParseError

T = TypeVar("T")

PREVIOUS = "previous"
NEXT = "next"

# entries are separated by commas that precede the next "<url>"
_ENTRY_SPLIT = re.compile(r",\s*(?=<)")
_ENTRY = re.compile(r"^\s*<([^>]*)>\s*(.*?)\s*$", re.DOTALL)
_PARAM = re.compile(r'^\s*([A-Za-z][\w-]*)\s*=\s*(?:"([^"]*)"|([^\s";]*))\s*$')


@dataclass(frozen=True)
class Page:
    """One direction of a paginated listing."""

    url: str
    rel: str
    results: bool
    cursor: Optional[str] = None

    @property
    def has_more(self) -> bool:
        return self.results


@dataclass(frozen=True)
class Link:
    """Continuation descriptor parsed from a ``Link`` header."""

    previous: Optional[Page] = None
    next: Optional[Page] = None

    @property
    def has_previous(self) -> bool:
        return self.previous is not None and self.previous.has_more

    @property
    def has_next(self) -> bool:
        return self.next is not None and self.next.has_more


def _parse_bool(value: str, header: str) -> bool:
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise LinkParseError(f"invalid results flag {value!r} in Link header {header!r}")


def _parse_params(raw: str, header: str) -> Dict[str, str]:
    params: Dict[str, str] = {}
    for chunk in raw.split(";"):
        if not chunk.strip():
            continue
        match = _PARAM.match(chunk)
        if match is None:
            raise LinkParseError(f"invalid parameter {chunk.strip()!r} in Link header {header!r}")
        value = match.group(2) if match.group(2) is not None else match.group(3)
        params[match.group(1).lower()] = value
    return params


def parse_link_header(header: Optional[str]) -> Optional[Link]:
    """Parse a Sentry ``Link`` header.

    :param header: raw header value, ``None`` when the response had none
    :raises LinkParseError: if the header is present but malformed
    :return: the parsed :class:`Link`, or ``None`` if there is no header
    """
    if header is None or not header.strip():
        return None

    pages: Dict[str, Page] = {}
    for raw_entry in _ENTRY_SPLIT.split(header.strip()):
        match = _ENTRY.match(raw_entry)
        if match is None or not match.group(1).strip():
            raise LinkParseError(f"missing <url> in Link header {header!r}")
        url, raw_params = match.group(1).strip(), match.group(2)
        if raw_params and not raw_params.startswith(";"):
            raise LinkParseError(f"unexpected text after <{url}> in Link header {header!r}")
        params = _parse_params(raw_params, header)

        rel = params.get("rel")
        if rel not in (PREVIOUS, NEXT):
            raise LinkParseError(f"missing or unknown rel {rel!r} in Link header {header!r}")
        results = _parse_bool(params["results"], header) if "results" in params else False
        pages[rel] = Page(url=url, rel=rel, results=results, cursor=params.get("cursor"))

    return Link(previous=pages.get(PREVIOUS), next=pages.get(NEXT))


def iter_pages(
    first: Tuple[List[T], Optional[Link]],
    follow: Callable[[Page], Tuple[List[T], Optional[Link]]],
    max_pages: int,
    max_items: int,
) -> Iterator[List[T]]:
    """Yield the items of a first page and of every ``next`` page after it.

    Pages are fetched lazily, one per iteration.  The last page yielded
    is cut short when it would exceed ``max_items``.

    :param first: ``(items, link)`` as returned by a paginated operation
    :param follow: function fetching a :class:`Page` and returning
        ``(items, link)`` for it
    :param max_pages: hard limit on the number of pages consumed,
        including the first one
    :param max_items: hard limit on the number of items yielded
    """
    page_items, link = first
    page_count = 1
    item_count = 0
    previous_cursor: Optional[str] = None

    while True:
        if not page_items:
            return
        if item_count + len(page_items) >= max_items:
            yield page_items[:max_items - item_count]
            return
        yield page_items
        item_count += len(page_items)
        if link is None or not link.has_next:
            return
        next_page = link.next
        # stop if the cursor does not move
        if next_page.cursor is not None and next_page.cursor == previous_cursor:
            return
        if page_count >= max_pages:
            return
        previous_cursor = next_page.cursor
        page_items, link = follow(next_page)
        page_count += 1


def paginate(
    first: Tuple[List[T], Optional[Link]],
    follow: Callable[[Page], Tuple[List[T], Optional[Link]]],
    max_pages: int,
    max_items: int,
) -> List[T]:
    """Collect every item :func:`iter_pages` yields into one list."""
    items: List[T] = []
    for page_items in iter_pages(first, follow, max_pages, max_items):
        items.extend(page_items)
    return items
