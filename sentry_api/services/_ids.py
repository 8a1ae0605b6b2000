"""Identifier helpers shared by the service modules."""

from __future__ import annotations

from typing import Union
from urllib.parse import quote

from sentry_api.schemas.common import Organization, Project
from sentry_api.schemas.issues import Issue, IssueTag


def _segment(value: str) -> str:
    return quote(value, safe="")


def slug_of(value: Union[Organization, Project, str], what: str) -> str:
    slug = value if isinstance(value, str) else value.slug
    if not slug:
        raise ValueError(f"{what} slug is required")
    return _segment(slug)


def issue_id_of(issue: Union[Issue, str]) -> str:
    issue_id = issue if isinstance(issue, str) else issue.id
    if not issue_id:
        raise ValueError("issue id is required")
    return _segment(issue_id)


def tag_key_of(tag: Union[IssueTag, str]) -> str:
    key = tag if isinstance(tag, str) else tag.key
    if not key:
        raise ValueError("tag key is required")
    return _segment(key)
