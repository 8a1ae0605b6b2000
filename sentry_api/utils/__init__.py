"""Helpers that are not tied to a particular endpoint."""

from .pagination import Link, Page, iter_pages, paginate, parse_link_header

__all__ = ["Link", "Page", "iter_pages", "paginate", "parse_link_header"]
