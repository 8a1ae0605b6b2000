"""
sentry_api
----------

Client library for the Sentry REST API: typed models for events,
issues, tags and hashes, and one function per endpoint built on a
shared request/pagination/decoding pathway.

>>> from sentry_api import Client, ClientConfig, get_issues
>>> client = Client(ClientConfig(auth_token="..."))
>>> issues, link = get_issues(client, "my-org", "my-project", stats_period="14d")
"""

__version__ = "0.1.0"

from .client import Client
from .core.config import ClientConfig, get_settings
from .errors import APIError, DecodeError, LinkParseError, SentryError, TransportError
from .logging_config import configure_logging
from .schemas import *  # noqa: F401,F403
from .schemas import __all__ as _schemas_all
from .services import *  # noqa: F401,F403
from .services import __all__ as _services_all
from .utils.pagination import Link, Page, iter_pages, paginate, parse_link_header

__all__ = [
    "__version__",
    "Client",
    "ClientConfig",
    "get_settings",
    "APIError",
    "DecodeError",
    "LinkParseError",
    "SentryError",
    "TransportError",
    "configure_logging",
    "Link",
    "Page",
    "iter_pages",
    "paginate",
    "parse_link_header",
    *_schemas_all,
    *_services_all,
]
