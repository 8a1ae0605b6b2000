"""
logging_config.py
------------------

This module defines a shared logging configuration and utilities for
structured logging throughout the Sentry API client.  It uses Python's
built‑in ``logging`` module so that log output can be captured by the
host application's handlers or external systems such as ELK, Grafana or
Datadog.  Messages are serialised as JSON to make them easier to parse
downstream.

To use this module, import ``logger`` and call its methods instead
of ``logging.info`` directly.  The ``log_call`` decorator can be
applied to functions to record entry and exit points at the DEBUG
level without leaking sensitive information such as tokens or
passwords.  Being a library, nothing is printed until the application
attaches a handler, for example with :func:`configure_logging`.
"""

from __future__ import annotations

import json
import logging
import sys
from functools import wraps
from typing import Any, Callable, Dict

# Expose a module level logger.  Code elsewhere can import this and log
# messages without repeatedly instantiating new Logger instances.
logger = logging.getLogger("sentry_api")
logger.addHandler(logging.NullHandler())

SENSITIVE_HEADERS = {"authorization", "cookie"}


def configure_logging(level: int = logging.INFO) -> None:
    """Send ``sentry_api`` log records to stdout.

    Records are formatted with a timestamp, log level and the raw
    message.  The message itself is a JSON string so downstream
    consumers can parse it easily.  Calling this more than once does not
    add duplicate handlers.
    """
    for handler in logger.handlers:
        if getattr(handler, "_sentry_api_stdout", False):
            handler.setLevel(level)
            logger.setLevel(level)
            return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    handler._sentry_api_stdout = True  # type: ignore[attr-defined]
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)


def _sanitize(obj: Any) -> Any:
    """Recursively sanitise objects for logging.

    The goal of this helper is to prevent sensitive information such as
    authentication tokens, passwords or binary payloads from ending up in
    the logs.  Dictionaries will have keys containing 'token', 'password'
    or 'secret' removed.  Lists and tuples are processed element‑wise.
    Pydantic models are dumped first; anything that is still not JSON
    serialisable is replaced with its ``str``.

    Parameters
    ----------
    obj : Any
        Arbitrary Python object to sanitise.

    Returns
    -------
    Any
        A sanitised representation of the input suitable for JSON serialisation.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, dict):
        clean: Dict[str, Any] = {}
        for k, v in obj.items():
            if any(keyword in str(k).lower() for keyword in ("token", "password", "secret")):
                continue
            clean[str(k)] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    if hasattr(obj, "model_dump"):
        try:
            return _sanitize(obj.model_dump(mode="json", exclude_unset=True))
        except Exception:
            return str(obj)
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return str(obj)


def log_call(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to log entry and exit of functions.

    This decorator logs a DEBUG level message before a function is executed
    and another after it returns.  The messages include the function name
    and a sanitised snapshot of the arguments and return value.  Sensitive
    information is stripped via the ``_sanitize`` helper.  Exceptions raised
    by the wrapped function propagate unchanged.

    Examples
    --------

    >>> @log_call
    ... def add(a, b):
    ...     return a + b
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not logger.isEnabledFor(logging.DEBUG):
            return func(*args, **kwargs)
        logger.debug(json.dumps({
            "event": "call_start",
            "function": func.__name__,
            # the first positional argument of every operation is the client
            "args": _sanitize(args[1:]),
            "kwargs": _sanitize(kwargs),
        }))
        result = func(*args, **kwargs)
        logger.debug(json.dumps({
            "event": "call_end",
            "function": func.__name__,
            "result": _sanitize(result),
        }))
        return result

    return wrapper


def log_http_request(method: str, url: str, *, headers: Dict[str, Any] | None = None,
                     json_body: Any = None, status: int | None = None,
                     duration_ms: float | None = None) -> None:
    """Log an outbound HTTP request at DEBUG level.

    This helper centralises HTTP request logging so that tokens are
    automatically removed from headers and only high‑level information
    (method, URL, status and duration) is recorded.  It is invoked by the
    HTTP client wrapper before and after performing requests.

    Parameters
    ----------
    method : str
        The HTTP method (GET, PUT, etc.)
    url : str
        The URL being requested.
    headers : dict, optional
        Request headers.  Sensitive keys are removed.
    json_body : Any, optional
        JSON payload for non‑GET requests.
    status : int, optional
        Response status code (log end only).
    duration_ms : float, optional
        Time taken in milliseconds (log end only).
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    data: Dict[str, Any] = {
        "event": "http_request",
        "method": method,
        "url": url,
    }
    if headers is not None:
        data["headers"] = {k: v for k, v in headers.items() if k.lower() not in SENSITIVE_HEADERS}
    if json_body:
        data["json"] = _sanitize(json_body)
    if status is not None:
        data["status"] = status
    if duration_ms is not None:
        data["duration_ms"] = round(duration_ms, 2)
    logger.debug(json.dumps(data))
