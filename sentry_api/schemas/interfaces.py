"""
schemas/interfaces.py
---------------------

Payload variants carried by event entries.

An event's ``entries`` list holds sections such as the message, the
stack trace or the HTTP request that triggered the error.  Each entry
has a ``type`` tag and an opaque ``data`` object whose shape depends on
that tag.  The set of tags is closed: :class:`EntryType` enumerates
them and :data:`INTERFACES` maps each one to the model its payload is
decoded into.  :func:`decode_interface` is the single place where that
selection happens.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from pydantic import Field, ValidationError

from sentry_api.errors import DecodeError
from sentry_api.schemas.base import SentryModel


class EntryType(str, Enum):
    MESSAGE = "message"
    STACKTRACE = "stacktrace"
    EXCEPTION = "exception"
    REQUEST = "request"
    TEMPLATE = "template"
    USER = "user"
    QUERY = "query"
    BREADCRUMBS = "breadcrumbs"


class Message(SentryModel):
    message: Optional[str] = None
    formatted: Optional[str] = None
    params: Optional[Any] = None


class Frame(SentryModel):
    filename: Optional[str] = None
    abs_path: Optional[str] = Field(None, alias="absPath")
    module: Optional[str] = None
    package: Optional[str] = None
    platform: Optional[str] = None
    function: Optional[str] = None
    raw_function: Optional[str] = Field(None, alias="rawFunction")
    symbol: Optional[str] = None
    instruction_addr: Optional[str] = Field(None, alias="instructionAddr")
    line_no: Optional[int] = Field(None, alias="lineNo")
    col_no: Optional[int] = Field(None, alias="colNo")
    in_app: Optional[bool] = Field(None, alias="inApp")
    # [[line number, source line], ...]
    context: Optional[List[List[Any]]] = None
    vars: Optional[Dict[str, Any]] = None
    errors: Optional[Any] = None


class Stacktrace(SentryModel):
    frames: Optional[List[Frame]] = None
    frames_omitted: Optional[List[int]] = Field(None, alias="framesOmitted")
    has_system_frames: Optional[bool] = Field(None, alias="hasSystemFrames")
    registers: Optional[Dict[str, Any]] = None


class Mechanism(SentryModel):
    type: Optional[str] = None
    handled: Optional[bool] = None
    description: Optional[str] = None
    help_link: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    meta: Optional[Dict[str, Any]] = None


class ExceptionValue(SentryModel):
    type: Optional[str] = None
    value: Optional[str] = None
    module: Optional[str] = None
    thread_id: Optional[Union[int, str]] = Field(None, alias="threadId")
    mechanism: Optional[Mechanism] = None
    stacktrace: Optional[Stacktrace] = None
    raw_stacktrace: Optional[Stacktrace] = Field(None, alias="rawStacktrace")


class ExceptionInterface(SentryModel):
    values: Optional[List[ExceptionValue]] = None
    exc_omitted: Optional[List[int]] = Field(None, alias="excOmitted")
    has_system_frames: Optional[bool] = Field(None, alias="hasSystemFrames")


class Request(SentryModel):
    url: Optional[str] = None
    method: Optional[str] = None
    fragment: Optional[str] = None
    # Sentry sends query/headers/cookies either as a string or as [[key, value], ...]
    query: Optional[Any] = None
    headers: Optional[Any] = None
    cookies: Optional[Any] = None
    data: Optional[Any] = None
    env: Optional[Dict[str, Any]] = None
    inferred_content_type: Optional[str] = Field(None, alias="inferredContentType")


class Template(SentryModel):
    filename: Optional[str] = None
    abs_path: Optional[str] = Field(None, alias="absPath")
    line_no: Optional[int] = Field(None, alias="lineNo")
    context: Optional[List[List[Any]]] = None
    pre_context: Optional[List[str]] = Field(None, alias="preContext")
    post_context: Optional[List[str]] = Field(None, alias="postContext")


class UserInterface(SentryModel):
    id: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    name: Optional[str] = None
    ip_address: Optional[str] = None
    data: Optional[Dict[str, Any]] = None


class Query(SentryModel):
    query: Optional[str] = None
    engine: Optional[str] = None


class Breadcrumb(SentryModel):
    timestamp: Optional[datetime] = None
    type: Optional[str] = None
    category: Optional[str] = None
    level: Optional[str] = None
    message: Optional[str] = None
    event_id: Optional[str] = None
    data: Optional[Dict[str, Any]] = None


class Breadcrumbs(SentryModel):
    values: Optional[List[Breadcrumb]] = None


INTERFACES: Dict[EntryType, Type[SentryModel]] = {
    EntryType.MESSAGE: Message,
    EntryType.STACKTRACE: Stacktrace,
    EntryType.EXCEPTION: ExceptionInterface,
    EntryType.REQUEST: Request,
    EntryType.TEMPLATE: Template,
    EntryType.USER: UserInterface,
    EntryType.QUERY: Query,
    EntryType.BREADCRUMBS: Breadcrumbs,
}


def decode_interface(type_tag: Optional[str], raw: Any) -> Tuple[str, SentryModel]:
    """Decode an entry payload into the variant named by ``type_tag``.

    ``raw`` is either the already-parsed JSON value or JSON text/bytes.

    :raises DecodeError: if the tag is unknown, the payload is missing or
        it does not validate against the selected variant
    :return: the tag and the decoded variant
    """
    try:
        entry_type = EntryType(type_tag)
    except ValueError:
        raise DecodeError(f"unknown entry type {type_tag!r}") from None
    if raw is None:
        raise DecodeError(f"entry of type {type_tag!r} has no data")

    model = INTERFACES[entry_type]
    try:
        if isinstance(raw, (str, bytes, bytearray)):
            value = model.model_validate_json(raw)
        else:
            value = model.model_validate(raw)
    except ValidationError as exc:
        raise DecodeError(f"invalid {type_tag!r} entry: {exc}") from exc
    return entry_type.value, value
