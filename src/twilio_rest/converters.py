from __future__ import annotations
import datetime as dt
import json
import logging
from collections.abc import Iterable as IterableABC, Mapping
from enum import Enum
from typing import Any, Iterable, List, Optional, Type, TypeVar, Union

from dateutil import parser as dateutil_parser

log = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

# defaults differ in every component, so any part missing from the input makes the two parses disagree
_DEFAULT_A = dt.datetime(2000, 1, 1, 0, 0, 0)
_DEFAULT_B = dt.datetime(2001, 2, 2, 1, 1, 1)


# ---------- response values ----------

def iso8601_datetime(val: Optional[str]) -> Optional[dt.datetime]:
    """
    "2015-07-30T20:00:00Z" -> aware datetime (UTC when no offset given).
    Returns None for missing or unparseable input.
    """
    if not val:
        return None
    try:
        parsed = dateutil_parser.isoparse(val)
    except (ValueError, TypeError):
        log.debug("iso8601_parse_failed", extra={"value": val})
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=dt.timezone.utc)


def rfc2822_datetime(val: Optional[str]) -> Optional[dt.datetime]:
    """
    API v2010 dates: "Tue, 14 Jan 2014 21:35:12 +0000".
    """
    if not val:
        return None
    try:
        parsed = dateutil_parser.parse(val, default=_DEFAULT_A)
        check = dateutil_parser.parse(val, default=_DEFAULT_B)
    except (ValueError, OverflowError, TypeError):
        log.debug("rfc2822_parse_failed", extra={"value": val})
        return None
    if parsed != check:
        log.debug("rfc2822_incomplete", extra={"value": val})
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=dt.timezone.utc)


def enum_or_raw(enum_cls: Type[E], val: Any) -> Union[E, Any]:
    """Unknown values are kept as-is so new server-side enum members don't break parsing."""
    if val is None:
        return None
    try:
        return enum_cls(val)
    except ValueError:
        return val


# ---------- request values ----------

def serialize_datetime(val: Union[dt.datetime, dt.date, str]) -> str:
    if isinstance(val, dt.datetime):
        if val.tzinfo is not None:
            val = val.astimezone(dt.timezone.utc)
        return val.strftime("%Y-%m-%dT%H:%M:%SZ")
    if isinstance(val, dt.date):
        return val.isoformat()
    return str(val)


def is_multi_valued(val: Any) -> bool:
    """Iterables other than strings and mappings are sent as repeated parameters."""
    return isinstance(val, IterableABC) and not isinstance(val, (str, bytes, bytearray, Mapping))


def promote_list(val: Any) -> List[Any]:
    if val is None:
        return []
    if is_multi_valued(val):
        return list(val)
    return [val]


def serialize_param(val: Any) -> List[str]:
    """
    Render one parameter as wire strings; lists become repeated parameters.
    """
    if val is None:
        return []
    if is_multi_valued(val):
        out: List[str] = []
        for item in val:
            out.extend(serialize_param(item))
        return out
    if isinstance(val, bool):
        return ["true" if val else "false"]
    if isinstance(val, Enum):
        return [str(val.value)]
    if isinstance(val, (dt.datetime, dt.date)):
        return [serialize_datetime(val)]
    if isinstance(val, dict):
        return [json.dumps(val, separators=(",", ":"))]
    return [str(val)]


def to_jsonable(val: Any) -> Any:
    if isinstance(val, (dt.datetime, dt.date)):
        return val.isoformat()
    if isinstance(val, Enum):
        return val.value
    if isinstance(val, dict):
        return {k: to_jsonable(v) for k, v in val.items()}
    if isinstance(val, (list, tuple)):
        return [to_jsonable(v) for v in val]
    return val


def flatten(parts: Iterable[Optional[str]]) -> List[str]:
    return [p for p in parts if p]
