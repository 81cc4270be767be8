from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, Optional, Type, TypeVar, Union

from twilio_rest.converters import to_jsonable
from twilio_rest.exceptions import ApiException

R = TypeVar("R", bound="Resource")


def converted(convert: Callable[[Any], Any]) -> Any:
    """Field whose raw JSON value is passed through ``convert`` (skipped for null)."""
    return field(default=None, metadata={"convert": convert})


def load_json(content: Union[str, bytes, bytearray, Dict[str, Any]], what: str) -> Any:
    if isinstance(content, (str, bytes, bytearray)):
        try:
            return json.loads(content)
        except ValueError as e:
            raise ApiException(f"Unable to parse {what} JSON: {e}", cause=e)
    return content


@dataclass(frozen=True)
class Resource:
    """
    Immutable value object built from an API response. JSON keys match field
    names; keys the class does not declare are ignored.
    """

    @classmethod
    def from_json(cls: Type[R], content: Union[str, bytes, bytearray, Dict[str, Any]]) -> R:
        payload = load_json(content, cls.__name__)
        if not isinstance(payload, dict):
            raise ApiException(f"Expected a JSON object for {cls.__name__}, got {type(payload).__name__}")
        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in payload:
                continue
            val = payload[f.name]
            convert: Optional[Callable[[Any], Any]] = f.metadata.get("convert")
            kwargs[f.name] = convert(val) if convert is not None and val is not None else val
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: to_jsonable(getattr(self, f.name)) for f in fields(self)}
