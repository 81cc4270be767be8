from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from twilio_rest.base.resource import Resource, load_json
from twilio_rest.domains import url_from_uri
from twilio_rest.exceptions import ApiException

log = logging.getLogger(__name__)

R = TypeVar("R", bound=Resource)


@dataclass
class Page(Generic[R]):
    """
    One page of a list endpoint. Two envelope shapes exist:

    meta style (v1/v2 APIs)::

        {"bindings": [...], "meta": {"key": "bindings", "page": 0, "page_size": 50,
         "first_page_url": ..., "previous_page_url": ..., "next_page_url": ..., "url": ...}}

    uri style (API 2010-04-01)::

        {"queue_members": [...], "page": 0, "page_size": 50,
         "first_page_uri": ..., "previous_page_uri": ..., "next_page_uri": ..., "uri": ...}
    """
    records: List[R] = field(default_factory=list)
    page: Optional[int] = None
    page_size: Optional[int] = None
    first_page_url: Optional[str] = None
    previous_page_url: Optional[str] = None
    next_page_url: Optional[str] = None
    url: Optional[str] = None
    first_page_uri: Optional[str] = None
    previous_page_uri: Optional[str] = None
    next_page_uri: Optional[str] = None
    uri: Optional[str] = None

    @classmethod
    def from_json(
            cls,
            records_key: str,
            content: Union[str, bytes, Dict[str, Any]],
            resource_cls: Type[R],
    ) -> "Page[R]":
        payload = load_json(content, "page")
        if not isinstance(payload, dict):
            raise ApiException("Expected a JSON object for page")

        meta = payload.get("meta")
        if isinstance(meta, dict) and meta.get("key"):
            key = meta["key"]
            return cls(
                records=cls._records(payload, key, resource_cls),
                page=meta.get("page"),
                page_size=meta.get("page_size"),
                first_page_url=meta.get("first_page_url"),
                previous_page_url=meta.get("previous_page_url"),
                next_page_url=meta.get("next_page_url"),
                url=meta.get("url"),
            )

        return cls(
            records=cls._records(payload, records_key, resource_cls),
            page=payload.get("page"),
            page_size=payload.get("page_size"),
            first_page_uri=payload.get("first_page_uri"),
            previous_page_uri=payload.get("previous_page_uri"),
            next_page_uri=payload.get("next_page_uri"),
            uri=payload.get("uri"),
        )

    @staticmethod
    def _records(payload: Dict[str, Any], key: str, resource_cls: Type[R]) -> List[R]:
        raw = payload.get(key)
        if raw is None:
            log.debug("page_records_missing", extra={"key": key})
            return []
        if not isinstance(raw, list):
            raise ApiException(f"Expected a list under '{key}'")
        return [resource_cls.from_json(r) for r in raw]

    def has_next_page(self) -> bool:
        return bool(self.next_page_url or self.next_page_uri)

    def has_previous_page(self) -> bool:
        return bool(self.previous_page_url or self.previous_page_uri)

    @staticmethod
    def _resolve(url: Optional[str], uri: Optional[str], domain: str,
                 region: Optional[str], edge: Optional[str]) -> Optional[str]:
        if url:
            return url
        if uri:
            return url_from_uri(domain, uri, region, edge)
        return None

    def get_first_page_url(self, domain: str, region: Optional[str] = None, edge: Optional[str] = None) -> Optional[str]:
        return self._resolve(self.first_page_url, self.first_page_uri, domain, region, edge)

    def get_next_page_url(self, domain: str, region: Optional[str] = None, edge: Optional[str] = None) -> Optional[str]:
        return self._resolve(self.next_page_url, self.next_page_uri, domain, region, edge)

    def get_previous_page_url(self, domain: str, region: Optional[str] = None, edge: Optional[str] = None) -> Optional[str]:
        return self._resolve(self.previous_page_url, self.previous_page_uri, domain, region, edge)

    def get_url(self, domain: str, region: Optional[str] = None, edge: Optional[str] = None) -> Optional[str]:
        return self._resolve(self.url, self.uri, domain, region, edge)

    def __len__(self) -> int:
        return len(self.records)
