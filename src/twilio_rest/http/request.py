from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from twilio_rest.domains import build_host


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    def __str__(self) -> str:
        return self.value


IDEMPOTENT_METHODS = frozenset({HttpMethod.GET, HttpMethod.DELETE, HttpMethod.HEAD, HttpMethod.OPTIONS})


class Request:
    """
    One outgoing call. Either a literal ``url`` (API-generated page links) or a
    ``domain`` + ``path`` pair that is resolved against region/edge at send time.
    """

    def __init__(
            self,
            method: HttpMethod,
            url: Optional[str] = None,
            domain: Optional[str] = None,
            path: Optional[str] = None,
            region: Optional[str] = None,
            edge: Optional[str] = None,
    ):
        if url is None and (domain is None or path is None):
            raise ValueError("Request needs either url or domain and path")
        self.method = HttpMethod(method)
        self._url = url
        self.domain = domain
        self.path = path
        self.region = region
        self.edge = edge
        self.query_params: Dict[str, List[str]] = {}
        self.post_params: Dict[str, List[str]] = {}
        self.headers: Dict[str, str] = {}
        self.auth: Optional[Tuple[str, str]] = None

    @property
    def url(self) -> str:
        if self._url is not None:
            return self._url
        return f"https://{build_host(self.domain, self.region, self.edge)}{self.path}"

    def add_query_param(self, name: str, value: str) -> None:
        self.query_params.setdefault(name, []).append(value)

    def add_post_param(self, name: str, value: str) -> None:
        self.post_params.setdefault(name, []).append(value)

    def __repr__(self) -> str:
        return f"<Request {self.method.value} {self.url} query={self.query_params} form={self.post_params}>"


@dataclass
class Response:
    status_code: int
    content: str = ""
    headers: Dict[str, str] = field(default_factory=dict)

    def json(self) -> Any:
        return json.loads(self.content)
