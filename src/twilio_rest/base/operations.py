"""
Request builders shared by every resource.

A concrete operation only declares where it lives and which parameters it
accepts; building the request, translating failures and decoding the body
happen here::

    class ServiceFetcher(Fetcher):
        resource = Service
        domain = Domain.IPMESSAGING
        path = "/v2/Services/{sid}"
"""
from __future__ import annotations

import logging
import math
import string
from concurrent.futures import Future
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple, Type
from urllib.parse import quote

from twilio_rest.base.page import Page
from twilio_rest.base.resource import Resource
from twilio_rest.base.resource_set import ResourceSet
from twilio_rest.converters import serialize_param
from twilio_rest.domains import Domain
from twilio_rest.exceptions import (
    ApiConnectionException,
    ApiException,
    InvalidRequestException,
    RestException,
)
from twilio_rest.http import HttpMethod, Request, Response
from twilio_rest.rest_client import TwilioRestClient
from twilio_rest.twilio import get_executor, get_rest_client

log = logging.getLogger(__name__)

_formatter = string.Formatter()

MAX_PAGE_SIZE = 1000


class Operation:
    resource: ClassVar[Type[Resource]]
    domain: ClassVar[Domain]
    path: ClassVar[str]
    method: ClassVar[HttpMethod] = HttpMethod.GET
    action: ClassVar[str] = "request"
    # python keyword -> wire parameter name
    params: ClassVar[Mapping[str, str]] = {}
    required: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, path_args: Dict[str, Any], **values: Any):
        self._path_args = path_args
        self._values: Dict[str, Any] = {}
        self.set(**values)
        self._check_required()

    def set(self, **values: Any) -> "Operation":
        for name, value in values.items():
            if name not in self.params:
                raise InvalidRequestException(f"{type(self).__name__} has no parameter {name}", name)
            self._values[name] = value
        return self

    def get(self, name: str) -> Any:
        return self._values.get(name)

    def _check_required(self) -> None:
        for name in self.required:
            if self._values.get(name) is None:
                raise InvalidRequestException(f"Required parameter {name} is missing", name)

    def _client(self, client: Optional[TwilioRestClient]) -> TwilioRestClient:
        return client if client is not None else get_rest_client()

    def _resolve_path(self, client: TwilioRestClient) -> str:
        args: Dict[str, str] = {}
        for _, name, _, _ in _formatter.parse(self.path):
            if name is None:
                continue
            value = self._path_args.get(name)
            if value is None and name == "account_sid":
                value = client.account_sid
            if value is None:
                raise InvalidRequestException(f"Path parameter {name} is missing", name)
            args[name] = quote(str(value), safe="")
        return self.path.format(**args)

    def _build_request(self, client: TwilioRestClient) -> Request:
        self._check_required()
        request = Request(self.method, domain=self.domain.value, path=self._resolve_path(client))
        add = request.add_post_param if self.method == HttpMethod.POST else request.add_query_param
        for name, wire in self.params.items():
            for value in serialize_param(self._values.get(name)):
                add(wire, value)
        return request

    def _execute(self, client: TwilioRestClient, request: Request) -> Response:
        response = client.request(request)
        name = self.resource.__name__
        if response is None:
            raise ApiConnectionException(f"{name} {self.action} failed: Unable to connect to server")
        if not client.SUCCESS(response.status_code):
            rest = RestException.from_json(response.content)
            if rest is None:
                raise ApiException("Server Error, no content", status=response.status_code)
            log.debug(
                "api_error",
                extra={"resource": name, "action": self.action, "status": response.status_code, "code": rest.code},
            )
            raise ApiException(
                rest.message or f"{name} {self.action} failed",
                rest.code,
                rest.more_info,
                rest.status if rest.status is not None else response.status_code,
            )
        return response

    def __repr__(self) -> str:
        return f"<{type(self).__name__} path_args={self._path_args} params={self._values}>"


class Fetcher(Operation):
    action = "fetch"

    def fetch(self, client: Optional[TwilioRestClient] = None) -> Resource:
        client = self._client(client)
        response = self._execute(client, self._build_request(client))
        return self.resource.from_json(response.content)

    def fetch_async(self, client: Optional[TwilioRestClient] = None) -> "Future[Resource]":
        return get_executor().submit(self.fetch, client)


class Creator(Operation):
    method = HttpMethod.POST
    action = "creation"

    def create(self, client: Optional[TwilioRestClient] = None) -> Resource:
        client = self._client(client)
        response = self._execute(client, self._build_request(client))
        return self.resource.from_json(response.content)

    def create_async(self, client: Optional[TwilioRestClient] = None) -> "Future[Resource]":
        return get_executor().submit(self.create, client)


class Updater(Operation):
    method = HttpMethod.POST
    action = "update"

    def update(self, client: Optional[TwilioRestClient] = None) -> Resource:
        client = self._client(client)
        response = self._execute(client, self._build_request(client))
        return self.resource.from_json(response.content)

    def update_async(self, client: Optional[TwilioRestClient] = None) -> "Future[Resource]":
        return get_executor().submit(self.update, client)


class Deleter(Operation):
    method = HttpMethod.DELETE
    action = "delete"

    def delete(self, client: Optional[TwilioRestClient] = None) -> bool:
        client = self._client(client)
        response = self._execute(client, self._build_request(client))
        return response.status_code == 204

    def delete_async(self, client: Optional[TwilioRestClient] = None) -> "Future[bool]":
        return get_executor().submit(self.delete, client)


class Reader(Operation):
    action = "read"
    records_key: ClassVar[str]

    def __init__(self, path_args: Dict[str, Any], **values: Any):
        super().__init__(path_args, **values)
        self._limit: Optional[int] = None
        self._page_size: Optional[int] = None

    def limit(self, limit: int) -> "Reader":
        if limit <= 0:
            raise InvalidRequestException("limit must be positive", "limit")
        self._limit = limit
        if self._page_size is None:
            self._page_size = min(limit, MAX_PAGE_SIZE)
        return self

    def page_size(self, page_size: int) -> "Reader":
        if not 1 <= page_size <= MAX_PAGE_SIZE:
            raise InvalidRequestException(f"page_size must be between 1 and {MAX_PAGE_SIZE}", "page_size")
        self._page_size = page_size
        return self

    def get_limit(self) -> Optional[int]:
        return self._limit

    def get_page_size(self) -> Optional[int]:
        return self._page_size

    def get_page_limit(self) -> Optional[int]:
        if self._limit is None or self._page_size is None:
            return None
        return math.ceil(self._limit / self._page_size)

    def read(self, client: Optional[TwilioRestClient] = None) -> ResourceSet:
        client = self._client(client)
        return ResourceSet(self, client, self.first_page(client))

    def list(self, client: Optional[TwilioRestClient] = None) -> List[Resource]:
        return list(self.read(client))

    def first_page(self, client: Optional[TwilioRestClient] = None) -> Page:
        client = self._client(client)
        request = self._build_request(client)
        if self._page_size is not None:
            request.add_query_param("PageSize", str(self._page_size))
        return self._page_for_request(client, request)

    def get_page(self, target_url: str, client: Optional[TwilioRestClient] = None) -> Page:
        client = self._client(client)
        return self._page_for_request(client, Request(HttpMethod.GET, url=target_url))

    def next_page(self, page: Page, client: Optional[TwilioRestClient] = None) -> Optional[Page]:
        client = self._client(client)
        url = page.get_next_page_url(self.domain.value, client.region, client.edge)
        if url is None:
            return None
        return self._page_for_request(client, Request(HttpMethod.GET, url=url))

    def previous_page(self, page: Page, client: Optional[TwilioRestClient] = None) -> Optional[Page]:
        client = self._client(client)
        url = page.get_previous_page_url(self.domain.value, client.region, client.edge)
        if url is None:
            return None
        return self._page_for_request(client, Request(HttpMethod.GET, url=url))

    def read_async(self, client: Optional[TwilioRestClient] = None) -> "Future[ResourceSet]":
        return get_executor().submit(self.read, client)

    def list_async(self, client: Optional[TwilioRestClient] = None) -> "Future[List[Resource]]":
        return get_executor().submit(self.list, client)

    def _page_for_request(self, client: TwilioRestClient, request: Request) -> Page:
        response = self._execute(client, request)
        page = Page.from_json(self.records_key, response.content, self.resource)
        log.debug("page_read", extra={"resource": self.resource.__name__, "records": len(page)})
        return page
