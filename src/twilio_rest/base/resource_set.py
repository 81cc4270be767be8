from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Iterator, Optional, TypeVar

from twilio_rest.base.page import Page
from twilio_rest.base.resource import Resource

if TYPE_CHECKING:
    from twilio_rest.base.operations import Reader
    from twilio_rest.rest_client import TwilioRestClient

R = TypeVar("R", bound=Resource)


class ResourceSet(Generic[R]):
    """
    Iterates records across pages, following next-page links until the
    reader's limit is reached or the server has no more pages.
    """

    def __init__(self, reader: "Reader", client: "TwilioRestClient", page: Page[R]):
        self.reader = reader
        self.client = client
        self.page = page
        self.auto_paging = True
        self.page_limit: Optional[int] = reader.get_page_limit()
        self.page_count = 1
        self.processed = 0
        self._iterator: Iterator[R] = iter(page.records)

    def set_auto_paging(self, auto_paging: bool) -> "ResourceSet[R]":
        self.auto_paging = auto_paging
        return self

    def __iter__(self) -> "ResourceSet[R]":
        return self

    def __next__(self) -> R:
        limit = self.reader.get_limit()
        if limit is not None and self.processed >= limit:
            raise StopIteration
        while True:
            try:
                item = next(self._iterator)
                break
            except StopIteration:
                if not self.auto_paging or not self._fetch_next_page():
                    raise
        self.processed += 1
        return item

    def _fetch_next_page(self) -> bool:
        if not self.page.has_next_page():
            return False
        if self.page_limit is not None and self.page_count >= self.page_limit:
            return False
        next_page = self.reader.next_page(self.page, self.client)
        if next_page is None:
            return False
        self.page = next_page
        self.page_count += 1
        self._iterator = iter(next_page.records)
        return True
