"""Calls waiting in a queue (API 2010-04-01)."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from twilio_rest.base import Fetcher, Reader, Resource, Updater, converted
from twilio_rest.converters import rfc2822_datetime
from twilio_rest.domains import Domain
from twilio_rest.http import HttpMethod

FRONT = "Front"


@dataclass(frozen=True)
class Member(Resource):
    call_sid: Optional[str] = None
    queue_sid: Optional[str] = None
    date_enqueued: Optional[datetime] = converted(rfc2822_datetime)
    position: Optional[int] = None
    uri: Optional[str] = None
    wait_time: Optional[int] = None

    @property
    def sid(self) -> Optional[str]:
        return self.call_sid

    @staticmethod
    def fetcher(queue_sid: str, call_sid: str = FRONT, account_sid: Optional[str] = None) -> "MemberFetcher":
        """Fetch one member; ``call_sid="Front"`` addresses the head of the queue."""
        return MemberFetcher(queue_sid, call_sid, account_sid=account_sid)

    @staticmethod
    def updater(
            queue_sid: str,
            call_sid: str,
            url: str,
            method: HttpMethod = HttpMethod.POST,
            account_sid: Optional[str] = None,
    ) -> "MemberUpdater":
        """Dequeue a member and have its call execute the TwiML document at ``url``."""
        return MemberUpdater(queue_sid, call_sid, url, method, account_sid=account_sid)

    @staticmethod
    def reader(queue_sid: str, account_sid: Optional[str] = None) -> "MemberReader":
        return MemberReader(queue_sid, account_sid=account_sid)


_MEMBERS = "/2010-04-01/Accounts/{account_sid}/Queues/{queue_sid}/Members"


class MemberFetcher(Fetcher):
    resource = Member
    domain = Domain.API
    path = _MEMBERS + "/{call_sid}.json"

    def __init__(self, queue_sid: str, call_sid: str = FRONT, account_sid: Optional[str] = None):
        super().__init__({"account_sid": account_sid, "queue_sid": queue_sid, "call_sid": call_sid})


class MemberUpdater(Updater):
    resource = Member
    domain = Domain.API
    path = _MEMBERS + "/{call_sid}.json"
    params = {"url": "Url", "method": "Method"}
    required = ("url", "method")

    def __init__(
            self,
            queue_sid: str,
            call_sid: str,
            url: str,
            method: HttpMethod = HttpMethod.POST,
            account_sid: Optional[str] = None,
    ):
        super().__init__(
            {"account_sid": account_sid, "queue_sid": queue_sid, "call_sid": call_sid},
            url=url,
            method=method,
        )


class MemberReader(Reader):
    resource = Member
    domain = Domain.API
    path = _MEMBERS + ".json"
    records_key = "queue_members"

    def __init__(self, queue_sid: str, account_sid: Optional[str] = None):
        super().__init__({"account_sid": account_sid, "queue_sid": queue_sid})
