from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from twilio_rest.base import Creator, Deleter, Fetcher, Reader, Resource, Updater, converted
from twilio_rest.converters import rfc2822_datetime
from twilio_rest.domains import Domain


@dataclass(frozen=True)
class Queue(Resource):
    sid: Optional[str] = None
    account_sid: Optional[str] = None
    friendly_name: Optional[str] = None
    current_size: Optional[int] = None
    max_size: Optional[int] = None
    average_wait_time: Optional[int] = None
    uri: Optional[str] = None
    date_created: Optional[datetime] = converted(rfc2822_datetime)
    date_updated: Optional[datetime] = converted(rfc2822_datetime)

    @staticmethod
    def fetcher(sid: str, account_sid: Optional[str] = None) -> "QueueFetcher":
        return QueueFetcher(sid, account_sid=account_sid)

    @staticmethod
    def creator(friendly_name: str, account_sid: Optional[str] = None, **params: Any) -> "QueueCreator":
        return QueueCreator(friendly_name, account_sid=account_sid, **params)

    @staticmethod
    def updater(sid: str, account_sid: Optional[str] = None, **params: Any) -> "QueueUpdater":
        return QueueUpdater(sid, account_sid=account_sid, **params)

    @staticmethod
    def reader(account_sid: Optional[str] = None) -> "QueueReader":
        return QueueReader(account_sid=account_sid)

    @staticmethod
    def deleter(sid: str, account_sid: Optional[str] = None) -> "QueueDeleter":
        return QueueDeleter(sid, account_sid=account_sid)


_QUEUES = "/2010-04-01/Accounts/{account_sid}/Queues"


class QueueFetcher(Fetcher):
    resource = Queue
    domain = Domain.API
    path = _QUEUES + "/{sid}.json"

    def __init__(self, sid: str, account_sid: Optional[str] = None):
        super().__init__({"account_sid": account_sid, "sid": sid})


class QueueCreator(Creator):
    resource = Queue
    domain = Domain.API
    path = _QUEUES + ".json"
    params = {"friendly_name": "FriendlyName", "max_size": "MaxSize"}
    required = ("friendly_name",)

    def __init__(self, friendly_name: str, account_sid: Optional[str] = None, **params: Any):
        super().__init__({"account_sid": account_sid}, friendly_name=friendly_name, **params)


class QueueUpdater(Updater):
    resource = Queue
    domain = Domain.API
    path = _QUEUES + "/{sid}.json"
    params = {"friendly_name": "FriendlyName", "max_size": "MaxSize"}

    def __init__(self, sid: str, account_sid: Optional[str] = None, **params: Any):
        super().__init__({"account_sid": account_sid, "sid": sid}, **params)


class QueueReader(Reader):
    resource = Queue
    domain = Domain.API
    path = _QUEUES + ".json"
    records_key = "queues"

    def __init__(self, account_sid: Optional[str] = None):
        super().__init__({"account_sid": account_sid})


class QueueDeleter(Deleter):
    resource = Queue
    domain = Domain.API
    path = _QUEUES + "/{sid}.json"

    def __init__(self, sid: str, account_sid: Optional[str] = None):
        super().__init__({"account_sid": account_sid, "sid": sid})
