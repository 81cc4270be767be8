from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from twilio_rest.base import Creator, Deleter, Fetcher, Reader, Resource, Updater, converted
from twilio_rest.converters import iso8601_datetime
from twilio_rest.domains import Domain


@dataclass(frozen=True)
class User(Resource):
    sid: Optional[str] = None
    account_sid: Optional[str] = None
    service_sid: Optional[str] = None
    attributes: Optional[str] = None
    friendly_name: Optional[str] = None
    role_sid: Optional[str] = None
    identity: Optional[str] = None
    is_online: Optional[bool] = None
    is_notifiable: Optional[bool] = None
    date_created: Optional[datetime] = converted(iso8601_datetime)
    date_updated: Optional[datetime] = converted(iso8601_datetime)
    joined_channels_count: Optional[int] = None
    links: Optional[Dict[str, str]] = None
    url: Optional[str] = None

    @staticmethod
    def fetcher(service_sid: str, sid: str) -> "UserFetcher":
        return UserFetcher(service_sid, sid)

    @staticmethod
    def deleter(service_sid: str, sid: str) -> "UserDeleter":
        return UserDeleter(service_sid, sid)

    @staticmethod
    def creator(service_sid: str, identity: str, **params: Any) -> "UserCreator":
        return UserCreator(service_sid, identity, **params)

    @staticmethod
    def reader(service_sid: str) -> "UserReader":
        return UserReader(service_sid)

    @staticmethod
    def updater(service_sid: str, sid: str, **params: Any) -> "UserUpdater":
        return UserUpdater(service_sid, sid, **params)


_USERS = "/v2/Services/{service_sid}/Users"
_USER_PARAMS = {"role_sid": "RoleSid", "attributes": "Attributes", "friendly_name": "FriendlyName"}


class UserFetcher(Fetcher):
    resource = User
    domain = Domain.IPMESSAGING
    path = _USERS + "/{sid}"

    def __init__(self, service_sid: str, sid: str):
        super().__init__({"service_sid": service_sid, "sid": sid})


class UserDeleter(Deleter):
    resource = User
    domain = Domain.IPMESSAGING
    path = _USERS + "/{sid}"

    def __init__(self, service_sid: str, sid: str):
        super().__init__({"service_sid": service_sid, "sid": sid})


class UserCreator(Creator):
    resource = User
    domain = Domain.IPMESSAGING
    path = _USERS
    params = {"identity": "Identity", **_USER_PARAMS}
    required = ("identity",)

    def __init__(self, service_sid: str, identity: str, **params: Any):
        super().__init__({"service_sid": service_sid}, identity=identity, **params)


class UserReader(Reader):
    resource = User
    domain = Domain.IPMESSAGING
    path = _USERS
    records_key = "users"

    def __init__(self, service_sid: str):
        super().__init__({"service_sid": service_sid})


class UserUpdater(Updater):
    resource = User
    domain = Domain.IPMESSAGING
    path = _USERS + "/{sid}"
    params = dict(_USER_PARAMS)

    def __init__(self, service_sid: str, sid: str, **params: Any):
        super().__init__({"service_sid": service_sid, "sid": sid}, **params)
