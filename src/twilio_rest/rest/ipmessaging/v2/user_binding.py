"""Push-notification bindings registered for a chat user."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from functools import partial
from typing import Dict, Iterable, List, Optional, Union

from twilio_rest.base import Deleter, Fetcher, Reader, Resource, converted
from twilio_rest.converters import enum_or_raw, iso8601_datetime, promote_list
from twilio_rest.domains import Domain


class BindingType(str, Enum):
    GCM = "gcm"
    APN = "apn"
    FCM = "fcm"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UserBinding(Resource):
    sid: Optional[str] = None
    account_sid: Optional[str] = None
    service_sid: Optional[str] = None
    date_created: Optional[datetime] = converted(iso8601_datetime)
    date_updated: Optional[datetime] = converted(iso8601_datetime)
    endpoint: Optional[str] = None
    identity: Optional[str] = None
    user_sid: Optional[str] = None
    credential_sid: Optional[str] = None
    binding_type: Optional[Union[BindingType, str]] = converted(partial(enum_or_raw, BindingType))
    message_types: Optional[List[str]] = None
    url: Optional[str] = None
    links: Optional[Dict[str, str]] = None

    @staticmethod
    def reader(
            service_sid: str,
            user_sid: str,
            binding_type: Union[BindingType, Iterable[BindingType], None] = None,
    ) -> "UserBindingReader":
        return UserBindingReader(service_sid, user_sid, binding_type=binding_type)

    @staticmethod
    def fetcher(service_sid: str, user_sid: str, sid: str) -> "UserBindingFetcher":
        return UserBindingFetcher(service_sid, user_sid, sid)

    @staticmethod
    def deleter(service_sid: str, user_sid: str, sid: str) -> "UserBindingDeleter":
        return UserBindingDeleter(service_sid, user_sid, sid)


_BINDINGS = "/v2/Services/{service_sid}/Users/{user_sid}/Bindings"


class UserBindingReader(Reader):
    """
    ``binding_type`` accepts one type or several; each is sent as its own
    ``BindingType`` query parameter.
    """
    resource = UserBinding
    domain = Domain.IPMESSAGING
    path = _BINDINGS
    records_key = "bindings"
    params = {"binding_type": "BindingType"}

    def __init__(
            self,
            service_sid: str,
            user_sid: str,
            binding_type: Union[BindingType, Iterable[BindingType], None] = None,
    ):
        super().__init__({"service_sid": service_sid, "user_sid": user_sid})
        self.set_binding_type(binding_type)

    def set_binding_type(
            self, binding_type: Union[BindingType, Iterable[BindingType], None]
    ) -> "UserBindingReader":
        self.set(binding_type=promote_list(binding_type) or None)
        return self


class UserBindingFetcher(Fetcher):
    resource = UserBinding
    domain = Domain.IPMESSAGING
    path = _BINDINGS + "/{sid}"

    def __init__(self, service_sid: str, user_sid: str, sid: str):
        super().__init__({"service_sid": service_sid, "user_sid": user_sid, "sid": sid})


class UserBindingDeleter(Deleter):
    resource = UserBinding
    domain = Domain.IPMESSAGING
    path = _BINDINGS + "/{sid}"

    def __init__(self, service_sid: str, user_sid: str, sid: str):
        super().__init__({"service_sid": service_sid, "user_sid": user_sid, "sid": sid})
