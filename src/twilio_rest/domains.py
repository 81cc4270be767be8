from __future__ import annotations
from enum import Enum
from typing import Optional

from twilio_rest.converters import flatten

BASE_DOMAIN = "twilio.com"
DEFAULT_REGION = "us1"


class Domain(str, Enum):
    API = "api"
    IPMESSAGING = "ip-messaging"
    TASKROUTER = "taskrouter"

    def __str__(self) -> str:
        return self.value


def build_host(domain: str, region: Optional[str] = None, edge: Optional[str] = None) -> str:
    """
    api + (edge=sydney, region=au1) -> api.sydney.au1.twilio.com
    An edge without a region routes through us1.
    """
    if edge and not region:
        region = DEFAULT_REGION
    return ".".join(flatten([str(domain), edge, region, BASE_DOMAIN]))


def url_from_uri(domain: str, uri: str, region: Optional[str] = None, edge: Optional[str] = None) -> str:
    return f"https://{build_host(domain, region, edge)}{uri}"
