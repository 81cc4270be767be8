"""Client for the Twilio REST API: resource value objects plus fetch/read/create/update/delete helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from twilio_rest.twilio import (  # noqa: E402
    destroy,
    get_executor,
    get_rest_client,
    init,
    set_account_sid,
    set_edge,
    set_password,
    set_region,
    set_rest_client,
    set_username,
)

__all__ = [
    "__version__",
    "destroy",
    "get_executor",
    "get_rest_client",
    "init",
    "set_account_sid",
    "set_edge",
    "set_password",
    "set_region",
    "set_rest_client",
    "set_username",
]
