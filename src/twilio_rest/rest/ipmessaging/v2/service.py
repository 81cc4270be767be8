"""Programmable Chat service instances (IP Messaging v2)."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from twilio_rest.base import Creator, Deleter, Fetcher, Reader, Resource, Updater, converted
from twilio_rest.converters import iso8601_datetime
from twilio_rest.domains import Domain


@dataclass(frozen=True)
class Service(Resource):
    sid: Optional[str] = None
    account_sid: Optional[str] = None
    friendly_name: Optional[str] = None
    date_created: Optional[datetime] = converted(iso8601_datetime)
    date_updated: Optional[datetime] = converted(iso8601_datetime)
    default_service_role_sid: Optional[str] = None
    default_channel_role_sid: Optional[str] = None
    default_channel_creator_role_sid: Optional[str] = None
    read_status_enabled: Optional[bool] = None
    reachability_enabled: Optional[bool] = None
    typing_indicator_timeout: Optional[int] = None
    consumption_report_interval: Optional[int] = None
    limits: Optional[Dict[str, Any]] = None
    pre_webhook_url: Optional[str] = None
    post_webhook_url: Optional[str] = None
    webhook_method: Optional[str] = None
    webhook_filters: Optional[List[str]] = None
    notifications: Optional[Dict[str, Any]] = None
    url: Optional[str] = None
    links: Optional[Dict[str, str]] = None

    @staticmethod
    def fetcher(sid: str) -> "ServiceFetcher":
        return ServiceFetcher(sid)

    @staticmethod
    def deleter(sid: str) -> "ServiceDeleter":
        return ServiceDeleter(sid)

    @staticmethod
    def creator(friendly_name: str) -> "ServiceCreator":
        return ServiceCreator(friendly_name)

    @staticmethod
    def reader() -> "ServiceReader":
        return ServiceReader()

    @staticmethod
    def updater(sid: str, **params: Any) -> "ServiceUpdater":
        return ServiceUpdater(sid, **params)


class ServiceFetcher(Fetcher):
    resource = Service
    domain = Domain.IPMESSAGING
    path = "/v2/Services/{sid}"

    def __init__(self, sid: str):
        super().__init__({"sid": sid})


class ServiceDeleter(Deleter):
    resource = Service
    domain = Domain.IPMESSAGING
    path = "/v2/Services/{sid}"

    def __init__(self, sid: str):
        super().__init__({"sid": sid})


class ServiceCreator(Creator):
    resource = Service
    domain = Domain.IPMESSAGING
    path = "/v2/Services"
    params = {"friendly_name": "FriendlyName"}
    required = ("friendly_name",)

    def __init__(self, friendly_name: str):
        super().__init__({}, friendly_name=friendly_name)


class ServiceReader(Reader):
    resource = Service
    domain = Domain.IPMESSAGING
    path = "/v2/Services"
    records_key = "services"

    def __init__(self):
        super().__init__({})


def _notification_params() -> Dict[str, str]:
    out: Dict[str, str] = {}
    kinds = {
        "new_message": "NewMessage",
        "added_to_channel": "AddedToChannel",
        "removed_from_channel": "RemovedFromChannel",
        "invited_to_channel": "InvitedToChannel",
    }
    settings = {"enabled": "Enabled", "template": "Template", "sound": "Sound"}
    for kind, wire_kind in kinds.items():
        for setting, wire_setting in settings.items():
            out[f"notifications_{kind}_{setting}"] = f"Notifications.{wire_kind}.{wire_setting}"
    out["notifications_new_message_badge_count_enabled"] = "Notifications.NewMessage.BadgeCountEnabled"
    out["notifications_log_enabled"] = "Notifications.LogEnabled"
    return out


class ServiceUpdater(Updater):
    """
    Every setting is optional; e.g.
    ``ServiceUpdater(sid, friendly_name="x", notifications_new_message_enabled=True)``
    posts ``FriendlyName=x`` and ``Notifications.NewMessage.Enabled=true``.
    """
    resource = Service
    domain = Domain.IPMESSAGING
    path = "/v2/Services/{sid}"
    params = {
        "friendly_name": "FriendlyName",
        "default_service_role_sid": "DefaultServiceRoleSid",
        "default_channel_role_sid": "DefaultChannelRoleSid",
        "default_channel_creator_role_sid": "DefaultChannelCreatorRoleSid",
        "read_status_enabled": "ReadStatusEnabled",
        "reachability_enabled": "ReachabilityEnabled",
        "typing_indicator_timeout": "TypingIndicatorTimeout",
        "consumption_report_interval": "ConsumptionReportInterval",
        **_notification_params(),
        "pre_webhook_url": "PreWebhookUrl",
        "post_webhook_url": "PostWebhookUrl",
        "webhook_method": "WebhookMethod",
        "webhook_filters": "WebhookFilters",
        "limits_channel_members": "Limits.ChannelMembers",
        "limits_user_channels": "Limits.UserChannels",
        "media_compatibility_message": "Media.CompatibilityMessage",
        "pre_webhook_retry_count": "PreWebhookRetryCount",
        "post_webhook_retry_count": "PostWebhookRetryCount",
    }

    def __init__(self, sid: str, **params: Any):
        super().__init__({"sid": sid}, **params)
