from __future__ import annotations
import platform
from typing import List, Optional

from twilio_rest import __version__
from twilio_rest.config import ClientConfig
from twilio_rest.exceptions import AuthenticationException
from twilio_rest.http import HttpClient, Request, Response


class TwilioRestClient:
    """Credentials plus routing defaults shared by every operation."""

    @staticmethod
    def SUCCESS(status: Optional[int]) -> bool:
        return status is not None and 200 <= status < 400

    def __init__(
            self,
            username: str,
            password: str,
            account_sid: Optional[str] = None,
            region: Optional[str] = None,
            edge: Optional[str] = None,
            http_client: Optional[HttpClient] = None,
            user_agent_extensions: Optional[List[str]] = None,
    ):
        if not username or not password:
            raise AuthenticationException("Credentials are required to create a TwilioRestClient")
        self.username = username
        self.password = password
        self.account_sid = account_sid or username
        self.region = region
        self.edge = edge
        self.http_client = http_client or HttpClient()
        self.user_agent_extensions = list(user_agent_extensions or [])

    @classmethod
    def from_config(cls, cfg: ClientConfig) -> "TwilioRestClient":
        creds = cfg.credentials()
        if creds is None:
            raise AuthenticationException(
                "TWILIO_ACCOUNT_SID/TWILIO_AUTH_TOKEN (or TWILIO_API_KEY/TWILIO_API_SECRET) are not set"
            )
        http_client = HttpClient(
            timeout=cfg.http_timeout_seconds,
            max_retries=cfg.max_retries,
            min_delay=cfg.http_min_delay_seconds,
            max_delay=cfg.http_max_delay_seconds,
        )
        return cls(
            creds[0],
            creds[1],
            account_sid=cfg.account_sid,
            region=cfg.region,
            edge=cfg.edge,
            http_client=http_client,
            user_agent_extensions=cfg.user_agent_extensions,
        )

    @property
    def user_agent(self) -> str:
        parts = [
            f"twilio-rest-client/{__version__}",
            f"python/{platform.python_version()}",
            f"({platform.system()} {platform.machine()})",
        ]
        parts.extend(self.user_agent_extensions)
        return " ".join(parts)

    def request(self, request: Request) -> Optional[Response]:
        request.auth = (self.username, self.password)
        request.headers.setdefault("User-Agent", self.user_agent)
        request.headers.setdefault("Accept", "application/json")
        request.headers.setdefault("Accept-Charset", "utf-8")
        if request.region is None:
            request.region = self.region
        if request.edge is None:
            request.edge = self.edge
        return self.http_client.make_request(request)

    def close(self) -> None:
        self.http_client.close()
