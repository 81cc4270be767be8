from __future__ import annotations
import os
import yaml
from typing import List, Optional, Tuple, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_csv_list(val: str | None) -> List[str]:
    if not val:
        return []
    return [x.strip() for x in val.split(",") if x.strip()]


class ClientConfig(BaseSettings):
    """
    Client configuration. Values come from:
      1) Optional YAML config file (default: twilio.yaml)
      2) Environment variables (.env)
    """
    model_config = SettingsConfigDict(env_prefix="", env_file=".env", extra="ignore")

    # --- Credentials ---
    account_sid: Optional[str] = Field(default=None, alias="TWILIO_ACCOUNT_SID")
    auth_token: Optional[str] = Field(default=None, alias="TWILIO_AUTH_TOKEN")
    api_key: Optional[str] = Field(default=None, alias="TWILIO_API_KEY")
    api_secret: Optional[str] = Field(default=None, alias="TWILIO_API_SECRET")

    # --- Routing ---
    region: Optional[str] = Field(default=None, alias="TWILIO_REGION")
    edge: Optional[str] = Field(default=None, alias="TWILIO_EDGE")

    # --- Networking ---
    http_timeout_seconds: float = Field(30.0, alias="HTTP_TIMEOUT_SECONDS")
    max_retries: int = Field(3, alias="MAX_RETRIES")
    http_min_delay_seconds: float = Field(0.5, alias="HTTP_MIN_DELAY_SECONDS")
    http_max_delay_seconds: float = Field(4.0, alias="HTTP_MAX_DELAY_SECONDS")
    user_agent_extensions: Union[str, List[str]] = Field(default_factory=list, alias="USER_AGENT_EXTENSIONS")

    # --- Observability ---
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # ---------------- Validators ----------------

    @field_validator("user_agent_extensions", mode="before")
    @classmethod
    def parse_csv_style_lists(cls, v):
        if isinstance(v, list):
            return v
        if isinstance(v, str):
            return _split_csv_list(v)
        return v

    @field_validator("region", "edge", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """
        Allow empty strings in .env: TWILIO_REGION=
        """
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("max_retries")
    @classmethod
    def at_least_one_attempt(cls, v: int) -> int:
        return max(1, v)

    def credentials(self) -> Optional[Tuple[str, str]]:
        """Basic-auth pair: API key/secret when both set, else account SID/auth token."""
        if self.api_key and self.api_secret:
            return self.api_key, self.api_secret
        if self.account_sid and self.auth_token:
            return self.account_sid, self.auth_token
        return None


ClientConfig.model_rebuild()


def load_config() -> ClientConfig:
    """
    Load config from optional YAML (CONFIG_FILE or ./twilio.yaml), then overlay env vars.
    """
    yaml_path = os.environ.get("CONFIG_FILE", "twilio.yaml")
    data = {}
    if os.path.exists(yaml_path):
        with open(yaml_path, "r", encoding="utf-8") as f:
            y = yaml.safe_load(f) or {}
            data.update(y)

    return ClientConfig(**data)  # type: ignore[arg-type]
