from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

log = logging.getLogger(__name__)


class TwilioException(Exception):
    """Root of every error raised by this package."""


class ApiConnectionException(TwilioException):
    """No response could be obtained from the API."""


class AuthenticationException(TwilioException):
    pass


class InvalidRequestException(TwilioException):
    def __init__(self, message: str, parameter: Optional[str] = None):
        super().__init__(message)
        self.parameter = parameter


class ApiException(TwilioException):
    """The API answered with a failure status or an undecodable body."""

    def __init__(
            self,
            message: str,
            code: Optional[int] = None,
            more_info: Optional[str] = None,
            status: Optional[int] = None,
            cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.more_info = more_info
        self.status = status
        self.__cause__ = cause

    def __str__(self) -> str:
        if self.code is None and self.status is None:
            return self.message
        return f"HTTP {self.status} error {self.code}: {self.message}"


@dataclass(frozen=True)
class RestException:
    """Error body returned by the API, e.g.
    {"code": 20404, "message": "The requested resource ... was not found",
     "more_info": "https://www.twilio.com/docs/errors/20404", "status": 404}
    """
    code: Optional[int] = None
    message: Optional[str] = None
    more_info: Optional[str] = None
    status: Optional[int] = None

    @classmethod
    def from_json(cls, content: Union[str, bytes, None]) -> Optional["RestException"]:
        if not content:
            return None
        try:
            payload: Any = json.loads(content)
        except ValueError:
            log.debug("error_body_not_json", extra={"body": str(content)[:200]})
            return None
        if not isinstance(payload, dict):
            return None
        return cls(
            code=payload.get("code"),
            message=payload.get("message"),
            more_info=payload.get("more_info"),
            status=payload.get("status"),
        )
