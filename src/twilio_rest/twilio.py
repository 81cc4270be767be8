"""
Process-wide default client, used by operations when no client is passed.

    import twilio_rest
    twilio_rest.init("ACxxx", "token")
    Member.reader("QUxxx").read()
"""
from __future__ import annotations
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from twilio_rest.config import load_config
from twilio_rest.exceptions import AuthenticationException
from twilio_rest.rest_client import TwilioRestClient

log = logging.getLogger(__name__)

_lock = threading.RLock()
_username: Optional[str] = None
_password: Optional[str] = None
_account_sid: Optional[str] = None
_region: Optional[str] = None
_edge: Optional[str] = None
_rest_client: Optional[TwilioRestClient] = None
_executor: Optional[ThreadPoolExecutor] = None


def _invalidate() -> None:
    global _rest_client
    if _rest_client is not None:
        _rest_client.close()
    _rest_client = None


def init(username: str, password: str, account_sid: Optional[str] = None) -> None:
    global _username, _password, _account_sid
    with _lock:
        _username = username
        _password = password
        _account_sid = account_sid
        _invalidate()


def set_username(username: str) -> None:
    global _username
    with _lock:
        _username = username
        _invalidate()


def set_password(password: str) -> None:
    global _password
    with _lock:
        _password = password
        _invalidate()


def set_account_sid(account_sid: str) -> None:
    global _account_sid
    with _lock:
        _account_sid = account_sid
        _invalidate()


def set_region(region: Optional[str]) -> None:
    global _region
    with _lock:
        _region = region
        _invalidate()


def set_edge(edge: Optional[str]) -> None:
    global _edge
    with _lock:
        _edge = edge
        _invalidate()


def set_rest_client(client: Optional[TwilioRestClient]) -> None:
    global _rest_client
    with _lock:
        _rest_client = client


def get_rest_client() -> TwilioRestClient:
    global _rest_client
    with _lock:
        if _rest_client is not None:
            return _rest_client
        if _username is not None and _password is not None:
            _rest_client = TwilioRestClient(
                _username, _password, account_sid=_account_sid, region=_region, edge=_edge
            )
            return _rest_client

        cfg = load_config()
        if cfg.credentials() is None:
            raise AuthenticationException(
                "TwilioRestClient was used before AccountSid and AuthToken were set, "
                "please call twilio_rest.init()"
            )
        _rest_client = TwilioRestClient.from_config(cfg)
        if _region is not None:
            _rest_client.region = _region
        if _edge is not None:
            _rest_client.edge = _edge
        log.debug("rest_client_from_config", extra={"account_sid": _rest_client.account_sid})
        return _rest_client


def get_executor() -> ThreadPoolExecutor:
    global _executor
    with _lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(thread_name_prefix="twilio-rest")
        return _executor


def destroy() -> None:
    """Shut down the shared executor and forget the cached client."""
    global _executor
    with _lock:
        if _executor is not None:
            _executor.shutdown(wait=True)
            _executor = None
        _invalidate()
