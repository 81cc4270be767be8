from __future__ import annotations

import logging
import random
import time
from typing import Optional

import requests

from twilio_rest.http.request import IDEMPOTENT_METHODS, Request, Response

log = logging.getLogger(__name__)

TRANSIENT_STATUSES = (429, 500, 502, 503, 504)


class HttpClient:
    """
    requests.Session wrapper. Idempotent requests get exponential backoff with
    jitter on connection errors and transient statuses; POSTs are sent once.
    """

    def __init__(
            self,
            timeout: float = 30.0,
            max_retries: int = 3,
            min_delay: float = 0.5,
            max_delay: float = 4.0,
            session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.min_delay = min_delay
        self.max_delay = max_delay
        self.session = session or requests.Session()
        self.last_request: Optional[Request] = None
        self.last_response: Optional[Response] = None

    def make_request(self, request: Request) -> Optional[Response]:
        """
        Returns the Response (possibly a failure status), or None when no
        connection could be made.
        """
        self.last_request = request
        self.last_response = None
        attempts = self.max_retries if request.method in IDEMPOTENT_METHODS else 1
        delay = random.uniform(self.min_delay, self.max_delay)
        url = request.url

        for attempt in range(1, attempts + 1):
            try:
                t0 = time.time()
                resp = self.session.request(
                    request.method.value,
                    url,
                    params=request.query_params or None,
                    data=request.post_params or None,
                    headers=request.headers,
                    auth=request.auth,
                    timeout=self.timeout,
                )
                dt_ms = int((time.time() - t0) * 1000)
                log.debug(
                    "http_request_done",
                    extra={"method": request.method.value, "url": url, "status": resp.status_code, "ms": dt_ms},
                )
                response = Response(resp.status_code, resp.text, dict(resp.headers))
                if resp.status_code not in TRANSIENT_STATUSES or attempt >= attempts:
                    self.last_response = response
                    return response
                log.debug("http_transient_status", extra={"url": url, "status": resp.status_code, "attempt": attempt})
            except requests.RequestException as e:
                if attempt >= attempts:
                    log.warning(
                        "http_request_failed",
                        extra={"method": request.method.value, "url": url, "attempt": attempt, "err": str(e)},
                    )
                    return None
                log.debug("http_retrying", extra={"url": url, "attempt": attempt, "err": str(e)})

            time.sleep(delay)
            # backoff with some jitter
            delay = min(self.max_delay, delay * (1.5 + random.random() * 0.5))

        return None

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
