import json
import logging

import pytest

from twilio_rest.http import Response
from twilio_rest.rest_client import TwilioRestClient


class FakeHttpClient:
    """Records outgoing requests and replays queued responses (None = connection failure)."""

    def __init__(self):
        self.requests = []
        self.responses = []

    def queue(self, body=None, status=200):
        content = "" if body is None else (body if isinstance(body, str) else json.dumps(body))
        self.responses.append(Response(status, content, {"Content-Type": "application/json"}))
        return self

    def queue_no_connection(self):
        self.responses.append(None)
        return self

    def make_request(self, request):
        self.requests.append(request)
        return self.responses.pop(0)

    def close(self):
        pass


@pytest.fixture
def http():
    return FakeHttpClient()


@pytest.fixture
def client(http):
    return TwilioRestClient("ACaaa", "token", http_client=http)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
