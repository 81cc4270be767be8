import pytest

from twilio_rest.config import ClientConfig
from twilio_rest.exceptions import AuthenticationException
from twilio_rest.http import HttpMethod, Request
from twilio_rest.rest_client import TwilioRestClient


def test_request_adds_auth_headers_and_routing(http):
    client = TwilioRestClient("SK1", "secret", account_sid="AC1", region="au1", edge="sydney",
                              http_client=http, user_agent_extensions=["my-app/1.0"])
    http.queue({})

    client.request(Request(HttpMethod.GET, domain="api", path="/2010-04-01/Accounts/AC1/Queues.json"))

    req = http.requests[0]
    assert req.auth == ("SK1", "secret")
    assert req.headers["Accept"] == "application/json"
    assert req.headers["User-Agent"].startswith("twilio-rest-client/")
    assert req.headers["User-Agent"].endswith("my-app/1.0")
    assert req.url == "https://api.sydney.au1.twilio.com/2010-04-01/Accounts/AC1/Queues.json"
    assert client.account_sid == "AC1"


def test_account_sid_defaults_to_username(http):
    assert TwilioRestClient("AC1", "tok", http_client=http).account_sid == "AC1"


@pytest.mark.parametrize("status,ok", [(200, True), (201, True), (204, True), (302, True),
                                       (400, False), (404, False), (500, False), (None, False)])
def test_success(status, ok):
    assert TwilioRestClient.SUCCESS(status) is ok


def test_missing_credentials():
    with pytest.raises(AuthenticationException):
        TwilioRestClient("", "")


def test_from_config():
    cfg = ClientConfig(
        TWILIO_ACCOUNT_SID="AC1",
        TWILIO_API_KEY="SK1",
        TWILIO_API_SECRET="secret",
        TWILIO_REGION="ie1",
        MAX_RETRIES=5,
        HTTP_TIMEOUT_SECONDS=7,
    )
    client = TwilioRestClient.from_config(cfg)

    assert client.username == "SK1"
    assert client.account_sid == "AC1"
    assert client.region == "ie1"
    assert client.http_client.max_retries == 5
    assert client.http_client.timeout == 7


def test_from_config_without_credentials(monkeypatch):
    for name in ("TWILIO_ACCOUNT_SID", "TWILIO_AUTH_TOKEN", "TWILIO_API_KEY", "TWILIO_API_SECRET"):
        monkeypatch.delenv(name, raising=False)
    with pytest.raises(AuthenticationException):
        TwilioRestClient.from_config(ClientConfig(_env_file=None))
