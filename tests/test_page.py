import json

import pytest

from twilio_rest.base import Page
from twilio_rest.exceptions import ApiException
from twilio_rest.rest import Member, UserBinding


def test_meta_style_page():
    payload = {
        "bindings": [{"sid": "BS1", "binding_type": "gcm"}, {"sid": "BS2", "binding_type": "apn"}],
        "meta": {
            "key": "bindings",
            "page": 0,
            "page_size": 2,
            "first_page_url": "https://ip-messaging.twilio.com/v2/Services/IS1/Users/US1/Bindings?PageSize=2&Page=0",
            "previous_page_url": None,
            "next_page_url": "https://ip-messaging.twilio.com/v2/Services/IS1/Users/US1/Bindings?PageSize=2&Page=1",
            "url": "https://ip-messaging.twilio.com/v2/Services/IS1/Users/US1/Bindings?PageSize=2&Page=0",
        },
    }
    page = Page.from_json("ignored", json.dumps(payload), UserBinding)

    assert [b.sid for b in page.records] == ["BS1", "BS2"]
    assert page.page_size == 2
    assert page.has_next_page() is True
    assert page.has_previous_page() is False
    assert page.get_next_page_url("ip-messaging", region="ie1").endswith("Page=1")
    # API-provided urls are used verbatim
    assert "ie1" not in page.get_next_page_url("ip-messaging", region="ie1")


def test_uri_style_page_expands_against_region():
    payload = {
        "queue_members": [{"call_sid": "CA1", "position": 1}],
        "page": 0,
        "page_size": 1,
        "first_page_uri": "/2010-04-01/Accounts/AC1/Queues/QU1/Members.json?PageSize=1&Page=0",
        "next_page_uri": "/2010-04-01/Accounts/AC1/Queues/QU1/Members.json?PageSize=1&Page=1&PageToken=PT",
        "previous_page_uri": None,
        "uri": "/2010-04-01/Accounts/AC1/Queues/QU1/Members.json?PageSize=1&Page=0",
    }
    page = Page.from_json("queue_members", payload, Member)

    assert page.records[0].call_sid == "CA1"
    assert page.get_next_page_url("api") == (
        "https://api.twilio.com/2010-04-01/Accounts/AC1/Queues/QU1/Members.json?PageSize=1&Page=1&PageToken=PT"
    )
    assert page.get_url("api", region="ie1").startswith("https://api.ie1.twilio.com/")
    assert page.get_previous_page_url("api") is None


def test_last_page():
    page = Page.from_json("queue_members", {"queue_members": [], "next_page_uri": None}, Member)
    assert page.has_next_page() is False
    assert len(page) == 0


def test_invalid_json():
    with pytest.raises(ApiException):
        Page.from_json("queue_members", "<html>oops</html>", Member)


def test_records_must_be_a_list():
    with pytest.raises(ApiException):
        Page.from_json("queue_members", {"queue_members": {"call_sid": "CA1"}}, Member)
