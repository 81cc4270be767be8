from datetime import datetime, timezone

import pytest

from twilio_rest.exceptions import InvalidRequestException
from twilio_rest.http import HttpMethod
from twilio_rest.rest import Member

MEMBERS = "https://api.twilio.com/2010-04-01/Accounts/ACaaa/Queues/QU123/Members"


def _member(call_sid, position=1):
    return {
        "call_sid": call_sid,
        "queue_sid": "QU123",
        "date_enqueued": "Tue, 07 Aug 2018 17:20:49 +0000",
        "position": position,
        "uri": f"/2010-04-01/Accounts/ACaaa/Queues/QU123/Members/{call_sid}.json",
        "wait_time": 143,
    }


def test_fetch(http, client):
    http.queue(_member("CA123"))

    member = Member.fetcher("QU123", "CA123").fetch(client)

    req = http.requests[0]
    assert req.method == HttpMethod.GET
    assert req.url == f"{MEMBERS}/CA123.json"
    assert req.auth == ("ACaaa", "token")
    assert member.sid == "CA123"
    assert member.position == 1
    assert member.wait_time == 143
    assert member.date_enqueued == datetime(2018, 8, 7, 17, 20, 49, tzinfo=timezone.utc)


def test_fetch_front_of_queue(http, client):
    http.queue(_member("CA1"))
    Member.fetcher("QU123").fetch(client)
    assert http.requests[0].url == f"{MEMBERS}/Front.json"


def test_explicit_account_sid(http, client):
    http.queue(_member("CA1"))
    Member.fetcher("QU123", "CA1", account_sid="ACother").fetch(client)
    assert "/Accounts/ACother/" in http.requests[0].url


def test_update_dequeues(http, client):
    http.queue(_member("CA123", position=0))

    member = Member.updater("QU123", "CA123", "https://example.com/twiml", HttpMethod.GET).update(client)

    req = http.requests[0]
    assert req.method == HttpMethod.POST
    assert req.url == f"{MEMBERS}/CA123.json"
    assert req.post_params == {"Url": ["https://example.com/twiml"], "Method": ["GET"]}
    assert req.query_params == {}
    assert member.position == 0


def test_update_requires_url():
    with pytest.raises(InvalidRequestException) as exc:
        Member.updater("QU123", "CA123", None)
    assert exc.value.parameter == "url"


def test_read_follows_next_page_uri(http, client):
    http.queue({
        "queue_members": [_member("CA1", 1), _member("CA2", 2)],
        "page": 0,
        "page_size": 2,
        "next_page_uri": "/2010-04-01/Accounts/ACaaa/Queues/QU123/Members.json?PageSize=2&Page=1&PageToken=PT",
        "uri": "/2010-04-01/Accounts/ACaaa/Queues/QU123/Members.json?PageSize=2&Page=0",
    })
    http.queue({
        "queue_members": [_member("CA3", 3)],
        "page": 1,
        "page_size": 2,
        "next_page_uri": None,
    })

    members = Member.reader("QU123").list(client)

    assert [m.call_sid for m in members] == ["CA1", "CA2", "CA3"]
    assert http.requests[0].url == f"{MEMBERS}.json"
    assert http.requests[0].query_params == {}
    assert http.requests[1].url == f"{MEMBERS}.json?PageSize=2&Page=1&PageToken=PT"


def test_read_stops_at_limit(http, client):
    http.queue({
        "queue_members": [_member("CA1"), _member("CA2"), _member("CA3")],
        "next_page_uri": "/2010-04-01/Accounts/ACaaa/Queues/QU123/Members.json?Page=1",
    })

    members = Member.reader("QU123").limit(2).list(client)

    assert [m.call_sid for m in members] == ["CA1", "CA2"]
    assert len(http.requests) == 1
    assert http.requests[0].query_params == {"PageSize": ["2"]}


def test_resource_set_without_auto_paging(http, client):
    http.queue({
        "queue_members": [_member("CA1")],
        "next_page_uri": "/2010-04-01/Accounts/ACaaa/Queues/QU123/Members.json?Page=1",
    })

    records = list(Member.reader("QU123").read(client).set_auto_paging(False))

    assert len(records) == 1
    assert len(http.requests) == 1


def test_read_stops_at_page_limit(http, client):
    # server returns fewer records per page than requested
    for n in range(1, 4):
        http.queue({
            "queue_members": [_member(f"CA{n}", n)],
            "next_page_uri": f"/2010-04-01/Accounts/ACaaa/Queues/QU123/Members.json?PageSize=2&Page={n}",
        })

    result = Member.reader("QU123").limit(4).page_size(2).read(client)
    members = list(result)

    assert [m.call_sid for m in members] == ["CA1", "CA2"]
    assert len(http.requests) == 2
    assert result.page_limit == 2
    assert result.page_count == 2


def test_get_page_uses_url_verbatim(http, client):
    url = "https://api.twilio.com/2010-04-01/Accounts/ACaaa/Queues/QU123/Members.json?PageSize=5&Page=3&PageToken=PT"
    http.queue({"queue_members": [_member("CA9", 9)], "next_page_uri": None})

    page = Member.reader("QU123").get_page(url, client)

    assert [m.call_sid for m in page.records] == ["CA9"]
    assert http.requests[0].url == url
    assert http.requests[0].query_params == {}


def test_update_rechecks_required_params(http, client):
    updater = Member.updater("QU123", "CA123", "https://example.com/twiml").set(url=None)

    with pytest.raises(InvalidRequestException) as exc:
        updater.update(client)

    assert exc.value.parameter == "url"
    assert http.requests == []
