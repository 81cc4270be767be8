import json

import pytest
from click.testing import CliRunner

from twilio_rest import main


@pytest.fixture
def run(monkeypatch, client, restore_logging, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main._Context, "client", property(lambda self: client))
    runner = CliRunner()

    def invoke(*args):
        return runner.invoke(main.cli, ["--log-level", "WARNING", *args])

    return invoke


def test_members(run, http):
    http.queue({
        "queue_members": [
            {"call_sid": "CA1", "position": 1, "date_enqueued": "Tue, 07 Aug 2018 17:20:49 +0000"},
            {"call_sid": "CA2", "position": 2},
        ],
        "next_page_uri": None,
    })

    result = run("members", "QU1", "--limit", "2")

    assert result.exit_code == 0, result.output
    lines = [json.loads(line) for line in result.output.splitlines()]
    assert [m["call_sid"] for m in lines] == ["CA1", "CA2"]
    assert lines[0]["date_enqueued"] == "2018-08-07T17:20:49+00:00"
    assert http.requests[0].query_params == {"PageSize": ["2"]}


def test_dequeue_front(run, http):
    http.queue({"call_sid": "CA1", "position": 0})

    result = run("dequeue", "QU1", "--url", "https://example.com/twiml")

    assert result.exit_code == 0, result.output
    assert http.requests[0].url.endswith("/Queues/QU1/Members/Front.json")
    assert http.requests[0].post_params == {"Url": ["https://example.com/twiml"], "Method": ["POST"]}


def test_bindings_filters(run, http):
    http.queue({"bindings": [], "meta": {"key": "bindings", "next_page_url": None}})

    result = run("bindings", "IS1", "US1", "--binding-type", "gcm", "--binding-type", "apn")

    assert result.exit_code == 0, result.output
    assert http.requests[0].query_params == {"BindingType": ["gcm", "apn"]}


def test_workspace_stats(run, http):
    http.queue({"workspace_sid": "WS1", "realtime": {"total_tasks": 3}})

    result = run("workspace-stats", "WS1", "--minutes", "30")

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["realtime"] == {"total_tasks": 3}
    assert http.requests[0].query_params == {"Minutes": ["30"]}


def test_api_error_exits_non_zero(run, http):
    http.queue({"code": 20404, "message": "not found", "status": 404}, status=404)

    result = run("service", "IS404")

    assert result.exit_code == 1
    assert "not found" in result.output


@pytest.mark.parametrize("command", [["members", "QU1"], ["queues"], ["services"]])
def test_zero_limit_is_rejected(run, http, command):
    result = run(*command, "--limit", "0")

    assert result.exit_code == 1
    assert "limit must be positive" in result.output
    assert http.requests == []
