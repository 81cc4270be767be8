from __future__ import annotations
import json
import logging
from typing import Iterable, Optional, Tuple

import click

from twilio_rest.base import Resource
from twilio_rest.config import load_config
from twilio_rest.exceptions import TwilioException
from twilio_rest.http import HttpMethod
from twilio_rest.logging_setup import setup_logging
from twilio_rest.rest import BindingType, Member, Queue, Service, UserBinding, WorkspaceStatistics
from twilio_rest.rest_client import TwilioRestClient

log = logging.getLogger(__name__)


def _echo(resource: Resource) -> None:
    click.echo(json.dumps(resource.to_dict(), ensure_ascii=False, sort_keys=True))


def _echo_all(resources: Iterable[Resource]) -> int:
    n = 0
    for r in resources:
        _echo(r)
        n += 1
    return n


class _Context:
    def __init__(self):
        self._client: Optional[TwilioRestClient] = None

    @property
    def client(self) -> TwilioRestClient:
        if self._client is None:
            self._client = TwilioRestClient.from_config(load_config())
        return self._client


@click.group()
@click.option("--log-level", default=None, help="Overrides LOG_LEVEL.")
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str]):
    cfg = load_config()
    setup_logging(log_level or cfg.log_level)
    ctx.obj = _Context()


def _run(fn):
    """Map library errors to click errors (exit code 1)."""
    try:
        return fn()
    except TwilioException as e:
        log.debug("command_failed", extra={"err": str(e)})
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument("queue_sid")
@click.option("--account-sid", default=None)
@click.option("--limit", type=int, default=None)
@click.pass_obj
def members(obj: _Context, queue_sid: str, account_sid: Optional[str], limit: Optional[int]):
    """List calls waiting in a queue."""
    def go():
        reader = Member.reader(queue_sid, account_sid=account_sid)
        if limit is not None:
            reader.limit(limit)
        n = _echo_all(reader.read(obj.client))
        log.info("members_listed", extra={"queue_sid": queue_sid, "count": n})
    _run(go)


@cli.command()
@click.argument("queue_sid")
@click.argument("call_sid", default="Front")
@click.option("--url", required=True, help="TwiML document the dequeued call executes.")
@click.option("--method", type=click.Choice(["GET", "POST"]), default="POST")
@click.option("--account-sid", default=None)
@click.pass_obj
def dequeue(obj: _Context, queue_sid: str, call_sid: str, url: str, method: str, account_sid: Optional[str]):
    """Dequeue a member (default: the front of the queue)."""
    _run(lambda: _echo(
        Member.updater(queue_sid, call_sid, url, HttpMethod(method), account_sid=account_sid).update(obj.client)
    ))


@cli.command()
@click.option("--account-sid", default=None)
@click.option("--limit", type=int, default=None)
@click.pass_obj
def queues(obj: _Context, account_sid: Optional[str], limit: Optional[int]):
    def go():
        reader = Queue.reader(account_sid=account_sid)
        if limit is not None:
            reader.limit(limit)
        _echo_all(reader.read(obj.client))
    _run(go)


@cli.command()
@click.argument("sid")
@click.pass_obj
def service(obj: _Context, sid: str):
    """Fetch one chat service."""
    _run(lambda: _echo(Service.fetcher(sid).fetch(obj.client)))


@cli.command()
@click.option("--limit", type=int, default=None)
@click.pass_obj
def services(obj: _Context, limit: Optional[int]):
    def go():
        reader = Service.reader()
        if limit is not None:
            reader.limit(limit)
        _echo_all(reader.read(obj.client))
    _run(go)


@cli.command()
@click.argument("service_sid")
@click.argument("user_sid")
@click.option(
    "--binding-type",
    "binding_types",
    multiple=True,
    type=click.Choice([b.value for b in BindingType]),
    help="Repeat to filter on several types.",
)
@click.pass_obj
def bindings(obj: _Context, service_sid: str, user_sid: str, binding_types: Tuple[str, ...]):
    """List push bindings of a chat user."""
    types = [BindingType(b) for b in binding_types] or None
    _run(lambda: _echo_all(UserBinding.reader(service_sid, user_sid, binding_type=types).read(obj.client)))


@cli.command("workspace-stats")
@click.argument("workspace_sid")
@click.option("--minutes", type=int, default=None)
@click.option("--start-date", default=None, help="ISO-8601")
@click.option("--end-date", default=None, help="ISO-8601")
@click.option("--task-channel", default=None)
@click.option("--split-by-wait-time", default=None, help='e.g. "5,30,60"')
@click.pass_obj
def workspace_stats(
        obj: _Context,
        workspace_sid: str,
        minutes: Optional[int],
        start_date: Optional[str],
        end_date: Optional[str],
        task_channel: Optional[str],
        split_by_wait_time: Optional[str],
):
    """Fetch TaskRouter workspace statistics."""
    _run(lambda: _echo(
        WorkspaceStatistics.fetcher(
            workspace_sid,
            minutes=minutes,
            start_date=start_date,
            end_date=end_date,
            task_channel=task_channel,
            split_by_wait_time=split_by_wait_time,
        ).fetch(obj.client)
    ))
