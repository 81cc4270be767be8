from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Union

from twilio_rest.base import Fetcher, Resource
from twilio_rest.domains import Domain


@dataclass(frozen=True)
class WorkspaceStatistics(Resource):
    """Aggregate task/worker statistics for a TaskRouter workspace."""
    realtime: Optional[Dict[str, Any]] = None
    cumulative: Optional[Dict[str, Any]] = None
    account_sid: Optional[str] = None
    workspace_sid: Optional[str] = None
    url: Optional[str] = None

    @staticmethod
    def fetcher(workspace_sid: str, **params: Any) -> "WorkspaceStatisticsFetcher":
        return WorkspaceStatisticsFetcher(workspace_sid, **params)


class WorkspaceStatisticsFetcher(Fetcher):
    """
    Optional filters: ``minutes`` (look-back window), ``start_date`` /
    ``end_date`` (datetimes or ISO-8601 strings), ``task_channel`` and
    ``split_by_wait_time`` (comma separated seconds, e.g. "5,30,60").
    """
    resource = WorkspaceStatistics
    domain = Domain.TASKROUTER
    path = "/v1/Workspaces/{workspace_sid}/Statistics"
    params = {
        "minutes": "Minutes",
        "start_date": "StartDate",
        "end_date": "EndDate",
        "task_channel": "TaskChannel",
        "split_by_wait_time": "SplitByWaitTime",
    }

    def __init__(
            self,
            workspace_sid: str,
            minutes: Optional[int] = None,
            start_date: Union[datetime, str, None] = None,
            end_date: Union[datetime, str, None] = None,
            task_channel: Optional[str] = None,
            split_by_wait_time: Optional[str] = None,
    ):
        super().__init__(
            {"workspace_sid": workspace_sid},
            minutes=minutes,
            start_date=start_date,
            end_date=end_date,
            task_channel=task_channel,
            split_by_wait_time=split_by_wait_time,
        )
