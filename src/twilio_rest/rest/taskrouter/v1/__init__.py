from __future__ import annotations
from .workspace_statistics import WorkspaceStatistics, WorkspaceStatisticsFetcher

__all__ = ["WorkspaceStatistics", "WorkspaceStatisticsFetcher"]
