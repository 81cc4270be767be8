from __future__ import annotations
from .api.v2010 import Member, Queue
from .ipmessaging.v2 import BindingType, Service, User, UserBinding
from .taskrouter.v1 import WorkspaceStatistics

__all__ = ["BindingType", "Member", "Queue", "Service", "User", "UserBinding", "WorkspaceStatistics"]
