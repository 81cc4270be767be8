from __future__ import annotations
from .member import Member, MemberFetcher, MemberReader, MemberUpdater
from .queue import Queue, QueueCreator, QueueDeleter, QueueFetcher, QueueReader, QueueUpdater

__all__ = [
    "Member", "MemberFetcher", "MemberReader", "MemberUpdater",
    "Queue", "QueueCreator", "QueueDeleter", "QueueFetcher", "QueueReader", "QueueUpdater",
]
