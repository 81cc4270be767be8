from __future__ import annotations
from .resource import Resource, converted
from .page import Page
from .resource_set import ResourceSet
from .operations import Creator, Deleter, Fetcher, Reader, Updater

__all__ = [
    "Creator",
    "Deleter",
    "Fetcher",
    "Page",
    "Reader",
    "Resource",
    "ResourceSet",
    "Updater",
    "converted",
]
