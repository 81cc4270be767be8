from __future__ import annotations
from .request import HttpMethod, Request, Response
from .http_client import HttpClient

__all__ = ["HttpClient", "HttpMethod", "Request", "Response"]
