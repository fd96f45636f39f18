"""Test helpers: a recording httpx mock transport and shared endpoints."""

from typing import Callable, Optional, Union
from urllib.parse import parse_qs

import httpx

C2M_BASE = "https://c2m.test/molpro"
EASYPOST_BASE = "https://easypost.test/v2"
VALIDATION_URL = "https://validation.test/v1:validateAddress"

Handler = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class RecordingTransport:
    """Route (method, path) pairs to canned responses and keep every request.

    Unrouted requests get a 404 so a test never reaches the network.
    """

    def __init__(self, routes: Optional[dict[tuple[str, str], Handler]] = None):
        self.routes = dict(routes or {})
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, text="no route")
        if callable(handler):
            return handler(request)
        return handler

    @property
    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))


def form_fields(request: httpx.Request) -> dict[str, str]:
    """Decode an application/x-www-form-urlencoded body into a flat dict."""
    parsed = parse_qs(request.content.decode(), keep_blank_values=True)
    return {key: values[0] for key, values in parsed.items()}


def connect_error(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)
