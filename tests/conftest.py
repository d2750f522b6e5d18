from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import httpx
import pytest

from netorca_sdk import NetOrcaClient

TESTDATA = Path(__file__).parent / "testdata"

BASE_URL = "http://api-aws.demo.netorca.io"
API_KEY = "test-api-key"

Handler = Callable[[httpx.Request], httpx.Response]


def read_testdata(name: str) -> str:
    return (TESTDATA / name).read_text(encoding="utf-8")


def load_testdata(name: str) -> Any:
    return json.loads(read_testdata(name))


@pytest.fixture
def make_client() -> Iterator[Callable[..., NetOrcaClient]]:
    clients: list[NetOrcaClient] = []

    def _make(handler: Handler, **kwargs: Any) -> NetOrcaClient:
        client = NetOrcaClient(
            BASE_URL,
            API_KEY,
            "v1",
            transport=httpx.MockTransport(handler),
            **kwargs,
        )
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()


class RecordingHandler:
    """MockTransport handler that replies with a fixed response and keeps requests."""

    def __init__(self, status_code: int = 200, body: str | bytes = b"") -> None:
        self.status_code = status_code
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]
