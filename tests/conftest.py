"""Shared fixtures: a fake SearxNG upstream and a started SearchService."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest
import pytest_asyncio

from core.search import SearchService

BASE_URL = "https://searx.example.org"


class FakeUpstream:
    """Records every request and answers with a configurable response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._reply: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={"results": []}
        )

    def reply_json(self, payload: Any, status_code: int = 200) -> None:
        self._reply = lambda request: httpx.Response(status_code, json=payload)

    def reply_text(self, text: str, status_code: int = 200) -> None:
        self._reply = lambda request: httpx.Response(status_code, text=text)

    def fail_with(self, exc: Exception) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc

        self._reply = _raise

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._reply(request)

    @property
    def last_params(self) -> list[tuple[str, str]]:
        return list(self.requests[-1].url.params.multi_items())


@pytest.fixture()
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest_asyncio.fixture()
async def service(upstream: FakeUpstream):
    svc = SearchService(BASE_URL, transport=httpx.MockTransport(upstream.handler))
    await svc.start()
    yield svc
    await svc.stop()
