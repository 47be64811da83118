"""Fake aiohttp session for exercising BrawlStarsClient without a network."""

from __future__ import annotations

import json
from collections.abc import Callable
from types import TracebackType
from typing import Any

import pytest
from pytest import MonkeyPatch

from brawl_stars_client.api_client.brawl_stars_client import BrawlStarsClient

TEST_BASE_URL = "https://api.test/v1"

# (status, body); a str body is sent as raw text, anything else as JSON
FakeReply = tuple[int, Any]
Handler = Callable[[str, dict | None], FakeReply]


class _FakeResponse:
    def __init__(self, status: int, body: Any, reason: str | None = None) -> None:
        self.status = status
        self.reason = reason
        self._body = body

    async def __aenter__(self) -> _FakeResponse:
        return self

    async def __aexit__(
        self,
        exc_type: BaseException | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        return False

    async def json(self, content_type: str | None = "application/json") -> Any:
        if isinstance(self._body, str):
            return json.loads(self._body)
        return self._body


class FakeSession:
    """Records requests and replies from a queue, a handler, or raises."""

    def __init__(
        self,
        replies: list[FakeReply] | None = None,
        handler: Handler | None = None,
        error: BaseException | None = None,
        reasons: dict[int, str] | None = None,
    ) -> None:
        self._replies = list(replies or [])
        self._handler = handler
        self._error = error
        self._reasons = reasons or {}
        self.requests: list[tuple[str, str, dict | None]] = []

    def request(self, method: str, url: object, params: dict | None = None) -> _FakeResponse:
        url_str = str(url)
        self.requests.append((method, url_str, params))
        if self._error is not None:
            raise self._error
        if self._handler is not None:
            status, body = self._handler(url_str, params)
        elif self._replies:
            status, body = self._replies.pop(0)
        else:
            raise AssertionError("No more fake responses queued")
        return _FakeResponse(status, body, self._reasons.get(status))

    @property
    def last_url(self) -> str:
        return self.requests[-1][1]

    @property
    def last_params(self) -> dict | None:
        return self.requests[-1][2]


@pytest.fixture
def make_client(monkeypatch: MonkeyPatch) -> Callable[..., tuple[BrawlStarsClient, FakeSession]]:
    """Build a client whose session is a FakeSession configured by kwargs."""

    def _make(**session_kwargs: Any) -> tuple[BrawlStarsClient, FakeSession]:
        client = BrawlStarsClient(api_key="test-key", base_url=TEST_BASE_URL)
        session = FakeSession(**session_kwargs)

        async def _fake_get_session() -> FakeSession:
            return session

        monkeypatch.setattr(client, "_get_session", _fake_get_session)
        return client, session

    return _make
