"""Pytest configuration and fixtures for WebSwitch client tests."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pytest

from webswitch.device import WebSwitchClient

BASE_URL = "http://wsm.homenet.local"


class FakeResponse:
    """Stand-in for aiohttp.ClientResponse with a scripted status and body."""

    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self._body = body

    async def text(self) -> str:
        return self._body

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info: Any) -> bool:
        return False


class FakeSession:
    """Stand-in for aiohttp.ClientSession that records every GET."""

    def __init__(self, factory: "FakeSessionFactory") -> None:
        self._factory = factory
        self.closed = False

    async def __aenter__(self) -> "FakeSession":
        return self

    async def __aexit__(self, *exc_info: Any) -> bool:
        self.closed = True
        return False

    def get(self, url: str, headers: Optional[Dict[str, str]] = None) -> FakeResponse:
        self._factory.requests.append((url, dict(headers or {})))
        if self._factory.error is not None:
            raise self._factory.error
        status, body = self._factory.responses[0]
        if len(self._factory.responses) > 1:
            self._factory.responses.pop(0)
        return FakeResponse(status, body)


class FakeSessionFactory:
    """Session factory injected into WebSwitchClient in place of aiohttp."""

    def __init__(self) -> None:
        self.responses: List[Tuple[int, str]] = [(200, "")]
        self.requests: List[Tuple[str, Dict[str, str]]] = []
        self.sessions: List[FakeSession] = []
        self.error: Optional[BaseException] = None

    def respond(self, body: str, status: int = 200) -> None:
        self.responses = [(status, body)]

    def respond_sequence(self, *responses: Tuple[int, str]) -> None:
        self.responses = list(responses)

    def fail_with(self, error: BaseException) -> None:
        self.error = error

    @property
    def urls(self) -> List[str]:
        return [url for url, _ in self.requests]

    def __call__(self) -> FakeSession:
        session = FakeSession(self)
        self.sessions.append(session)
        return session


@pytest.fixture
def session_factory() -> FakeSessionFactory:
    """Fresh fake transport for each test."""
    return FakeSessionFactory()


@pytest.fixture
def client(session_factory) -> WebSwitchClient:
    """Client without credentials."""
    return WebSwitchClient(BASE_URL, session_factory=session_factory)


@pytest.fixture
def auth_client(session_factory) -> WebSwitchClient:
    """Client with Basic credentials."""
    return WebSwitchClient(BASE_URL, "admin", "secret", session_factory=session_factory)


@pytest.fixture
def sample_config() -> Dict[str, Any]:
    return {
        "webswitch": {"base_url": BASE_URL},
        "sensors": {"indices": [1, 2, 3]},
    }
