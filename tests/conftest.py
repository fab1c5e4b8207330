"""
Shared fixtures for reqwest tests.
"""
import asyncio
from typing import List, Optional, Tuple

import httpx
import pytest

from reqwest.options import RequestOptions
from reqwest.transport import BaseTransport


class RecordingTransport(BaseTransport):
    """Transport stub that records every call and replays a canned outcome."""

    def __init__(self, response: Optional[httpx.Response] = None, error: Optional[Exception] = None):
        self.calls: List[Tuple[str, str, RequestOptions]] = []
        self.response = response
        self.error = error

    @property
    def name(self) -> str:
        return "recording"

    async def send(self, method: str, url: str, options: RequestOptions) -> httpx.Response:
        self.calls.append((method, url, options))
        if self.error is not None:
            raise self.error
        if self.response is not None:
            return self.response
        request = httpx.Request(method, f"{options.prefix_url or 'https://test.local/'}{url}")
        return httpx.Response(200, json={"ok": True}, request=request)


class GatedTransport(RecordingTransport):
    """Holds every request open until ``gate`` is set."""

    def __init__(self) -> None:
        super().__init__()
        self.gate = asyncio.Event()

    async def send(self, method: str, url: str, options: RequestOptions) -> httpx.Response:
        self.calls.append((method, url, options))
        await self.gate.wait()
        request = httpx.Request(method, f"{options.prefix_url}{url}")
        return httpx.Response(204, request=request)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()
