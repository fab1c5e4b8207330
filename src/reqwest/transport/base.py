"""
Abstract transport interface.
"""
from abc import ABC, abstractmethod

import httpx

from ..options import RequestOptions


class BaseTransport(ABC):
    """
    Executes requests on behalf of the builder.

    The builder looks transports up by lower-cased method name, so each verb
    is exposed as its own coroutine. Implementations only need ``send``.
    Any exception raised is reported through the builder's Response; raise
    ``httpx.HTTPStatusError`` to attach the received response.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the transport (e.g., 'httpx')."""
        pass

    @abstractmethod
    async def send(self, method: str, url: str, options: RequestOptions) -> httpx.Response:
        """Execute the request and return the raw response."""
        pass

    async def get(self, url: str, options: RequestOptions) -> httpx.Response:
        return await self.send("GET", url, options)

    async def head(self, url: str, options: RequestOptions) -> httpx.Response:
        return await self.send("HEAD", url, options)

    async def post(self, url: str, options: RequestOptions) -> httpx.Response:
        return await self.send("POST", url, options)

    async def patch(self, url: str, options: RequestOptions) -> httpx.Response:
        return await self.send("PATCH", url, options)

    async def put(self, url: str, options: RequestOptions) -> httpx.Response:
        return await self.send("PUT", url, options)

    async def delete(self, url: str, options: RequestOptions) -> httpx.Response:
        return await self.send("DELETE", url, options)
