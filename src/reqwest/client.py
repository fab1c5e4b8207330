"""
Fluent request builder.
"""
import logging
from typing import Any, Mapping, Optional, Union

import httpx

from .auth import encode_basic, encode_bearer
from .body import BodyFormat
from .errors import UnsupportedAuthError
from .options import OptionStore, RequestOptions, ensure_trailing_slash
from .response import Response
from .transport import BaseTransport, HttpxTransport
from .types import AgentPair, DispatchResult, HttpMethod, Payload, RetryOptions

logger = logging.getLogger(__name__)

# Constants
LOG_PREFIX = "[Reqwest]"


class Reqwest:
    """
    Accumulates request configuration across chained calls and dispatches a
    single request on each verb call.

    Configuration methods mutate this instance and return it. Every verb
    snapshots the configuration before awaiting the transport, so changes made
    while a request is in flight only affect later requests.

        response = await (
            Reqwest.create("https://api.example.com")
            .with_token("secret")
            .accept_json()
            .post("/users", {"name": "Ada"})
        )
    """

    def __init__(self, transport: Optional[BaseTransport] = None):
        self._store = OptionStore()
        self._transport = transport or HttpxTransport()
        self._body_format = BodyFormat.JSON
        self.as_json()

    @classmethod
    def create(cls, url: str, transport: Optional[BaseTransport] = None) -> "Reqwest":
        """Factory method to create a builder bound to a base URL."""
        return cls(transport).base_url(url)

    @property
    def options(self) -> RequestOptions:
        """Current accumulated options."""
        return self._store.read()

    @property
    def transport(self) -> BaseTransport:
        return self._transport

    def base_url(self, url: str) -> "Reqwest":
        self._store.set("prefix_url", ensure_trailing_slash(url))
        return self

    # =========================================================================
    # Body Format
    # =========================================================================

    def as_json(self) -> "Reqwest":
        return self.body_format(BodyFormat.JSON).content_type(BodyFormat.JSON.content_type)

    def as_form(self) -> "Reqwest":
        return self.body_format(BodyFormat.FORM).content_type(BodyFormat.FORM.content_type)

    def as_multipart(self) -> "Reqwest":
        return self.body_format(BodyFormat.MULTIPART)

    def body_format(self, body_format: Union[BodyFormat, str]) -> "Reqwest":
        """Select how payloads are encoded. Headers are left untouched."""
        self._body_format = BodyFormat(body_format)
        return self

    # =========================================================================
    # Headers & Auth
    # =========================================================================

    def content_type(self, content_type: str) -> "Reqwest":
        return self.with_headers({"Content-Type": content_type})

    def accept_json(self) -> "Reqwest":
        return self.accept("application/json")

    def accept(self, content_type: str) -> "Reqwest":
        return self.with_headers({"Accept": content_type})

    def with_headers(self, headers: Mapping[str, Any]) -> "Reqwest":
        """Merge headers into the existing ones; later values win."""
        self._store.merge_headers(headers)
        return self

    def with_basic_auth(self, username: str, password: str) -> "Reqwest":
        return self.with_headers(encode_basic(username, password))

    def with_digest_auth(self, username: str, password: str) -> "Reqwest":
        raise UnsupportedAuthError("with_digest_auth", username, password)

    def with_token(self, token: str) -> "Reqwest":
        return self.with_headers(encode_bearer(token))

    def with_cookies(self, cookies: Mapping[str, Any], domain: str) -> "Reqwest":
        """Replace the cookie jar with one holding ``cookies`` scoped to ``domain``."""
        jar = httpx.Cookies()
        for key, value in cookies.items():
            jar.set(key, str(value), domain=domain)
        self._store.set("cookies", jar)
        return self

    # =========================================================================
    # Transport Options
    # =========================================================================

    def without_redirecting(self) -> "Reqwest":
        self._store.set("follow_redirects", False)
        return self

    def without_verifying(self) -> "Reqwest":
        """Disable TLS certificate verification. Insecure; never the default."""
        self._store.set("verify", False)
        return self

    def with_agent(self, agent: Union[AgentPair, Mapping[str, Any]]) -> "Reqwest":
        self._store.set("agent", AgentPair.coerce(agent))
        return self

    def timeout(self, seconds: float) -> "Reqwest":
        self._store.set("timeout", seconds)
        return self

    def retry(self, times: int, sleep: Optional[float] = None) -> "Reqwest":
        """Let the transport retry up to ``times``, waiting at most ``sleep`` seconds."""
        self._store.set("retry", RetryOptions(limit=times, max_retry_after=sleep))
        return self

    def with_options(self, options: Mapping[str, Any]) -> "Reqwest":
        self._store.merge(options)
        return self

    # =========================================================================
    # Verbs
    # =========================================================================

    async def get(self, url: str, query: Optional[Payload] = None) -> Response:
        return await self._send("GET", url, query=query)

    async def head(self, url: str, query: Optional[Payload] = None) -> Response:
        return await self._send("HEAD", url, query=query)

    async def post(self, url: str, data: Optional[Payload] = None) -> Response:
        return await self._send("POST", url, data=data)

    async def patch(self, url: str, data: Optional[Payload] = None) -> Response:
        return await self._send("PATCH", url, data=data)

    async def put(self, url: str, data: Optional[Payload] = None) -> Response:
        return await self._send("PUT", url, data=data)

    async def delete(self, url: str, data: Optional[Payload] = None) -> Response:
        return await self._send("DELETE", url, data=data)

    async def _send(
        self,
        method: HttpMethod,
        url: str,
        query: Optional[Payload] = None,
        data: Optional[Payload] = None,
    ) -> Response:
        options = self._store.snapshot()

        if query is not None:
            options.query = query

        if data is not None:
            self._body_format.apply(options, data)

        path = url.lstrip("/")
        result = await self._dispatch(method, path, options)
        if result.failed:
            logger.warning(
                f"{LOG_PREFIX} {method} {options.prefix_url or ''}{path} failed: "
                f"{type(result.error).__name__}: {result.error}"
            )
        return Response(result.response, result.error)

    async def _dispatch(self, method: str, path: str, options: RequestOptions) -> DispatchResult:
        send = getattr(self._transport, method.lower())
        try:
            return DispatchResult(response=await send(path, options))
        except Exception as e:
            # Whatever the transport raises is reported through the Response
            response = e.response if isinstance(e, httpx.HTTPStatusError) else None
            return DispatchResult(response=response, error=e)
