"""
Transport backed by httpx.AsyncClient.
"""
import asyncio
import datetime as _dt
import logging
import random
from email.utils import parsedate_to_datetime
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import httpx

from ..config import TransportConfig
from ..options import RequestOptions
from ..types import AgentPair, RetryOptions
from .base import BaseTransport

logger = logging.getLogger(__name__)

# Constants
LOG_PREFIX = "[Reqwest]"

# Passthrough options that httpx only accepts when building the client.
CLIENT_OPTION_KEYS = frozenset({
    "cert",
    "proxy",
    "http1",
    "http2",
    "limits",
    "max_redirects",
    "event_hooks",
    "transport",
    "mounts",
    "trust_env",
    "default_encoding",
})

SENSITIVE_HEADERS = {"authorization", "x-api-key", "api-key", "token", "secret", "cookie"}


def mask_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Return headers with sensitive values masked for logging."""
    masked: Dict[str, str] = {}
    for key, value in headers.items():
        if key.lower() in SENSITIVE_HEADERS:
            masked[key] = "****"
        else:
            masked[key] = value
    return masked


def parse_retry_after(raw: Optional[str]) -> Optional[float]:
    """Parse Retry-After header values into seconds."""
    if raw is None:
        return None

    raw = raw.strip()
    if not raw:
        return None

    try:
        return max(0.0, float(raw))
    except ValueError:
        pass

    try:
        parsed = parsedate_to_datetime(raw)
    except (ValueError, TypeError, OverflowError):
        return None

    if parsed.utcoffset() is None:
        parsed = parsed.replace(tzinfo=_dt.timezone.utc)

    delta = (parsed - _dt.datetime.now(_dt.timezone.utc)).total_seconds()
    return max(0.0, delta)


def _multipart_part(name: str, value: Any) -> Tuple[str, Any]:
    # Files, raw bytes and explicit (filename, content[, type]) tuples go
    # through untouched; everything else becomes a plain form field.
    if isinstance(value, (bytes, tuple)) or hasattr(value, "read"):
        return name, value
    return name, (None, str(value))


class HttpxTransport(BaseTransport):
    """Default transport: one short-lived httpx.AsyncClient per request."""

    def __init__(self, config: Optional[TransportConfig] = None):
        self._config = config or TransportConfig()

    @property
    def name(self) -> str:
        return "httpx"

    @property
    def config(self) -> TransportConfig:
        return self._config

    def get_client_kwargs(self, options: RequestOptions) -> Dict[str, Any]:
        """Build kwargs for httpx.AsyncClient."""
        kwargs: Dict[str, Any] = {
            "base_url": options.prefix_url or "",
            "verify": True if options.verify is None else options.verify,
            "trust_env": self._config.trust_env,
        }
        if options.cookies is not None:
            kwargs["cookies"] = options.cookies
        if options.agent is not None:
            kwargs["mounts"] = AgentPair.coerce(options.agent).mounts()

        for key, value in options.extra.items():
            if key in CLIENT_OPTION_KEYS:
                kwargs[key] = value
        return kwargs

    def get_request_kwargs(self, options: RequestOptions) -> Dict[str, Any]:
        """Build kwargs for AsyncClient.request."""
        headers = dict(options.headers)
        kwargs: Dict[str, Any] = {
            "headers": headers,
            "follow_redirects": self._follows_redirects(options),
            "timeout": self._config.timeout if options.timeout is None else options.timeout,
        }

        if options.query is not None:
            kwargs["params"] = dict(options.query)

        if options.json is not None:
            kwargs["json"] = options.json
        if options.form is not None:
            kwargs["content"] = str(options.form)
        if options.multipart is not None:
            kwargs["files"] = [_multipart_part(name, value) for name, value in options.multipart]
            # httpx has to write its own Content-Type carrying the boundary
            for key in [k for k in headers if k.lower() == "content-type"]:
                del headers[key]

        for key, value in options.extra.items():
            if key not in CLIENT_OPTION_KEYS:
                kwargs[key] = value
        return kwargs

    async def send(self, method: str, url: str, options: RequestOptions) -> httpx.Response:
        method = method.upper()
        limit, max_retry_after = self._retry_policy(options.retry)
        client_kwargs = self.get_client_kwargs(options)
        request_kwargs = self.get_request_kwargs(options)

        logger.debug(
            f"{LOG_PREFIX} Request: {method} {client_kwargs['base_url']}{url} "
            f"headers={mask_headers(request_kwargs['headers'])}"
        )

        async with httpx.AsyncClient(**client_kwargs) as client:
            attempt = 0
            while True:
                attempt += 1
                try:
                    response = await client.request(method, url, **request_kwargs)
                except (httpx.TimeoutException, httpx.NetworkError) as exc:
                    if not self._should_retry(method, attempt, limit):
                        raise
                    delay = self._retry_delay(attempt, None, max_retry_after)
                    logger.debug(
                        f"{LOG_PREFIX} Retrying {method} {url} after {type(exc).__name__} "
                        f"in {delay:.2f}s (attempt {attempt}/{limit})"
                    )
                    await asyncio.sleep(delay)
                    continue

                if (
                    response.status_code in self._config.retry.status_codes
                    and self._should_retry(method, attempt, limit)
                ):
                    retry_after = parse_retry_after(response.headers.get("Retry-After"))
                    if max_retry_after is None or retry_after is None or retry_after <= max_retry_after:
                        delay = self._retry_delay(attempt, retry_after, max_retry_after)
                        logger.debug(
                            f"{LOG_PREFIX} Retrying {method} {url} after status {response.status_code} "
                            f"in {delay:.2f}s (attempt {attempt}/{limit})"
                        )
                        await asyncio.sleep(delay)
                        continue
                break

        logger.debug(f"{LOG_PREFIX} Response: {response.status_code} {method} {response.url}")
        self._raise_for_status(response, request_kwargs["follow_redirects"])
        return response

    def _follows_redirects(self, options: RequestOptions) -> bool:
        return True if options.follow_redirects is None else bool(options.follow_redirects)

    def _retry_policy(
        self, retry: Union[RetryOptions, Mapping[str, Any], None]
    ) -> Tuple[int, Optional[float]]:
        """Resolve (limit, max_retry_after) from the request or the config defaults."""
        if retry is None:
            return self._config.retry.limit, None
        if isinstance(retry, RetryOptions):
            return retry.limit, retry.max_retry_after
        return int(retry.get("limit", self._config.retry.limit)), retry.get("max_retry_after")

    def _should_retry(self, method: str, attempt: int, limit: int) -> bool:
        if attempt > limit:
            return False
        return method in self._config.retry.methods

    def _retry_delay(
        self, attempt: int, retry_after: Optional[float], max_retry_after: Optional[float]
    ) -> float:
        if retry_after is not None:
            delay = retry_after
        else:
            policy = self._config.retry
            delay = policy.backoff * (2 ** (attempt - 1)) + random.uniform(0, policy.jitter)
        if max_retry_after is not None:
            delay = min(delay, max_retry_after)
        return delay

    @staticmethod
    def _raise_for_status(response: httpx.Response, follow_redirects: bool) -> None:
        status = response.status_code
        limit = 299 if follow_redirects else 399
        if 200 <= status <= limit or status == 304:
            return
        raise httpx.HTTPStatusError(
            f"Response code {status} ({response.reason_phrase}) for url '{response.url}'",
            request=response.request,
            response=response,
        )
