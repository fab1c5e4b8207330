"""
Option store for the request builder.
"""
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Mapping, Optional, Tuple

import httpx

from .types import AgentPair, Payload, RetryOptions


def ensure_trailing_slash(url: str) -> str:
    """Collapse any trailing slashes into exactly one."""
    return url.rstrip("/") + "/"


@dataclass
class RequestOptions:
    """Accumulated request configuration plus the per-call payload."""
    prefix_url: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)
    cookies: Optional[httpx.Cookies] = None
    follow_redirects: Optional[bool] = None
    verify: Optional[bool] = None
    agent: Optional[AgentPair] = None
    timeout: Optional[float] = None
    retry: Optional[RetryOptions] = None
    # Passthrough for options the builder does not wrap
    extra: Dict[str, Any] = field(default_factory=dict)

    # Per-call fields, only populated on a dispatch snapshot
    query: Optional[Payload] = None
    json: Optional[Payload] = None
    form: Optional[httpx.QueryParams] = None
    multipart: Optional[List[Tuple[str, Any]]] = None


# Options a caller may set through the store; per-call fields are excluded.
CONFIG_FIELDS = frozenset(
    f.name for f in fields(RequestOptions)
    if f.name not in ("extra", "query", "json", "form", "multipart")
)


class OptionStore:
    """
    Mutable home of a builder's RequestOptions.

    Every write assigns new containers instead of mutating existing ones, so a
    snapshot taken earlier keeps the values it saw.
    """

    def __init__(self) -> None:
        self._options = RequestOptions()

    def read(self) -> RequestOptions:
        return self._options

    def set(self, name: str, value: Any) -> None:
        if name not in CONFIG_FIELDS:
            raise KeyError(f"Unknown option '{name}'")
        setattr(self._options, name, value)

    def merge_headers(self, headers: Mapping[str, Any]) -> None:
        merged = dict(self._options.headers)
        for key, value in headers.items():
            merged[str(key)] = str(value)
        self._options.headers = merged

    def merge(self, options: Mapping[str, Any]) -> None:
        """Shallow-merge arbitrary options; known keys replace their field wholesale."""
        extra = dict(self._options.extra)
        for key, value in options.items():
            if key == "headers":
                self._options.headers = {str(k): str(v) for k, v in value.items()}
            elif key in CONFIG_FIELDS:
                setattr(self._options, key, value)
            else:
                extra[key] = value
        self._options.extra = extra

    def snapshot(self) -> RequestOptions:
        return replace(
            self._options,
            headers=dict(self._options.headers),
            extra=dict(self._options.extra),
        )
