"""
Core type definitions for reqwest.
"""
from dataclasses import dataclass
from typing import Any, Literal, Mapping, Optional, Union

import httpx

# HTTP Methods
HttpMethod = Literal["GET", "HEAD", "POST", "PATCH", "PUT", "DELETE"]

Payload = Mapping[str, Any]


@dataclass(frozen=True)
class RetryOptions:
    """Retry descriptor handed to the transport."""
    limit: int
    max_retry_after: Optional[float] = None


@dataclass(frozen=True)
class AgentPair:
    """Network agents used by the transport, one per scheme."""
    http: Optional[httpx.AsyncBaseTransport] = None
    https: Optional[httpx.AsyncBaseTransport] = None

    @classmethod
    def coerce(cls, agent: Union["AgentPair", Mapping[str, Any]]) -> "AgentPair":
        """Accept either an AgentPair or a mapping with 'http'/'https' keys."""
        if isinstance(agent, AgentPair):
            return agent
        return cls(http=agent.get("http"), https=agent.get("https"))

    def mounts(self) -> dict:
        """Build httpx mount points for the configured agents."""
        mounts = {}
        if self.http is not None:
            mounts["http://"] = self.http
        if self.https is not None:
            mounts["https://"] = self.https
        return mounts


@dataclass
class DispatchResult:
    """Outcome of a single dispatch: a raw response, an error, or both."""
    response: Optional[httpx.Response] = None
    error: Optional[Exception] = None

    @property
    def failed(self) -> bool:
        return self.error is not None
