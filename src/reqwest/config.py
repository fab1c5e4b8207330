"""
Configuration models for the default transport.
"""
import os
from typing import Any, FrozenSet, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

# Constants
DEFAULT_TIMEOUT = 30.0
DEFAULT_RETRY_LIMIT = 2
DEFAULT_RETRY_BACKOFF = 1.0
DEFAULT_RETRY_METHODS = frozenset({"GET", "PUT", "HEAD", "DELETE", "OPTIONS", "TRACE"})
DEFAULT_RETRY_STATUS_CODES = frozenset({408, 413, 429, 500, 502, 503, 504, 521, 522, 524})

ENV_TIMEOUT = "REQWEST_TIMEOUT"
ENV_RETRY_LIMIT = "REQWEST_RETRY_LIMIT"
ENV_RETRY_BACKOFF = "REQWEST_RETRY_BACKOFF"
ENV_TRUST_ENV = "REQWEST_TRUST_ENV"


def resolve(arg: Any, env_keys: Union[str, List[str]], default: Any) -> Any:
    """
    Resolve configuration value from multiple sources in priority order:
    1. Direct argument (if not None)
    2. Environment variables
    3. Default value
    """
    if arg is not None:
        return arg

    if isinstance(env_keys, str):
        env_keys = [env_keys]

    for key in env_keys:
        if key:
            val = os.getenv(key)
            if val is not None:
                return val

    return default


def resolve_bool(arg: Any, env_keys: Union[str, List[str]], default: bool) -> bool:
    """Resolve boolean value with string conversion support."""
    val = resolve(arg, env_keys, default)
    if isinstance(val, str):
        return val.lower() in ("true", "1", "yes", "on")
    return bool(val)


def resolve_int(arg: Any, env_keys: Union[str, List[str]], default: int) -> int:
    val = resolve(arg, env_keys, default)
    try:
        return int(val)
    except (ValueError, TypeError):
        return default


def resolve_float(arg: Any, env_keys: Union[str, List[str]], default: float) -> float:
    val = resolve(arg, env_keys, default)
    try:
        return float(val)
    except (ValueError, TypeError):
        return default


class RetryConfig(BaseModel):
    """Retry policy applied by the default transport."""
    limit: int = DEFAULT_RETRY_LIMIT
    backoff: float = DEFAULT_RETRY_BACKOFF
    jitter: float = 0.1
    methods: FrozenSet[str] = DEFAULT_RETRY_METHODS
    status_codes: FrozenSet[int] = DEFAULT_RETRY_STATUS_CODES

    @field_validator("limit")
    @classmethod
    def validate_limit(cls, v: int) -> int:
        if v < 0:
            raise ValueError("retry limit must be non-negative")
        return v

    @field_validator("methods")
    @classmethod
    def normalize_methods(cls, v: FrozenSet[str]) -> FrozenSet[str]:
        return frozenset(m.upper() for m in v)


class TransportConfig(BaseModel):
    """Defaults used when a request does not set its own value."""
    timeout: float = DEFAULT_TIMEOUT
    trust_env: bool = False
    retry: RetryConfig = Field(default_factory=RetryConfig)

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be greater than 0")
        return v

    @classmethod
    def from_env(
        cls,
        timeout: Optional[float] = None,
        retry_limit: Optional[int] = None,
        retry_backoff: Optional[float] = None,
        trust_env: Optional[bool] = None,
    ) -> "TransportConfig":
        """
        Build a config from arguments, falling back to environment variables:

            REQWEST_TIMEOUT: Request timeout in seconds.
            REQWEST_RETRY_LIMIT: Number of retries for retryable failures.
            REQWEST_RETRY_BACKOFF: Base backoff delay in seconds.
            REQWEST_TRUST_ENV: Let httpx read proxy/netrc settings from the environment.
        """
        return cls(
            timeout=resolve_float(timeout, ENV_TIMEOUT, DEFAULT_TIMEOUT),
            trust_env=resolve_bool(trust_env, ENV_TRUST_ENV, False),
            retry=RetryConfig(
                limit=resolve_int(retry_limit, ENV_RETRY_LIMIT, DEFAULT_RETRY_LIMIT),
                backoff=resolve_float(retry_backoff, ENV_RETRY_BACKOFF, DEFAULT_RETRY_BACKOFF),
            ),
        )
