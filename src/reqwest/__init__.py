"""
Reqwest - Fluent HTTP Request Builder
"""

__version__ = "0.1.0"

from .body import BodyFormat
from .client import Reqwest
from .config import RetryConfig, TransportConfig
from .errors import ConfigurationError, ReqwestError, UnsupportedAuthError
from .options import OptionStore, RequestOptions
from .response import Response
from .transport import BaseTransport, HttpxTransport
from .types import AgentPair, RetryOptions

__all__ = [
    "Reqwest",
    "Response",
    "BodyFormat",
    "RequestOptions", "OptionStore",
    "AgentPair", "RetryOptions",
    "TransportConfig", "RetryConfig",
    "BaseTransport", "HttpxTransport",
    "ReqwestError", "ConfigurationError", "UnsupportedAuthError",
]
