"""
Transports that execute requests for the builder.
"""
from .base import BaseTransport
from .httpx_transport import HttpxTransport

__all__ = ["BaseTransport", "HttpxTransport"]
