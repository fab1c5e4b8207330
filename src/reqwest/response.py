"""
Uniform response wrapper returned by every verb.
"""
import json
from typing import Any, Dict, Optional

import httpx


class Response:
    """
    Wraps the outcome of a dispatch.

    Built either from a successful httpx response, or from the (possibly
    missing) response of a failed request together with the error that
    caused the failure.
    """

    def __init__(self, response: Optional[httpx.Response], error: Optional[Exception] = None):
        self._response = response
        self._error = error

    def __repr__(self) -> str:
        if self._error is not None:
            return f"<Response [{self.status}] error={type(self._error).__name__}>"
        return f"<Response [{self.status}]>"

    @property
    def raw(self) -> Optional[httpx.Response]:
        return self._response

    @property
    def error(self) -> Optional[Exception]:
        return self._error

    @property
    def status(self) -> int:
        """HTTP status code, or 0 when no response was received."""
        if self._response is None:
            return 0
        return self._response.status_code

    @property
    def reason(self) -> str:
        if self._response is None:
            return ""
        return self._response.reason_phrase

    @property
    def url(self) -> Optional[str]:
        if self._response is None:
            return None
        return str(self._response.url)

    @property
    def headers(self) -> Dict[str, str]:
        if self._response is None:
            return {}
        return dict(self._response.headers)

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        if self._response is None:
            return None
        return self._response.headers.get(name)

    @property
    def cookies(self) -> httpx.Cookies:
        if self._response is None:
            return httpx.Cookies()
        return self._response.cookies

    @property
    def body(self) -> str:
        if self._response is None:
            return ""
        return self._response.text

    def json(self) -> Any:
        """Parsed JSON body, or None when the body is empty or not JSON."""
        if self._response is None or not self._response.content:
            return None
        try:
            return self._response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None

    @property
    def ok(self) -> bool:
        return self._error is None and 200 <= self.status <= 299

    @property
    def successful(self) -> bool:
        return self.ok

    @property
    def failed(self) -> bool:
        return not self.ok

    @property
    def redirect(self) -> bool:
        return 300 <= self.status <= 399

    @property
    def client_error(self) -> bool:
        return 400 <= self.status <= 499

    @property
    def server_error(self) -> bool:
        return self.status >= 500

    def raise_for_error(self) -> "Response":
        """Re-raise the captured transport error, if any."""
        if self._error is not None:
            raise self._error
        return self
