"""
Body formats and how each one encodes an outgoing payload.
"""
from enum import Enum
from typing import Any, Callable, Dict, Optional

import httpx

from .options import RequestOptions
from .types import Payload


def _encode_json(options: RequestOptions, data: Payload) -> None:
    # httpx serializes the payload itself
    options.json = data


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _encode_form(options: RequestOptions, data: Payload) -> None:
    options.form = httpx.QueryParams([(key, _form_value(value)) for key, value in data.items()])


def _encode_multipart(options: RequestOptions, data: Payload) -> None:
    options.multipart = list(data.items())


class BodyFormat(str, Enum):
    """Encoding applied to the payload of write-style requests."""
    JSON = "json"
    FORM = "form_params"
    MULTIPART = "multipart"

    @property
    def content_type(self) -> Optional[str]:
        """Content-Type paired with the format; multipart leaves it to the transport."""
        return _CONTENT_TYPES.get(self)

    def apply(self, options: RequestOptions, data: Payload) -> None:
        """Attach ``data`` to ``options`` in this format."""
        _ENCODERS[self](options, data)


_CONTENT_TYPES: Dict[BodyFormat, str] = {
    BodyFormat.JSON: "application/json",
    BodyFormat.FORM: "application/x-www-form-urlencoded",
}

_ENCODERS: Dict[BodyFormat, Callable[[RequestOptions, Payload], None]] = {
    BodyFormat.JSON: _encode_json,
    BodyFormat.FORM: _encode_form,
    BodyFormat.MULTIPART: _encode_multipart,
}
