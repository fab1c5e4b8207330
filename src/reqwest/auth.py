import base64
from typing import Dict

AUTHORIZATION = "Authorization"


def _base64_encode(text: str) -> str:
    """Encodes a string to base64."""
    return base64.b64encode(text.encode("utf-8")).decode("utf-8")


def encode_basic(username: str, password: str) -> Dict[str, str]:
    """
    Encode Basic credentials into an Authorization header.

    The credentials are joined as ``username:password`` and base64 encoded
    from their UTF-8 bytes.
    """
    return {AUTHORIZATION: f"Basic {_base64_encode(f'{username}:{password}')}"}


def encode_bearer(token: str) -> Dict[str, str]:
    return {AUTHORIZATION: f"Bearer {token}"}
