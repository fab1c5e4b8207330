"""
Exceptions raised by the request builder.

Transport failures are not represented here: they are httpx errors and are
always captured into a Response rather than raised.
"""


class ReqwestError(Exception):
    """Base exception for reqwest errors."""
    pass


class ConfigurationError(ReqwestError):
    """Raised synchronously when the builder is misconfigured."""
    pass


class UnsupportedAuthError(ConfigurationError):
    def __init__(self, method: str, username: str, password: str):
        msg = f'The [{method}("{username}", "{password}")] method is not yet supported.'
        super().__init__(msg)
        self.method = method
        self.username = username
        self.password = password
