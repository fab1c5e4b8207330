"""
Tests for transport configuration.
"""
import pytest
from pydantic import ValidationError

from reqwest.config import (
    DEFAULT_RETRY_LIMIT,
    DEFAULT_TIMEOUT,
    RetryConfig,
    TransportConfig,
    resolve,
    resolve_bool,
    resolve_float,
    resolve_int,
)


def test_defaults():
    config = TransportConfig()
    assert config.timeout == DEFAULT_TIMEOUT
    assert config.trust_env is False
    assert config.retry.limit == DEFAULT_RETRY_LIMIT
    assert 503 in config.retry.status_codes
    assert "POST" not in config.retry.methods


def test_invalid_timeout():
    with pytest.raises(ValidationError, match="timeout must be greater than 0"):
        TransportConfig(timeout=0)


def test_invalid_retry_limit():
    with pytest.raises(ValidationError, match="non-negative"):
        RetryConfig(limit=-1)


def test_retry_methods_are_upper_cased():
    assert RetryConfig(methods={"get", "Post"}).methods == frozenset({"GET", "POST"})


def test_resolve_priority(monkeypatch):
    monkeypatch.setenv("TEST_REQWEST_VAR", "env_val")
    assert resolve("arg", "TEST_REQWEST_VAR", "default") == "arg"
    assert resolve(None, "TEST_REQWEST_VAR", "default") == "env_val"
    assert resolve(None, ["MISSING_REQWEST_VAR"], "default") == "default"


def test_resolve_typed(monkeypatch):
    monkeypatch.setenv("TEST_REQWEST_INT", "not-a-number")
    assert resolve_int(None, "TEST_REQWEST_INT", 7) == 7
    assert resolve_float("2.5", [], 1.0) == 2.5
    assert resolve_bool("yes", [], False) is True
    assert resolve_bool("off", [], True) is False


def test_from_env(monkeypatch):
    monkeypatch.setenv("REQWEST_TIMEOUT", "12.5")
    monkeypatch.setenv("REQWEST_RETRY_LIMIT", "5")
    monkeypatch.setenv("REQWEST_RETRY_BACKOFF", "0.25")
    monkeypatch.setenv("REQWEST_TRUST_ENV", "true")

    config = TransportConfig.from_env()

    assert config.timeout == 12.5
    assert config.retry.limit == 5
    assert config.retry.backoff == 0.25
    assert config.trust_env is True


def test_from_env_arguments_win(monkeypatch):
    monkeypatch.setenv("REQWEST_TIMEOUT", "12.5")
    assert TransportConfig.from_env(timeout=3.0).timeout == 3.0
