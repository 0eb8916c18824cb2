"""Redaction helpers for connection URLs and connection properties."""

from __future__ import annotations

from typing import Mapping

REDACTED_VALUE = "***"

_SENSITIVE_KEY_TOKENS = (
    "password",
    "passwd",
    "pwd",
    "secret",
    "token",
    "apikey",
    "api_key",
    "access_key",
    "secret_key",
    "private_key",
    "privatekey",
    "fingerprint",
    "certificate",
    "sslkey",
    "ssl_key",
)


def _compact(value: str) -> str:
    return "".join(ch for ch in value if ch.isalnum())


def is_sensitive_key(key: str) -> bool:
    normalized = key.lower()
    compact = _compact(normalized)
    for token in _SENSITIVE_KEY_TOKENS:
        token_compact = _compact(token)
        if token in normalized or token_compact in compact:
            return True
    return False


def redact_properties(properties: Mapping[str, str]) -> dict[str, str]:
    return {
        key: REDACTED_VALUE if is_sensitive_key(key) else value
        for key, value in properties.items()
    }
