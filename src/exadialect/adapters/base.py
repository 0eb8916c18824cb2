"""
Connection configuration, factory protocol and adapter errors.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Protocol

from ..security.urls import ExasolUrl, parse_jdbc_url
from .cache import CredentialKey

CONNECTION_URL_CONFIG = "connection.url"
CONNECTION_USER_CONFIG = "connection.user"
CONNECTION_PASSWORD_CONFIG = "connection.password"
CONNECTION_TIMEOUT_CONFIG = "connection.timeout"


class AdapterError(RuntimeError):
    """Base error for adapter-related failures."""


class AdapterConfigurationError(AdapterError):
    """Raised when configuration or required dependencies are invalid."""


class AdapterConnectionError(AdapterError):
    """Raised when establishing or using a connection fails."""


class ConnectionFactoryError(AdapterConnectionError):
    """Raised when the connection factory cannot open a new connection."""


def _parse_float(value: Any, *, key: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise AdapterConfigurationError(f"Invalid float value for '{key}': {value!r}") from exc


@dataclass
class ConnectionConfig:
    """
    Normalized connection configuration for a dialect.
    """

    url: str
    user: str | None = None
    password: str | None = None
    timeout: float | None = None
    autocommit: bool = True
    options: dict[str, Any] | None = None
    jdbc: ExasolUrl | None = None
    source: str | None = None

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> "ConnectionConfig":
        """
        Build a connection config by parsing a JDBC-style URL.
        """

        try:
            parsed = parse_jdbc_url(url)
        except ValueError as exc:
            raise AdapterConfigurationError(str(exc)) from exc
        return cls(url=url, jdbc=parsed, **kwargs)

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any], **kwargs: Any) -> "ConnectionConfig":
        """
        Build a config from connector-style settings (``connection.url`` etc.).
        """

        url = config.get(CONNECTION_URL_CONFIG)
        if not url:
            raise AdapterConfigurationError(f"Missing required setting '{CONNECTION_URL_CONFIG}'")
        timeout = config.get(CONNECTION_TIMEOUT_CONFIG)
        if timeout is not None:
            kwargs.setdefault("timeout", _parse_float(timeout, key=CONNECTION_TIMEOUT_CONFIG))
        kwargs.setdefault("user", config.get(CONNECTION_USER_CONFIG))
        kwargs.setdefault("password", config.get(CONNECTION_PASSWORD_CONFIG))
        return cls.from_url(url, **kwargs)

    @classmethod
    def from_env(
        cls,
        url_var: str = "EXA_CONNECTION_URL",
        user_var: str = "EXA_CONNECTION_USER",
        password_var: str = "EXA_CONNECTION_PASSWORD",
        **kwargs: Any,
    ) -> "ConnectionConfig":
        """
        Build a config from environment variables.
        """

        url = os.getenv(url_var)
        if not url:
            raise AdapterConfigurationError(f"Environment variable {url_var} is not set")
        kwargs.setdefault("user", os.getenv(user_var))
        kwargs.setdefault("password", os.getenv(password_var))
        return cls.from_url(url, source=url_var, **kwargs)

    def credential_key(self) -> CredentialKey:
        return CredentialKey(user=self.user, password=self.password, url=self.url)

    def redacted_url(self) -> str:
        """
        Return a URL safe for logging (sensitive properties removed).
        """

        if self.jdbc:
            return self.jdbc.redacted()
        return self.url.split(";", 1)[0]

    def descriptive_label(self) -> str:
        """
        Describe the config source for diagnostics.
        """

        redacted = self.redacted_url()
        if self.user:
            redacted = f"{self.user}@{redacted}"
        if self.source:
            return f"{self.source} ({redacted})"
        return redacted


class ConnectionFactory(Protocol):
    """
    Opens one physical connection per call.
    """

    def __call__(self) -> Any: ...
