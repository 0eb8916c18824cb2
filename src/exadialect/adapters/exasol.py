"""
Exasol connection factory backed by the pyexasol driver.
"""

from __future__ import annotations

import math
from typing import Any

from ..security.urls import parse_jdbc_url
from ..utils import get_logger, time_call
from .base import AdapterConfigurationError, ConnectionConfig, ConnectionFactoryError

SLOW_CONNECT_MS = 2000

# JDBC URL properties forwarded to pyexasol under a different keyword.
_PROPERTY_KEYWORDS = {
    "schema": "schema",
    "clientname": "client_name",
    "clientversion": "client_version",
    "querytimeout": "query_timeout",
}


def _load_driver():
    try:
        import pyexasol

        return pyexasol
    except ImportError:
        return None


class ExasolConnectionFactory:
    """
    Opens a new pyexasol connection for the configured credentials on each call.
    """

    def __init__(self, config: ConnectionConfig) -> None:
        self.config = config
        self.logger = get_logger("adapters.exasol")

    def connect_options(self) -> dict[str, Any]:
        config = self.config
        jdbc = config.jdbc or parse_jdbc_url(config.url)
        options: dict[str, Any] = {
            "dsn": jdbc.dsn,
            "user": config.user,
            "password": config.password,
            "autocommit": config.autocommit,
        }
        for prop, value in jdbc.properties.items():
            keyword = _PROPERTY_KEYWORDS.get(prop.lower())
            if keyword is None:
                continue
            options[keyword] = int(value) if keyword == "query_timeout" else value
        if config.timeout is not None and config.timeout > 0:
            options["connection_timeout"] = math.ceil(config.timeout)
        options.update(config.options or {})
        return options

    def __call__(self) -> Any:
        driver = _load_driver()
        if driver is None:
            raise AdapterConfigurationError("pyexasol is required to connect to Exasol.")

        try:
            options = self.connect_options()
        except ValueError as exc:
            raise AdapterConfigurationError(str(exc)) from exc

        self.logger.info("Connecting to Exasol %s", self.config.descriptive_label())
        try:
            with time_call("exasol.connect", self.logger, threshold_ms=SLOW_CONNECT_MS):
                return driver.connect(**options)
        except Exception as exc:
            raise ConnectionFactoryError(
                f"Failed to connect to Exasol at {self.config.redacted_url()}."
            ) from exc
