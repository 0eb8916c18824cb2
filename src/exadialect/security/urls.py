"""JDBC-style connection URL parsing and redaction."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .redaction import redact_properties

DEFAULT_PORT = 8563


@dataclass(frozen=True)
class ExasolUrl:
    """
    Parsed ``jdbc:<subprotocol>:<hosts>:<port>[;key=value...]`` URL.

    ``hosts`` is kept verbatim so Exasol host ranges such as
    ``10.0.0.11..14`` or comma separated lists reach the driver unchanged.
    """

    subprotocol: str
    hosts: str
    port: int
    properties: dict[str, str] = field(default_factory=dict)

    @property
    def dsn(self) -> str:
        """
        Connection string in the ``host:port`` form the Python driver expects.
        """

        return f"{self.hosts}:{self.port}"

    @property
    def schema(self) -> Optional[str]:
        return self.properties.get("schema")

    def redacted(self) -> str:
        """
        Return the URL with sensitive properties masked but structure preserved.
        """

        result = f"jdbc:{self.subprotocol}:{self.dsn}"
        for key, value in redact_properties(self.properties).items():
            result += f";{key}={value}"
        return result


def extract_subprotocol(url: str) -> str:
    if not url.startswith("jdbc:"):
        raise ValueError(f"Not a JDBC URL: {url.split(';', 1)[0]!r}")
    remainder = url[len("jdbc:"):]
    subprotocol, sep, _ = remainder.partition(":")
    if not sep or not subprotocol:
        raise ValueError(f"JDBC URL has no subprotocol: {url.split(';', 1)[0]!r}")
    return subprotocol


def parse_jdbc_url(url: str) -> ExasolUrl:
    subprotocol = extract_subprotocol(url)
    remainder = url[len("jdbc:") + len(subprotocol) + 1:]
    address, *raw_properties = remainder.split(";")

    properties: dict[str, str] = {}
    for item in raw_properties:
        if not item:
            continue
        key, sep, value = item.partition("=")
        if not sep:
            raise ValueError(f"Malformed JDBC URL property {key!r}")
        properties[key.strip()] = value.strip()

    hosts, sep, port_text = address.rpartition(":")
    if not sep:
        hosts, port = address, DEFAULT_PORT
    else:
        try:
            port = int(port_text)
        except ValueError as exc:
            raise ValueError(f"Invalid port in JDBC URL: {port_text!r}") from exc
    if not hosts:
        raise ValueError("JDBC URL has no host")
    return ExasolUrl(subprotocol=subprotocol, hosts=hosts, port=port, properties=properties)
