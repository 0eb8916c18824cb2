"""Security helpers for exadialect."""

from .redaction import REDACTED_VALUE, redact_properties
from .urls import ExasolUrl, parse_jdbc_url

__all__ = ["REDACTED_VALUE", "ExasolUrl", "parse_jdbc_url", "redact_properties"]
