import pytest

from exadialect.security import ExasolUrl, parse_jdbc_url, redact_properties
from exadialect.security.redaction import is_sensitive_key
from exadialect.security.urls import DEFAULT_PORT, extract_subprotocol


def test_parse_jdbc_url_and_redact():
    url = parse_jdbc_url("jdbc:exa:localhost:8563;schema=SYS;password=secret")
    assert url == ExasolUrl("exa", "localhost", 8563, {"schema": "SYS", "password": "secret"})
    assert url.dsn == "localhost:8563"
    assert url.schema == "SYS"
    assert url.redacted() == "jdbc:exa:localhost:8563;schema=SYS;password=***"


def test_host_ranges_and_lists_are_kept_verbatim():
    url = parse_jdbc_url("jdbc:exa:10.0.0.11..14,backup.example.com:9000")
    assert url.hosts == "10.0.0.11..14,backup.example.com"
    assert url.port == 9000


def test_missing_port_uses_default():
    url = parse_jdbc_url("jdbc:exa:localhost;schema=S")
    assert url.port == DEFAULT_PORT


@pytest.mark.parametrize(
    "value",
    [
        "exa:localhost:8563",
        "jdbc:exa:localhost:port",
        "jdbc:exa::8563",
        "jdbc:exa:localhost:8563;schema",
        "jdbc:",
    ],
)
def test_malformed_urls_raise(value):
    with pytest.raises(ValueError):
        parse_jdbc_url(value)


def test_extract_subprotocol():
    assert extract_subprotocol("jdbc:exa:localhost:8563") == "exa"
    assert extract_subprotocol("jdbc:postgresql://localhost/db") == "postgresql"


def test_error_messages_do_not_echo_properties():
    with pytest.raises(ValueError) as excinfo:
        extract_subprotocol("exa:host;password=hunter2")
    assert "hunter2" not in str(excinfo.value)


def test_redact_properties():
    assert redact_properties({"schema": "S", "Password": "x", "fingerprint": "ab12"}) == {
        "schema": "S",
        "Password": "***",
        "fingerprint": "***",
    }
    assert is_sensitive_key("secret_key")
    assert not is_sensitive_key("schema")
