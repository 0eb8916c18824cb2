import logging

import pytest

from exadialect.adapters import (
    AdapterConfigurationError,
    ConnectionConfig,
    ConnectionFactoryError,
    ExasolConnectionFactory,
)


class FakeConnection:
    def __init__(self, **options):
        self.options = options
        self.closed = False

    def close(self):
        self.closed = True


class FakeDriver:
    def __init__(self, fail: bool = False):
        self.connections = []
        self.fail = fail

    def connect(self, **options):
        if self.fail:
            raise OSError("connection refused")
        conn = FakeConnection(**options)
        self.connections.append(conn)
        return conn


@pytest.fixture
def fake_driver(monkeypatch):
    driver = FakeDriver()
    monkeypatch.setattr("exadialect.adapters.exasol._load_driver", lambda: driver)
    return driver


def test_connects_using_pyexasol_driver(fake_driver):
    config = ConnectionConfig.from_url(
        "jdbc:exa:db1..3.example.com:8563;schema=SALES;clientname=sink;querytimeout=30",
        user="sys",
        password="exasol",
        timeout=5,
    )
    connection = ExasolConnectionFactory(config)()

    assert connection in fake_driver.connections
    assert connection.options == {
        "dsn": "db1..3.example.com:8563",
        "user": "sys",
        "password": "exasol",
        "autocommit": True,
        "schema": "SALES",
        "client_name": "sink",
        "query_timeout": 30,
        "connection_timeout": 5,
    }


def test_each_call_opens_a_new_connection(fake_driver):
    factory = ExasolConnectionFactory(ConnectionConfig.from_url("jdbc:exa:localhost:8563"))
    assert factory() is not factory()
    assert len(fake_driver.connections) == 2


def test_explicit_options_override_url_properties(fake_driver):
    config = ConnectionConfig.from_url(
        "jdbc:exa:localhost:8563;schema=A", options={"schema": "B", "compression": True}
    )
    connection = ExasolConnectionFactory(config)()
    assert connection.options["schema"] == "B"
    assert connection.options["compression"] is True


def test_driver_failure_raises_connection_factory_error(monkeypatch):
    monkeypatch.setattr("exadialect.adapters.exasol._load_driver", lambda: FakeDriver(fail=True))
    factory = ExasolConnectionFactory(ConnectionConfig.from_url("jdbc:exa:localhost:8563"))
    with pytest.raises(ConnectionFactoryError) as excinfo:
        factory()
    assert isinstance(excinfo.value.__cause__, OSError)


def test_missing_driver_raises(monkeypatch):
    monkeypatch.setattr("exadialect.adapters.exasol._load_driver", lambda: None)
    factory = ExasolConnectionFactory(ConnectionConfig.from_url("jdbc:exa:localhost:8563"))
    with pytest.raises(AdapterConfigurationError):
        factory()


def test_connect_log_redacts_credentials(fake_driver, caplog):
    caplog.set_level(logging.INFO, logger="exadialect.adapters.exasol")
    config = ConnectionConfig.from_url(
        "jdbc:exa:localhost:8563;password=hunter2", user="sys", password="hunter2"
    )
    ExasolConnectionFactory(config)()
    messages = [record.getMessage() for record in caplog.records]
    assert any("Connecting to Exasol" in message for message in messages)
    assert all("hunter2" not in message for message in messages)


@pytest.mark.parametrize("timeout, expected", [(0.5, 1), (2.1, 3), (4, 4)])
def test_fractional_timeouts_round_up(fake_driver, timeout, expected):
    config = ConnectionConfig.from_url("jdbc:exa:localhost:8563", timeout=timeout)
    connection = ExasolConnectionFactory(config)()
    assert connection.options["connection_timeout"] == expected


@pytest.mark.parametrize("timeout", [None, 0, -1])
def test_non_positive_timeout_is_not_forwarded(fake_driver, timeout):
    config = ConnectionConfig.from_url("jdbc:exa:localhost:8563", timeout=timeout)
    connection = ExasolConnectionFactory(config)()
    assert "connection_timeout" not in connection.options
