import threading

import pytest

from exadialect.adapters import ConnectionCache, ConnectionConfig
from exadialect.dialects import ExasolDialect, find_dialect_for


class FakeConnection:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


class CountingFactory:
    def __init__(self):
        self.calls = 0
        self._lock = threading.Lock()

    def __call__(self):
        with self._lock:
            self.calls += 1
        return FakeConnection()


def make_config(user="sys", password="exasol", url="jdbc:exa:localhost:8563"):
    return ConnectionConfig.from_url(url, user=user, password=password)


def test_get_connection_reuses_cached_connection():
    factory = CountingFactory()
    dialect = ExasolDialect(make_config(), connection_cache=ConnectionCache(), connection_factory=factory)
    assert dialect.get_connection() is dialect.get_connection()
    assert factory.calls == 1


def test_dialects_sharing_a_cache_share_connections():
    cache = ConnectionCache()
    factory = CountingFactory()
    first = ExasolDialect(make_config(), connection_cache=cache, connection_factory=factory)
    second = ExasolDialect(make_config(), connection_cache=cache, connection_factory=factory)
    other = ExasolDialect(
        make_config(user="etl"), connection_cache=cache, connection_factory=factory
    )

    assert first.get_connection() is second.get_connection()
    assert other.get_connection() is not first.get_connection()
    assert factory.calls == 2


def test_dialects_with_separate_caches_are_independent():
    factory = CountingFactory()
    first = ExasolDialect(make_config(), connection_cache=ConnectionCache(), connection_factory=factory)
    second = ExasolDialect(make_config(), connection_cache=ConnectionCache(), connection_factory=factory)
    assert first.get_connection() is not second.get_connection()


@pytest.fixture
def default_cache(monkeypatch):
    cache = ConnectionCache()
    monkeypatch.setattr("exadialect.dialects.exasol.DEFAULT_CONNECTION_CACHE", cache)
    return cache


def test_registry_built_dialects_share_the_default_cache(default_cache):
    factory = CountingFactory()
    config = make_config()
    first = find_dialect_for(config, connection_factory=factory)
    second = find_dialect_for(make_config(), connection_factory=factory)

    assert first.get_connection() is second.get_connection()
    assert factory.calls == 1
    assert config.credential_key() in default_cache


def test_default_cache_still_separates_credentials(default_cache):
    factory = CountingFactory()
    first = ExasolDialect(make_config(), connection_factory=factory)
    other = ExasolDialect(make_config(password="changed"), connection_factory=factory)

    assert first.get_connection() is not other.get_connection()
    assert factory.calls == 2
    assert len(default_cache) == 2


def test_close_keeps_cached_connections_open():
    cache = ConnectionCache()
    factory = CountingFactory()
    dialect = ExasolDialect(make_config(), connection_cache=cache, connection_factory=factory)
    connection = dialect.get_connection()

    dialect.close()
    dialect.close()

    assert connection.closed is False
    assert dialect.get_connection() is connection
    replacement = ExasolDialect(make_config(), connection_cache=cache, connection_factory=factory)
    assert replacement.get_connection() is connection
    assert factory.calls == 1


def test_concurrent_dialects_converge_on_one_connection():
    cache = ConnectionCache()
    factory = CountingFactory()
    workers = 8
    barrier = threading.Barrier(workers)
    results: list = []
    lock = threading.Lock()

    def task() -> None:
        dialect = ExasolDialect(make_config(), connection_cache=cache, connection_factory=factory)
        barrier.wait()
        connection = dialect.get_connection()
        with lock:
            results.append(connection)

    threads = [threading.Thread(target=task) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert factory.calls == 1
    assert len(results) == workers
    assert all(result is results[0] for result in results)
