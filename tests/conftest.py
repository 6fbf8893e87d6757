"""
Shared pytest fixtures.

Key design decisions:
- TestConfig class pinned to harmless values (no real fastfetch needed).
- Each test gets its own app and ResultCache, wired to a fake probe and a
  fake clock so freshness and expiry can be driven without sleeping.
"""
import pytest

from fakes import FakeClock, FakeProbe, TestConfig


@pytest.fixture()
def fake_probe():
    return FakeProbe()


@pytest.fixture()
def fake_clock():
    return FakeClock()


@pytest.fixture()
def probe_cache(fake_probe, fake_clock):
    from fastfetch_web.services.cache import ResultCache
    return ResultCache(fake_probe, ttl=60, clock=fake_clock)


@pytest.fixture()
def app(probe_cache):
    from fastfetch_web import create_app
    flask_app = create_app(config_class=TestConfig, probe_cache=probe_cache)
    flask_app.config['TESTING'] = True
    return flask_app


@pytest.fixture()
def client(app):
    """Flask test client."""
    return app.test_client()
