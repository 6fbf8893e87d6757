"""
Live-server conftest for E2E tests.

Starts a threaded Flask server on a random port in a background thread,
backed by a fake probe, and leaves it running for the session.

Usage:
    pytest -m e2e --headed   # see the browser
    pytest -m e2e            # headless (CI default)
"""
import socket
import threading
import time

import pytest

from fakes import FakeProbe, TestConfig


@pytest.fixture(scope='session')
def live_probe():
    return FakeProbe(output=(
        '\x1b[1;31mroot\x1b[0m@\x1b[1;31mhost\x1b[0m\n'
        '\x1b[34mOS:\x1b[0m Debian GNU/Linux 12\n'
        '\x1b[93mShell:\x1b[0m bash <5.2>\n'
    ))


@pytest.fixture(scope='session')
def base_url(live_probe):
    """Session-scoped live server; returns its base URL."""
    from fastfetch_web import create_app
    from fastfetch_web.services.cache import ResultCache

    flask_app = create_app(
        config_class=TestConfig,
        probe_cache=ResultCache(live_probe, ttl=60),
    )

    sock = socket.socket()
    sock.bind(('127.0.0.1', 0))
    port = sock.getsockname()[1]
    sock.close()

    server_thread = threading.Thread(
        target=lambda: flask_app.run(
            host='127.0.0.1', port=port, use_reloader=False, threaded=True,
        ),
        daemon=True,
    )
    server_thread.start()
    time.sleep(0.5)  # give server time to start

    return f'http://127.0.0.1:{port}'
