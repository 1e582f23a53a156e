"""Shared fixtures: a stub contest server running in a subprocess"""

import time
import multiprocessing

import pytest
import requests

from icfp.server import app

STUB_PORT = 5556


def _run_server():
    app.run(host="127.0.0.1", port=STUB_PORT, debug=False, use_reloader=False)


@pytest.fixture(scope="session")
def server_url():
    """Start stub server and return its base URL"""
    # fork so the child inherits the imported app
    proc = multiprocessing.get_context("fork").Process(target=_run_server, daemon=True)
    proc.start()

    url = f"http://127.0.0.1:{STUB_PORT}"

    # Wait for server to start
    for _ in range(20):
        try:
            requests.get(f"{url}/health", timeout=1)
            break
        except requests.exceptions.RequestException:
            time.sleep(0.5)

    yield url

    # Cleanup
    proc.terminate()
    proc.join(timeout=5)
