"""
Fixtures for tests against a live ledger backend.

Point BACKEND_URL at a running API (backed by a real MongoDB) and run
`pytest -m integration`. Without a reachable backend the tests skip.
"""
import os
import time

import httpx
import pytest

REQUEST_TIMEOUT = 30


@pytest.fixture
def backend_url():
    """Base URL of the backend under test; skips if it doesn't answer /health."""
    url = os.getenv("BACKEND_URL", "http://localhost:8000")
    try:
        httpx.get(f"{url}/health", timeout=5)
    except httpx.TransportError:
        pytest.skip(f"Backend not reachable at {url}")
    return url


@pytest.fixture
def backend(backend_url):
    """An httpx client bound to the live backend."""
    with httpx.Client(base_url=backend_url, timeout=REQUEST_TIMEOUT) as client:
        yield client


@pytest.fixture
def item_name():
    """An item name no earlier run has used, so listings can be filtered."""
    return f"integration_ring_{time.time_ns()}"
