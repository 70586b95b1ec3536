"""Pytest config to ensure project root is on sys.path during test collection.

Running pytest from another working directory can otherwise fail with
"No module named 'service_tracker'". The fixtures below give each test its
own tracker and application so counts never leak between tests.
"""
import os
import sys

import pytest

_HERE = os.path.dirname(__file__)
_ROOT = os.path.abspath(os.path.join(_HERE, ".."))  # service_tracker/
PROJECT_ROOT = os.path.abspath(os.path.join(_ROOT, ".."))  # repo root

# Insert project root at front of sys.path if not already present
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture
def tracker():
    from service_tracker.tracker import ServiceTracker

    return ServiceTracker()


@pytest.fixture
def client(tracker):
    from fastapi.testclient import TestClient
    from service_tracker.api.main import create_app

    with TestClient(create_app(tracker=tracker)) as c:
        yield c
