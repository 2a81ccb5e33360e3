"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from tasktracker.app import create_app  # noqa: E402
from tasktracker.tasks.store import TaskStore  # noqa: E402


@pytest.fixture
def store():
    """A fresh, empty task store"""
    return TaskStore()


@pytest.fixture
def app(store):
    """Application wired to the test's store"""
    return create_app(store=store)


@pytest.fixture
def client(app):
    """Create a test client"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_task():
    return {
        "id": "1",
        "description": "Write tests",
        "note": "",
        "applications": ["editor"],
    }
