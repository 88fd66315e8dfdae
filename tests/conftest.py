"""
Test configuration: repo root on sys.path and demo-data fixtures.

Every fixture works on the in-memory demo backend; nothing here touches the network.
"""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add repo root to sys.path so tests can import export_tracker.*
REPO_ROOT = Path(__file__).parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from export_tracker.core.backends import DemoBackend
from export_tracker.core.database import Database
from export_tracker.core.demo_data import build_demo_data

# Fixed reference day for date-dependent calculations
REFERENCE_DAY = date(2025, 6, 15)


@pytest.fixture
def today():
    return REFERENCE_DAY


@pytest.fixture
def demo_tables(today):
    return build_demo_data(today)


@pytest.fixture
def db(demo_tables):
    """Database over a fresh demo backend."""
    return Database(DemoBackend(demo_tables))


@pytest.fixture
def api_db(monkeypatch):
    """
    Demo database installed as the process-wide instance.

    Built relative to the real current day, since the routes evaluate
    overdue days and LC alerts against date.today().
    """
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)

    from export_tracker.core import database as database_module

    instance = Database(DemoBackend(build_demo_data(date.today())))
    monkeypatch.setattr(database_module, "_db_instance", instance)
    return instance


@pytest.fixture
def client(api_db):
    """FastAPI TestClient wired to the demo database."""
    from fastapi.testclient import TestClient
    from export_tracker.main import app

    with TestClient(app) as test_client:
        yield test_client
