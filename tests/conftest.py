# -*- coding: utf-8 -*-
"""
Shared fixtures for the listing wizard tests.
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Run Qt without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from app.config import Config  # noqa: E402
from repositories.database import Database  # noqa: E402


@pytest.fixture
def fast_timings(monkeypatch):
    """Shorten auto-advance and completion delays."""
    monkeypatch.setattr(Config, "SELECT_ADVANCE_DELAY_MS", 20)
    monkeypatch.setattr(Config, "CHOICE_ADVANCE_DELAY_MS", 30)
    monkeypatch.setattr(Config, "ADDRESS_ADVANCE_DELAY_MS", 50)
    monkeypatch.setattr(Config, "COMPLETION_DELAY_MS", 50)


@pytest.fixture
def dev_mode(monkeypatch):
    """Enable dev mode so configuration errors raise."""
    monkeypatch.setattr(Config, "DEV_MODE", True)


@pytest.fixture
def prod_mode(monkeypatch):
    """Disable dev mode so configuration errors are logged and skipped."""
    monkeypatch.setattr(Config, "DEV_MODE", False)


@pytest.fixture
def test_db(tmp_path):
    """Create test database instance."""
    db = Database(db_path=tmp_path / "test_drafts.db")
    db.initialize()
    yield db
    db.close()


@pytest.fixture
def full_address():
    return {
        "fullAddress": "123 Main St, Austin, TX 78701",
        "street": "123 Main St",
        "city": "Austin",
        "state": "TX",
        "zipCode": "78701",
    }
