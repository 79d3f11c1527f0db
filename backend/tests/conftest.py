# backend/tests/conftest.py

import datetime as dt
import os
import tempfile

# Logs isolés : doit précéder tout import de progress_dashboard (settings chargés à l'import)
os.environ.setdefault("DASHBOARD_LOGS_DIR", tempfile.mkdtemp(prefix="dashboard-logs-"))

import pytest

from progress_dashboard.models.challenge import Challenge

# -----------------------
# Self-contained fixtures
# -----------------------

@pytest.fixture
def make_challenge():
    """Fabrique de challenges avec valeurs par défaut surchargeables."""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        data = {
            "id": f"c{counter['n']}",
            "title": f"Challenge {counter['n']}",
            "description": "",
            "category": "Fitness",
            "difficulty": "medium",
            "priority": "medium",
            "status": "active",
            "tags": [],
            "start_date": dt.date(2025, 1, 1),
            "total_days": 10,
            "excel_file": "challenge.xlsx",
        }
        data.update(overrides)
        return Challenge(**data)

    return _make

@pytest.fixture
def run_and_swim(make_challenge):
    """Les deux challenges du scénario de référence : A (active) et B (completed)."""
    a = make_challenge(id="A", status="active", title="Run", start_date=dt.date(2025, 1, 1), total_days=10)
    b = make_challenge(id="B", status="completed", title="Swim", start_date=dt.date(2025, 1, 5), total_days=5)
    return a, b

@pytest.fixture
def reference_now():
    """Instant de référence fixe (jamais l'horloge murale)."""
    return dt.date(2025, 1, 4)
