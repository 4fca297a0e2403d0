"""
Pytest configuration and shared fixtures for irrigation planner tests.
"""

import os
import sys
import tempfile
import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before importing app
os.environ.setdefault("FLASK_SECRET_KEY", "test-secret-key")
os.environ.setdefault("PLANNER_DB", os.path.join(tempfile.gettempdir(), "irrigation_planner_test.db"))
os.environ.setdefault("DEFAULT_ET0_MM", "5.0")


@pytest.fixture
def crop_table():
    from crop_database import get_crop_table
    return get_crop_table()


@pytest.fixture
def soil_by_id():
    from soil_database import get_soil_by_id
    return get_soil_by_id


@pytest.fixture
def scenario_a():
    """Manual Kc 1.0, manual ET0 0.2 in/day, 1 acre, 10 GPM drip."""
    from runtime_calculator import CalculatorInputs
    return CalculatorInputs(
        crop='Almonds',
        kc_value=1.0,
        et_source='manual',
        manual_et=0.2,
        zone_flow_gpm=10,
        area=1,
        area_unit='acres',
        system_type='drip',
    )


@pytest.fixture
def profile_store(tmp_path):
    from profile_store import SqliteProfileStore
    store = SqliteProfileStore(str(tmp_path / "profiles.db"))
    store.init_tables()
    return store


@pytest.fixture
def app_client(profile_store):
    """Flask test client backed by a temporary profile database."""
    from app import app as _app
    _app.config['TESTING'] = True
    _app.config['PROFILE_STORE'] = profile_store
    with _app.test_client() as client:
        with client.session_transaction() as sess:
            sess['user_id'] = 1
        yield client
