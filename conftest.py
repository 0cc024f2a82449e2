"""
Global pytest configuration and fixtures.
"""
import datetime as dt
import os
from typing import Any, Dict, List

import pytest

from truckflow.config import TruckflowConfig, reload_config


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        'ENVIRONMENT': 'testing',
        'DEBUG': 'true',
        'LOG_LEVEL': 'DEBUG',
        'DEFAULT_INPUT_FILE': 'loads-export.json',
        'DEFAULT_OUTPUT_FILE': 'loads-import.json',
        'EARNING_PROFILE': 'solo_per_mile',
        'RATE_PER_MILE': '0.6',
        'PERCENTAGE_RATE': '0',
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)

    # Clear the global config to force reload with test values
    import truckflow.config.settings
    truckflow.config.settings._config = None

    yield test_env_vars

    # Clean up
    truckflow.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> TruckflowConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def today() -> dt.date:
    """Fixed reference date (a Wednesday) for period calculations."""
    return dt.date(2025, 6, 18)


@pytest.fixture
def sample_raw_loads() -> List[Dict[str, Any]]:
    """Exported load records in the old export format."""
    return [
        {
            'loadId': 'L1',
            'broker': 'TQL',
            'origin': 'Rittmann, oh',
            'destination': 'Bolingbrook IL',
            'puDate': '2025-05-01',
            'doDate': '2025-05-02',
            'miles': 300,
            'deadhead': 25,
            'amount': 900,
            'notes': 'Drop and hook',
        },
        {
            'loadId': 'L2',
            'broker': 'Coyote',
            'origin': 'Arrey, NM 87930',
            'destination': 'St. George, UT, 84790',
            'puDate': '2025-05-03',
            'doDate': '2025-05-05',
            'miles': 812.5,
            'amount': 2100.75,
        },
        {
            'loadId': 'L3',
            'origin': 'Somewhereville',
            'destination': 'WINDSOR , CO',
        },
    ]


@pytest.fixture
def sample_loads() -> List[Dict[str, Any]]:
    """Stored load records as returned by the document store."""
    return [
        {
            'id': 'a1',
            'broker_name': 'TQL',
            'pickup_date': '2025-06-16',
            'loaded_miles': 500,
            'deadhead_miles': 50,
            'gross_amount': 1500,
            'status': 'Delivered',
        },
        {
            'id': 'a2',
            'broker_name': 'Coyote',
            'pickup_date': '2025-06-02',
            'loaded_miles': 1000,
            'deadhead_miles': 150,
            'gross_amount': 2500,
            'status': 'Delivered',
        },
        {
            'id': 'a3',
            'broker_name': 'TQL',
            'pickup_date': '2025-05-20',
            'loaded_miles': 300,
            'deadhead_miles': 0,
            'gross_amount': 1200,
            'status': 'Pending',
        },
        {
            'id': 'a4',
            'pickup_date': '2024-12-30',
            'loaded_miles': 200,
            'gross_amount': 800,
        },
    ]


@pytest.fixture
def sample_expenses() -> List[Dict[str, Any]]:
    """Stored expense records."""
    return [
        {'id': 'e1', 'category': 'fuel', 'amount': 400, 'date': '2025-06-17'},
        {'id': 'e2', 'category': 'toll', 'amount': 35.5, 'date': '2025-06-03'},
        {'id': 'e3', 'category': 'fuel', 'amount': 250, 'date': '2025-05-10'},
        {'id': 'e4', 'category': 'insurance', 'amount': 1000, 'date': '2024-11-01'},
    ]


@pytest.fixture(autouse=True)
def cleanup_test_files():
    """Clean up any test files created during testing."""
    yield

    # Remove test coverage files in case they're created
    test_files = ['coverage.xml', '.coverage']
    for file in test_files:
        if os.path.exists(file):
            os.remove(file)


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "cli: mark test as exercising a CLI command"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "tests/unit/cli/" in str(item.fspath):
            item.add_marker(pytest.mark.cli)
