"""
Pytest configuration and fixtures
"""
from datetime import date

import pytest
from fastapi.testclient import TestClient

from salesgoals.core.config import Settings
from salesgoals.core.deps import get_settings
from salesgoals.main import app
from salesgoals.models.goal import RecordedResult
from salesgoals.models.holiday import Holiday
from salesgoals.services.calendar_service import expand_period


@pytest.fixture(scope="function")
def client():
    """Test client; dependency overrides are cleared after each test"""
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def override_settings():
    """Swap the settings seen by the API for the duration of a test"""
    def _override(**values):
        test_settings = Settings(**values)
        app.dependency_overrides[get_settings] = lambda: test_settings
        return test_settings
    return _override


@pytest.fixture
def first_week_2024():
    """2024-01-01 (Mon) .. 2024-01-07 (Sun), no holidays: weights 1,1,1,1,1,0.5,0"""
    return expand_period(date(2024, 1, 1), date(2024, 1, 7))


@pytest.fixture
def first_week_with_holiday():
    """Same week with Wednesday 2024-01-03 as an unworked holiday"""
    holidays = [Holiday(date=date(2024, 1, 3), name="Store closed", is_worked=False)]
    return expand_period(date(2024, 1, 1), date(2024, 1, 7), holidays)


@pytest.fixture
def result():
    """Factory for a recorded result on a day of January 2024"""
    def _result(day: int, amount, transaction_count=None) -> RecordedResult:
        return RecordedResult(date=date(2024, 1, day), amount=amount, transaction_count=transaction_count)
    return _result


@pytest.fixture
def period_payload():
    """Factory for the JSON body of period-based endpoints"""
    def _payload(start="2024-01-01", end="2024-01-07", holidays=None, **extra):
        payload = {"start_date": start, "end_date": end, "holidays": holidays or []}
        payload.update(extra)
        return payload
    return _payload
