"""
Pytest configuration and shared fixtures for the payoff engine tests.
"""

from typing import List

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def spots() -> List[float]:
    """Whole-number spot prices from 50 to 150."""
    return [float(s) for s in range(50, 151)]


@pytest.fixture
def client() -> TestClient:
    """Test client over the full application."""
    from strategy_payoff.main import create_app

    return TestClient(create_app())
