"""
Test configuration and fixtures for PaletteEngine tests.
"""
import pytest
from fastapi.testclient import TestClient

from app.services.colors import Rgb
from app.utils.metrics import reset_metrics
from main import app


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def clean_metrics():
    """Reset metrics before each test."""
    reset_metrics()


@pytest.fixture
def red() -> Rgb:
    return Rgb(255, 0, 0)


@pytest.fixture
def blue() -> Rgb:
    return Rgb(0, 0, 255)
