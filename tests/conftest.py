"""
Test configuration and fixtures for ChromaSort tests.
"""
import pytest
from fastapi.testclient import TestClient

from chromasort.services.colors.color import Color

# Import the main app
from main import app


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def primaries():
    """Red, green, blue, black and white."""
    return {
        "red": Color(255, 0, 0),
        "green": Color(0, 255, 0),
        "blue": Color(0, 0, 255),
        "black": Color(0, 0, 0),
        "white": Color(255, 255, 255),
    }


@pytest.fixture
def sample_colors():
    """A coarse walk through the RGB cube with distinct RGB values."""
    values = [0, 51, 128, 204, 255]
    return [Color(r, g, b) for r in values for g in reversed(values) for b in values[::2]]
