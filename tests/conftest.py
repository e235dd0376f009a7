import pytest
from fastapi.testclient import TestClient

from ammoniaguard.main import app


@pytest.fixture
def client():
    """Test client fixture"""
    return TestClient(app)


@pytest.fixture
def safe_request():
    return {"temperature": 28, "ph": 7.5, "conductivity": 1200}


@pytest.fixture
def critical_request():
    return {"temperature": 38, "ph": 9.5, "conductivity": 2900}
