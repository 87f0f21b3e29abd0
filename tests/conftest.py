"""Pytest configuration and shared fixtures."""
import pytest


@pytest.fixture
def session():
    """Fresh calculator session."""
    from session import CalculatorSession
    return CalculatorSession()


@pytest.fixture
def client():
    """TestClient over a freshly built API app."""
    from fastapi.testclient import TestClient
    from server import create_app
    return TestClient(create_app())


@pytest.fixture
def type_keys():
    """Feed a string into a session one key at a time."""
    def _type(session, keys):
        for ch in keys:
            session.insert_text(ch)
        return session
    return _type


@pytest.fixture
def well_formed_expressions():
    """Expressions paired with their conventional values."""
    return {
        "1+2": 3.0,
        "2+3*4": 14.0,
        "(2+3)*4": 20.0,
        "12*(3+4)": 84.0,
        "10-4-3": 3.0,
        "100/10/5": 2.0,
        "2*3%4": 2.0,
        "7%3": 1.0,
        "1.5+2.25": 3.75,
        "((1+2)*(3+4))/7": 3.0,
        "8/(3-1)*2": 8.0,
    }
