import pytest

from api import SessionStore, create_app
from calculator import CalculatorEngine
from input_handler import handle_key


@pytest.fixture
def engine():
    return CalculatorEngine()


@pytest.fixture
def press(engine):
    """Feed a sequence of keys to the engine, return the display"""
    def _press(*keys):
        for key in keys:
            assert handle_key(engine, key), f"unmapped key {key!r}"
        return engine.display_text
    return _press


@pytest.fixture
def client():
    app = create_app(SessionStore(max_sessions=4))
    app.config['TESTING'] = True
    return app.test_client()
