import os
import sys
import pytest

# Ensure the backend root (containing the `arcade` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from arcade import create_app
from arcade.services.anticheat import ChecksumEngine, ValidationRules, start_session


TEST_SECRET = 'test-secret'
START = 1_700_000_000_000


class TestConfig:
    TESTING = True
    GAME_SECRET_KEY = TEST_SECRET
    MIN_ACTION_INTERVAL_MS = 50
    MAX_SESSION_DURATION_MS = 30 * 60 * 1000
    MIN_AVERAGE_ACTION_INTERVAL_MS = 80
    SCORING_ACTIONS = 'tap'
    CORS_ORIGINS = 'http://localhost:3000'
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def engine():
    return ChecksumEngine(TEST_SECRET)


@pytest.fixture()
def rules():
    return ValidationRules()


@pytest.fixture()
def session(engine):
    """A freshly started football-tap session at START."""
    return start_session('football-tap', engine, now=START)
