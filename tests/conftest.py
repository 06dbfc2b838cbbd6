import os
import sys
import pytest

# Ensure the project root (containing the `senas` package and config.py) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from senas import create_app, db, socketio

JWT_SECRET = 'test-jwt-secret'


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    GUEST_SESSION_JWT_SECRET = JWT_SECRET
    GUEST_SESSION_COOKIE = 'guest_session_token'
    GUEST_SESSION_TTL_SEC = 3600
    AVATAR_COUNT = 10
    AVATAR_SEED = 1234
    LEADERBOARD_SIZE = 10


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        import senas.models  # noqa: F401
        db.create_all()
    # Requests push their own app context, so Flask-Login's per-request
    # user cache does not leak between calls.
    yield application
    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


def start_session(test_client, username):
    res = test_client.post('/api/start-guest-session', json={'username': username})
    assert res.status_code == 200
    return res


@pytest.fixture()
def guest_client(flask_app):
    """A test client holding a fresh guest session for 'ana'."""
    test_client = flask_app.test_client()
    start_session(test_client, 'ana')
    return test_client


@pytest.fixture()
def other_guest_client(flask_app):
    test_client = flask_app.test_client()
    start_session(test_client, 'beto')
    return test_client


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
