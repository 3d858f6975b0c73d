import os
import sys
import pytest

# Ensure the backend root (containing the `scoreboard` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from scoreboard import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    REMEMBER_COOKIE_NAME = 'user_id'
    DEFAULT_GAME_NAME = 'Main'
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    # No app context stays pushed: each request and socket event gets its own,
    # so Flask-Login's per-context user cache never leaks between clients.
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import scoreboard.models  # noqa: F401
        db.create_all()
    yield application
    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def app_ctx(flask_app):
    """An app context for tests that talk to the relay or DB directly."""
    with flask_app.app_context():
        yield flask_app
        db.session.remove()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_factory(flask_app):
    """Open Socket.IO test clients on /ws; all are disconnected on teardown."""
    opened = []

    def _open(flask_test_client=None):
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_test_client,
            namespace='/ws'
        )
        opened.append(test_client)
        return test_client

    yield _open
    for test_client in opened:
        try:
            if test_client.is_connected('/ws'):
                test_client.disconnect(namespace='/ws')
        except Exception:
            pass


@pytest.fixture()
def sio_client(sio_factory, client):
    return sio_factory(flask_test_client=client)


@pytest.fixture()
def relay(flask_app):
    return flask_app.extensions['score_relay']


@pytest.fixture()
def file_app(tmp_path):
    """App backed by an on-disk SQLite file, for multi-threaded tests and migrations."""
    config = type('FileDbConfig', (TestConfig,), {
        'SQLALCHEMY_DATABASE_URI': f"sqlite:///{tmp_path / 'scoreboard.db'}",
    })
    application = create_app(config)
    yield application
    with application.app_context():
        db.session.remove()
        db.engine.dispose()
