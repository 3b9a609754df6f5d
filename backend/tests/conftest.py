import os
import sys
import pytest

# Ensure the backend root (containing the `scoreledger` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from scoreledger import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LEDGER_IDENTITY = 'test-ledger'
    ORACLE_SECRET = 'test-oracle-secret'
    PROOF_MAX_AGE_SEC = 300
    ENABLE_MOCK_ORACLE_API = True
    GRANT_PRUNE_INTERVAL_SEC = 0


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import scoreledger.models  # noqa: F401
        db.create_all()
    # Requests push their own app context, so the login state in `g`
    # does not carry over between test clients
    yield application
    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def app_ctx(flask_app):
    """App context for calling ledger services directly."""
    with flask_app.app_context():
        yield flask_app
        db.session.remove()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def oracle(flask_app):
    return flask_app.extensions['crypto_oracle']


@pytest.fixture()
def ledger(flask_app):
    return flask_app.config['LEDGER_IDENTITY']


@pytest.fixture()
def encrypt(oracle, ledger):
    """Encrypt a score for a player the way their client would."""
    def _encrypt(player, value):
        return oracle.encrypt_input(ledger, player, value)
    return _encrypt


@pytest.fixture()
def decrypt(oracle):
    """Decrypt a handle through the authorized channel."""
    from scoreledger.services.ledger import is_authorized

    def _decrypt(player, handle):
        return oracle.decrypt_for(player, handle, is_authorized)
    return _decrypt


def _register_and_login(test_client, username, password='password'):
    test_client.post('/users/add', json={'username': username, 'password': password})
    res = test_client.post('/login', json={'username': username, 'password': password})
    assert res.status_code == 200
    return test_client


@pytest.fixture()
def alice_client(flask_app):
    return _register_and_login(flask_app.test_client(), 'alice')


@pytest.fixture()
def bob_client(flask_app):
    return _register_and_login(flask_app.test_client(), 'bob')


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


def _socket_for(flask_app, http_client):
    return socketio.test_client(flask_app, flask_test_client=http_client, namespace='/ws')


@pytest.fixture()
def alice_socket(flask_app, alice_client):
    test_client = _socket_for(flask_app, alice_client)
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass


@pytest.fixture()
def bob_socket(flask_app, bob_client):
    test_client = _socket_for(flask_app, bob_client)
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
