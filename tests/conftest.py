import os
import sys
import pytest

# Ensure the project root (containing `config` and `quizline`) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from quizline import create_app, db, socketio
from quizline.errors import NotFoundError, StoreError
from quizline.models import QuizRecord


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    QUIZ_NAMESPACE = '/quiz'
    QUIZ_PROMPT = 'quiz > '
    QUIZ_AUTHORS = ['Tester One', 'Tester Two']
    ALLOWED_ORIGINS = ['http://localhost:5173']
    LOG_LEVEL = 'DEBUG'


class RecordingServer:
    def __init__(self):
        self.disconnected = []

    def disconnect(self, sid, namespace=None):
        self.disconnected.append((sid, namespace))


class RecordingSocketIO:
    """Stands in for the Socket.IO server; keeps every emitted event."""

    def __init__(self):
        self.events = []
        self.server = RecordingServer()

    def emit(self, event, payload, to=None, namespace=None):
        self.events.append((event, payload))

    @property
    def lines(self):
        return [p['line'] for e, p in self.events if e == 'output']

    @property
    def prompts(self):
        return [p['text'] for e, p in self.events if e == 'prompt']

    def ready_count(self, prompt='quiz > '):
        return self.prompts.count(prompt)

    def clear(self):
        self.events.clear()


class FakeStore:
    """In-memory quiz store for engine tests."""

    def __init__(self, quizzes=(), fail=False):
        self.records = [QuizRecord(id=i, question=q, answer=a) for i, (q, a) in enumerate(quizzes, start=1)]
        self.fail = fail
        self.fetches = 0

    def fetch_all(self):
        self.fetches += 1
        if self.fail:
            raise StoreError('database is locked')
        return list(self.records)

    def get(self, quiz_id):
        for record in self.records:
            if record.id == quiz_id:
                return record
        raise NotFoundError(f'There is no quiz with id={quiz_id}.')


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import quizline.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/quiz'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/quiz')
    except Exception:
        pass


@pytest.fixture()
def recorder():
    return RecordingSocketIO()


@pytest.fixture()
def line_session(recorder):
    from quizline.session import LineSession
    return LineSession('sid-1', namespace='/quiz', prompt='quiz > ', sio=recorder)
