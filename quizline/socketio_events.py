from flask import current_app, request
from flask_socketio import emit
from typing import Dict

from quizline import socketio
from quizline.services.quizzes.store import QuizStore
from quizline.session import LineSession

_sessions: Dict[str, LineSession] = {}
_store = QuizStore()


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def handle_connect(auth=None):
    sid = _get_sid()
    session = LineSession(
        sid,
        namespace=request.namespace,
        prompt=current_app.config.get('QUIZ_PROMPT', 'quiz > '),
    )
    _sessions[sid] = session
    current_app.logger.info(f"[connect] sid={sid} sessions={len(_sessions)}")
    session.write_line('Welcome to the quiz server. Type help for the list of commands.')
    session.ready()


def handle_disconnect(reason=None):
    # A question left waiting for an answer is abandoned with its score
    session = _sessions.pop(_get_sid(), None)
    if not session:
        return
    current_app.logger.info(f"[disconnect] sid={session.sid} reason={reason} busy={session.busy}")
    session.abort()


def handle_line(data):
    session = _sessions.get(_get_sid())
    if session is None:
        emit('error', {'message': 'Session not found; reconnect'})
        return
    line = data.get('line') if isinstance(data, dict) else data
    if not isinstance(line, str):
        emit('error', {'message': 'line is required'})
        return
    session.handle(line, _store)


def register_socketio_handlers(namespace: str = '/quiz') -> None:
    """Register the quiz session handlers on ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('line', handle_line, namespace=namespace)
