import inspect
import logging
import threading
from typing import Optional

from quizline import socketio
from quizline.commands import dispatch
from quizline.errors import QuizError, QuizValidationError, TransportError

logger = logging.getLogger(__name__)


class LineSession:
    """Line-oriented text session for one Socket.IO connection.

    Commands are called with the session as first argument. A command that
    needs input is a generator: it suspends at each prompt and ``handle``
    resumes it with the next line the client sends. When a command ends,
    whichever way, the ready prompt is sent once, unless the connection is
    gone.
    """

    def __init__(self, sid: str, namespace: str = '/quiz', prompt: str = 'quiz > ', sio=None):
        self.sid = sid
        self.namespace = namespace
        self.prompt = prompt
        self.closed = False
        self._sio = sio or socketio
        self._command = None
        self._lock = threading.RLock()

    @property
    def busy(self) -> bool:
        return self._command is not None

    # ---- transport ----

    def write_line(self, text: str, level: str = 'info') -> None:
        if self.closed:
            raise TransportError(f'Session {self.sid} is closed')
        self._emit('output', {'line': text, 'level': level})

    def error_line(self, text: str) -> None:
        self.write_line(f'Error: {text}', level='error')

    def write_prompt(self, text: str, default: Optional[str] = None) -> None:
        if self.closed:
            raise TransportError(f'Session {self.sid} is closed')
        self._emit('prompt', {'text': text, 'default': default})

    def ready(self) -> None:
        self.write_prompt(self.prompt)

    def close(self) -> None:
        """Close the connection from the server side."""
        with self._lock:
            if self.closed:
                return
            self.closed = True
            logger.info(f"[close] sid={self.sid}")
            self._sio.server.disconnect(self.sid, namespace=self.namespace)

    def abort(self) -> None:
        """Drop the session after the client went away.

        A command waiting for input gets a TransportError at its prompt and
        nothing more is written.
        """
        with self._lock:
            self.closed = True
            command, self._command = self._command, None
            if command is None:
                return
            try:
                command.throw(TransportError(f'Session {self.sid} disconnected'))
            except (StopIteration, TransportError):
                pass
            finally:
                command.close()
            logger.info(f"[abort] sid={self.sid} pending command dropped")

    # ---- command driving ----

    def handle(self, line: str, store) -> None:
        """Answer the waiting command with ``line`` or start the command it names."""
        with self._lock:
            if self._command is not None:
                self._resume(line)
            else:
                dispatch(self, store, line)

    def run(self, handler, *args) -> bool:
        """Start ``handler``; returns False when another command still waits for input."""
        with self._lock:
            if self._command is not None:
                logger.warning(f"[run-refused] sid={self.sid} command already waiting for input")
                return False
            try:
                result = handler(self, *args)
            except Exception as exc:
                self._fail(exc)
                return True
            if inspect.isgenerator(result):
                self._command = result
                self._resume(None)
            else:
                self._finish()
            return True

    def feed(self, line: str) -> bool:
        """Hand ``line`` to the command waiting for input, if there is one."""
        with self._lock:
            if self._command is None:
                return False
            self._resume(line)
            return True

    def _resume(self, line: Optional[str]) -> None:
        try:
            self._command.send(line)
        except StopIteration:
            self._finish()
        except Exception as exc:
            self._fail(exc)

    def _finish(self) -> None:
        self._command = None
        if not self.closed:
            self.ready()

    def _fail(self, exc: Exception) -> None:
        self._command = None
        if isinstance(exc, TransportError) or self.closed:
            logger.info(f"[transport] sid={self.sid} {exc}")
            return
        if isinstance(exc, QuizValidationError):
            self.error_line('The quiz is invalid:')
            for message in exc.messages:
                self.error_line(message)
        elif isinstance(exc, QuizError):
            self.error_line(str(exc))
        else:
            logger.exception(f"[command-error] sid={self.sid}")
            self.error_line('Unexpected server error.')
        self._finish()

    def _emit(self, event: str, payload: dict) -> None:
        self._sio.emit(event, payload, to=self.sid, namespace=self.namespace)
