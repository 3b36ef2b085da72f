"""Interactive quiz session engine.

A play session snapshots every stored quiz, then keeps asking a randomly
drawn quiz that has not been answered yet. A correct answer scores a point
and removes the quiz from the working set; the first wrong answer ends the
session. When nothing is left to ask the session ends with the full score.

``play`` is a generator: each question suspends it until the session
transport resumes it with the client's next line.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Generator, List

from quizline.errors import QuizError, TransportError
from quizline.models import QuizRecord
from .prompt import make_question
from .validation import validate_id

logger = logging.getLogger(__name__)


class PlayState(Enum):
    ASKING = 'asking'
    CORRECT = 'correct'
    INCORRECT = 'incorrect'
    EXHAUSTED = 'exhausted'
    ABORTED = 'aborted'


@dataclass
class PlaySession:
    """State of one play invocation; never shared between connections."""
    remaining: List[QuizRecord]
    score: int = 0
    state: PlayState = PlayState.ASKING
    asked: List[int] = field(default_factory=list)

    @property
    def finished(self) -> bool:
        return self.state in (PlayState.INCORRECT, PlayState.EXHAUSTED, PlayState.ABORTED)


def is_correct(answer: str, expected: str) -> bool:
    """Case-insensitive comparison of an already trimmed answer."""
    return answer.lower() == expected.lower()


def draw_index(session: PlaySession, rng) -> int:
    index = validate_id(rng.randrange(len(session.remaining)), name='index')
    if not 0 <= index < len(session.remaining):
        raise QuizError(f'Drawn question index {index} is out of range.')
    return index


def play(transport, store, rng=None) -> Generator[None, str, PlaySession]:
    rng = rng or random
    session = PlaySession(remaining=list(store.fetch_all()))
    logger.info(f"[play-start] questions={len(session.remaining)}")

    while True:
        if not session.remaining:
            session.state = PlayState.EXHAUSTED
            transport.write_line(' Nothing left to ask.')
            transport.write_line(f' End of quiz. Score: {session.score}')
            break

        index = draw_index(session, rng)
        quiz = session.remaining[index]
        session.state = PlayState.ASKING
        session.asked.append(quiz.id)
        try:
            answer = yield from make_question(transport, f' {quiz.question}? ')
        except TransportError:
            session.state = PlayState.ABORTED
            logger.info(f"[play-abort] score={session.score}")
            raise

        if not is_correct(answer, quiz.answer):
            session.state = PlayState.INCORRECT
            transport.write_line(' INCORRECT.')
            transport.write_line(f' End of quiz. Score: {session.score}')
            break

        session.score += 1
        del session.remaining[index]
        session.state = PlayState.CORRECT
        transport.write_line(f' CORRECT - {session.score} correct so far.')

    logger.info(f"[play-end] state={session.state.value} score={session.score}")
    return session
