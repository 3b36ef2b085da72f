import random

import pytest

from conftest import FakeStore
from quizline.errors import TransportError
from quizline.services.quizzes.play import PlayState, is_correct, play


class FirstPick:
    """Always draws the first remaining quiz."""

    def randrange(self, stop):
        return 0


class PastTheEnd:
    def randrange(self, stop):
        return stop


CAPITALS = [
    ('Capital of Italy', 'Rome'),
    ('Capital of France', 'Paris'),
    ('Capital of Spain', 'Madrid'),
    ('Capital of Portugal', 'Lisbon'),
    ('Capital of Greece', 'Athens'),
]


class ScriptedTransport:
    def __init__(self):
        self.lines = []
        self.prompts = []

    def write_line(self, text, level='info'):
        self.lines.append(text)

    def write_prompt(self, text, default=None):
        self.prompts.append(text)


def drive(command, transport, answer_for):
    """Run a play generator to the end, answering each prompt with ``answer_for(prompt)``."""
    try:
        command.send(None)
        while True:
            command.send(answer_for(transport.prompts[-1]))
    except StopIteration as stop:
        return stop.value


def answer_key(quizzes):
    answers = {f' {q}? ': a for q, a in quizzes}
    return lambda prompt: answers[prompt]


def test_empty_store_reports_nothing_to_ask(line_session, recorder):
    store = FakeStore()
    line_session.run(play, store, FirstPick())

    assert recorder.lines == [' Nothing left to ask.', ' End of quiz. Score: 0']
    assert recorder.prompts == ['quiz > ']
    assert not line_session.busy


def test_answer_ignores_case_and_surrounding_whitespace(line_session, recorder):
    store = FakeStore([('2+2', 'Four')])
    line_session.run(play, store, FirstPick())
    assert recorder.prompts == [' 2+2? ']

    assert line_session.feed('  fOUR  ')
    assert recorder.lines == [
        ' CORRECT - 1 correct so far.',
        ' Nothing left to ask.',
        ' End of quiz. Score: 1',
    ]
    assert recorder.ready_count() == 1


def test_first_miss_ends_the_session(line_session, recorder):
    store = FakeStore([('2+2', 'Four'), ('3+3', 'Six')])
    line_session.run(play, store, FirstPick())
    line_session.feed('five')

    assert recorder.lines == [' INCORRECT.', ' End of quiz. Score: 0']
    assert recorder.prompts == [' 2+2? ', 'quiz > ']
    assert not line_session.busy
    # later lines are commands again, not answers
    assert line_session.feed('Six') is False


def test_miss_keeps_score_accumulated_before_it(line_session, recorder):
    store = FakeStore(CAPITALS[:3])
    line_session.run(play, store, FirstPick())
    line_session.feed('rome')
    line_session.feed('Lyon')

    assert recorder.lines == [
        ' CORRECT - 1 correct so far.',
        ' INCORRECT.',
        ' End of quiz. Score: 1',
    ]
    assert ' Capital of Spain? ' not in recorder.prompts
    assert recorder.ready_count() == 1


@pytest.mark.parametrize('seed', range(10))
def test_all_correct_asks_each_question_once(seed):
    transport = ScriptedTransport()
    result = drive(play(transport, FakeStore(CAPITALS), random.Random(seed)), transport, answer_key(CAPITALS))

    assert result.state is PlayState.EXHAUSTED
    assert result.score == len(CAPITALS)
    assert sorted(result.asked) == [1, 2, 3, 4, 5]
    assert len(set(transport.prompts)) == len(transport.prompts) == len(CAPITALS)
    running = [line for line in transport.lines if 'CORRECT -' in line]
    assert running == [f' CORRECT - {n} correct so far.' for n in range(1, len(CAPITALS) + 1)]
    assert transport.lines[-1] == f' End of quiz. Score: {len(CAPITALS)}'


def test_strict_stop_returns_incorrect_state():
    transport = ScriptedTransport()
    key = answer_key(CAPITALS)
    calls = []

    def answer(prompt):
        calls.append(prompt)
        return key(prompt) if len(calls) < 3 else 'nowhere'

    result = drive(play(transport, FakeStore(CAPITALS), random.Random(42)), transport, answer)

    assert result.state is PlayState.INCORRECT
    assert result.score == 2
    assert len(result.asked) == 3
    assert len(result.remaining) == len(CAPITALS) - 2


def test_store_is_read_once_per_session():
    store = FakeStore(CAPITALS)
    transport = ScriptedTransport()
    drive(play(transport, store, random.Random(1)), transport, answer_key(CAPITALS))
    assert store.fetches == 1


def test_store_failure_is_reported_without_prompting(line_session, recorder):
    line_session.run(play, FakeStore(fail=True), FirstPick())

    assert recorder.lines == ['Error: database is locked']
    assert recorder.prompts == ['quiz > ']


def test_bad_draw_fails_the_session(line_session, recorder):
    line_session.run(play, FakeStore(CAPITALS), PastTheEnd())

    assert len(recorder.lines) == 1
    assert recorder.lines[0].startswith('Error: Drawn question index 5')
    assert recorder.prompts == ['quiz > ']


def test_disconnect_while_waiting_writes_nothing(line_session, recorder):
    line_session.run(play, FakeStore(CAPITALS), FirstPick())
    recorder.clear()

    line_session.abort()

    assert recorder.events == []
    assert line_session.closed
    assert not line_session.busy


def test_transport_error_propagates_from_prompt():
    transport = ScriptedTransport()
    command = play(transport, FakeStore(CAPITALS), FirstPick())
    command.send(None)
    with pytest.raises(TransportError):
        command.throw(TransportError('gone'))
    assert transport.lines == []


def test_is_correct_compares_lowercase():
    assert is_correct('paris', 'Paris')
    assert not is_correct('pari', 'Paris')
