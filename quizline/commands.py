from flask import current_app

from quizline.services.quizzes.play import is_correct, play
from quizline.services.quizzes.prompt import make_question
from quizline.services.quizzes.validation import validate_id

HELP_LINES = [
    'Commands:',
    '  h|help - Show this help.',
    '  list - List the existing quizzes.',
    '  show <id> - Show the question and answer of the given quiz.',
    '  add - Add a new quiz interactively.',
    '  delete <id> - Delete the given quiz.',
    '  edit <id> - Edit the given quiz.',
    '  test <id> - Try the given quiz.',
    '  p|play - Play all the quizzes in random order.',
    '  credits - Credits.',
    '  q|quit - Leave the session.',
]


def help_cmd(session, store, arg=None):
    for line in HELP_LINES:
        session.write_line(line)


def list_cmd(session, store, arg=None):
    for quiz in store.fetch_all():
        session.write_line(f'[{quiz.id}]:  {quiz.question}')


def show_cmd(session, store, arg=None):
    quiz = store.get(validate_id(arg))
    session.write_line(f' [{quiz.id}]:  {quiz.question} => {quiz.answer}')


def add_cmd(session, store, arg=None):
    question = yield from make_question(session, ' Enter a question: ')
    answer = yield from make_question(session, ' Enter the answer: ')
    quiz = store.create(question, answer)
    session.write_line(f' Added: {quiz.question} => {quiz.answer}')


def delete_cmd(session, store, arg=None):
    quiz_id = validate_id(arg)
    store.delete(quiz_id)
    session.write_line(f' Deleted quiz {quiz_id}.')


def edit_cmd(session, store, arg=None):
    quiz = store.get(validate_id(arg))
    question = yield from make_question(session, ' Enter the question: ', default=quiz.question)
    answer = yield from make_question(session, ' Enter the answer: ', default=quiz.answer)
    quiz = store.update(quiz.id, question, answer)
    session.write_line(f' Quiz {quiz.id} changed to: {quiz.question} => {quiz.answer}')


def test_cmd(session, store, arg=None):
    quiz = store.get(validate_id(arg))
    answer = yield from make_question(session, f' {quiz.question}? ')
    session.write_line(' Your answer is:')
    if is_correct(answer, quiz.answer):
        session.write_line(' Correct')
    else:
        session.write_line(' Incorrect')


def play_cmd(session, store, arg=None):
    return (yield from play(session, store))


def credits_cmd(session, store, arg=None):
    session.write_line('Authors:')
    for author in current_app.config.get('QUIZ_AUTHORS', []):
        session.write_line(author)


def quit_cmd(session, store, arg=None):
    session.write_line(' Bye!')
    session.close()


COMMANDS = {
    'h': help_cmd,
    'help': help_cmd,
    'list': list_cmd,
    'show': show_cmd,
    'add': add_cmd,
    'delete': delete_cmd,
    'edit': edit_cmd,
    'test': test_cmd,
    'p': play_cmd,
    'play': play_cmd,
    'credits': credits_cmd,
    'q': quit_cmd,
    'quit': quit_cmd,
}


def dispatch(session, store, line: str) -> None:
    """Run the command named by the first word of ``line``."""
    words = line.split()
    if not words:
        session.ready()
        return
    name, args = words[0].lower(), words[1:]
    handler = COMMANDS.get(name)
    if handler is None:
        session.write_line(f'Unknown command: {name}')
        session.write_line('Use help to see every available command.')
        session.ready()
        return
    session.run(handler, store, args[0] if args else None)
