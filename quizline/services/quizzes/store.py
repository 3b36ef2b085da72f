import logging
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from quizline import db
from quizline.errors import NotFoundError, QuizValidationError, StoreError
from quizline.models import Quiz, QuizRecord

logger = logging.getLogger(__name__)

SAMPLE_QUIZZES = [
    {'question': 'Capital of Italy', 'answer': 'Rome'},
    {'question': 'Capital of France', 'answer': 'Paris'},
    {'question': 'Capital of Spain', 'answer': 'Madrid'},
    {'question': 'Capital of Portugal', 'answer': 'Lisbon'},
]


class QuizStore:
    """Quiz persistence on top of the Flask-SQLAlchemy session.

    Every read returns detached QuizRecord values, so callers can keep them
    after the request or socket event that loaded them has finished.
    """

    def fetch_all(self) -> List[QuizRecord]:
        try:
            quizzes = Quiz.query.order_by(Quiz.id).all()
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StoreError(f'Could not read the quizzes: {exc}') from exc
        return [q.to_record() for q in quizzes]

    def get(self, quiz_id: int) -> QuizRecord:
        return self._load(quiz_id).to_record()

    def create(self, question: str, answer: str) -> QuizRecord:
        question, answer = self._validate(question, answer)
        quiz = Quiz(question=question, answer=answer)
        db.session.add(quiz)
        self._commit()
        logger.info(f"[quiz-create] id={quiz.id}")
        return quiz.to_record()

    def update(self, quiz_id: int, question: str, answer: str) -> QuizRecord:
        quiz = self._load(quiz_id)
        question, answer = self._validate(question, answer, exclude_id=quiz.id)
        quiz.question = question
        quiz.answer = answer
        db.session.add(quiz)
        self._commit()
        logger.info(f"[quiz-update] id={quiz.id}")
        return quiz.to_record()

    def delete(self, quiz_id: int) -> None:
        quiz = self._load(quiz_id)
        db.session.delete(quiz)
        self._commit()
        logger.info(f"[quiz-delete] id={quiz_id}")

    def seed(self) -> int:
        """Add the sample quizzes when the table is empty; returns how many were added."""
        try:
            if Quiz.query.count() > 0:
                return 0
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StoreError(f'Could not count the quizzes: {exc}') from exc
        for data in SAMPLE_QUIZZES:
            db.session.add(Quiz(**data))
        self._commit()
        return len(SAMPLE_QUIZZES)

    def _load(self, quiz_id: int) -> Quiz:
        try:
            quiz = db.session.get(Quiz, quiz_id)
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StoreError(f'Could not read quiz {quiz_id}: {exc}') from exc
        if quiz is None:
            raise NotFoundError(f'There is no quiz with id={quiz_id}.')
        return quiz

    def _validate(self, question, answer, exclude_id=None):
        question = (question or '').strip()
        answer = (answer or '').strip()
        errors = []
        if not question:
            errors.append('The question must not be empty.')
        if not answer:
            errors.append('The answer must not be empty.')
        if question:
            duplicate = Quiz.query.filter(Quiz.question == question)
            if exclude_id is not None:
                duplicate = duplicate.filter(Quiz.id != exclude_id)
            if duplicate.first() is not None:
                errors.append('That question already exists.')
        if errors:
            raise QuizValidationError(errors)
        return question, answer

    def _commit(self) -> None:
        try:
            db.session.commit()
        except IntegrityError as exc:
            db.session.rollback()
            raise QuizValidationError(['That question already exists.']) from exc
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise StoreError(f'Could not save the quizzes: {exc}') from exc
