from dataclasses import dataclass
from quizline import db


@dataclass(frozen=True)
class QuizRecord:
    """Detached, read-only copy of a stored quiz."""
    id: int
    question: str
    answer: str

    def to_dict(self):
        return {
            'id': self.id,
            'question': self.question,
            'answer': self.answer,
        }


class Quiz(db.Model):
    __tablename__ = 'quiz'
    id = db.Column(db.Integer, primary_key=True)
    question = db.Column(db.String(255), unique=True, nullable=False)
    answer = db.Column(db.String(255), nullable=False)

    def to_record(self):
        return QuizRecord(id=self.id, question=self.question, answer=self.answer)

    def to_dict(self):
        return self.to_record().to_dict()
