from flask import Blueprint, current_app, jsonify, request

from quizline.errors import (
    MissingParameterError,
    NotANumberError,
    NotFoundError,
    QuizValidationError,
    StoreError,
)
from quizline.services.quizzes.store import QuizStore
from quizline.services.quizzes.validation import validate_id

quizzes = Blueprint('quizzes', __name__)
store = QuizStore()


@quizzes.errorhandler(MissingParameterError)
@quizzes.errorhandler(NotANumberError)
def handle_bad_parameter(exc):
    return jsonify({'error': str(exc)}), 400


@quizzes.errorhandler(QuizValidationError)
def handle_invalid_quiz(exc):
    return jsonify({'error': 'The quiz is invalid', 'details': exc.messages}), 400


@quizzes.errorhandler(NotFoundError)
def handle_not_found(exc):
    return jsonify({'error': str(exc)}), 404


@quizzes.errorhandler(StoreError)
def handle_store_error(exc):
    current_app.logger.error(f"[store-error] {exc}")
    return jsonify({'error': 'The quiz store is unavailable'}), 500


@quizzes.route('', methods=['GET'])
def list_quizzes():
    return jsonify([quiz.to_dict() for quiz in store.fetch_all()])


@quizzes.route('', methods=['POST'])
def create_quiz():
    """
    Creates a quiz from a JSON body with `question` and `answer`.
    """
    data = request.get_json(silent=True) or {}
    quiz = store.create(data.get('question'), data.get('answer'))
    return jsonify(quiz.to_dict()), 201


@quizzes.route('/<quiz_id>', methods=['GET'])
def get_quiz(quiz_id):
    return jsonify(store.get(validate_id(quiz_id)).to_dict())


@quizzes.route('/<quiz_id>', methods=['PUT'])
def update_quiz(quiz_id):
    """
    Replaces the question and answer of an existing quiz.
    """
    quiz_id = validate_id(quiz_id)
    data = request.get_json(silent=True) or {}
    quiz = store.update(quiz_id, data.get('question'), data.get('answer'))
    return jsonify(quiz.to_dict())


@quizzes.route('/<quiz_id>', methods=['DELETE'])
def delete_quiz(quiz_id):
    quiz_id = validate_id(quiz_id)
    store.delete(quiz_id)
    return jsonify({'message': f'Quiz {quiz_id} deleted'})
