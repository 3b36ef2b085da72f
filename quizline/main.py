from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({
        'message': 'Welcome to the quiz server!',
        'namespace': current_app.config.get('QUIZ_NAMESPACE', '/quiz'),
    })
