from quizline import create_app, db, socketio
from quizline.services.quizzes.store import QuizStore

app = create_app()

if __name__ == '__main__':
    if app.config.get('QUIZ_BOOTSTRAP_DB'):
        with app.app_context():
            db.create_all()
            QuizStore().seed()
    socketio.run(app, host=app.config['HOST'], port=app.config['PORT'], debug=True)
