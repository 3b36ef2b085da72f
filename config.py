import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///quizzes.sqlite'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Socket.IO namespace that carries the line-oriented quiz sessions
    QUIZ_NAMESPACE = os.environ.get('QUIZ_NAMESPACE', '/quiz')
    # Prompt sent whenever a session is ready for its next command
    QUIZ_PROMPT = os.environ.get('QUIZ_PROMPT', 'quiz > ')
    # Names listed by the `credits` command (comma separated)
    QUIZ_AUTHORS = [
        a.strip()
        for a in os.environ.get('QUIZ_AUTHORS', 'Ada Lovelace,Alan Turing').split(',')
        if a.strip()
    ]
    ALLOWED_ORIGINS = [
        o.strip()
        for o in os.environ.get('ALLOWED_ORIGINS', 'http://localhost:5173,http://127.0.0.1:5173').split(',')
        if o.strip()
    ]
    # Create tables and seed the sample quizzes when run.py starts
    QUIZ_BOOTSTRAP_DB = os.environ.get('QUIZ_BOOTSTRAP_DB', 'true').strip().lower() == 'true'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3030'))
