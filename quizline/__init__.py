from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('ALLOWED_ORIGINS') or []

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Import and register blueprints here
    from quizline.main import main
    flask_app.register_blueprint(main)

    from quizline.api.quizzes import quizzes
    flask_app.register_blueprint(quizzes, url_prefix='/api/quizzes')

    # Register Socket.IO event handlers on the freshly initialized server
    from quizline.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=flask_app.config.get('QUIZ_NAMESPACE', '/quiz'))

    from quizline.services.quizzes.store import QuizStore

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            created = QuizStore().seed()
            print(f'Database has been reset and seeded with {created} quizzes!')

    @click.command('seed')
    def seed_command():
        """Adds the sample quizzes if the quiz table is empty."""
        with flask_app.app_context():
            created = QuizStore().seed()
            print(f'Seeded {created} quizzes.')

    flask_app.cli.add_command(db_reset_command)
    flask_app.cli.add_command(seed_command)

    flask_app.logger.info(f"[init] quiz namespace={flask_app.config.get('QUIZ_NAMESPACE')}")
    return flask_app
