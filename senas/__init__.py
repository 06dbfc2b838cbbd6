from flask import Flask, jsonify, request
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_cors import CORS
from flask_socketio import SocketIO
import random
import click
from config import Config

db = SQLAlchemy()
login_manager = LoginManager()
allowed_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:5000",
    "http://127.0.0.1:5000",
]
socketio = SocketIO(cors_allowed_origins=allowed_origins, async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    login_manager.init_app(flask_app)
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Avatar picks only need to be uniform; a seed makes them reproducible
    flask_app.extensions['avatar_rng'] = random.Random(flask_app.config.get('AVATAR_SEED'))

    from senas.pages import pages
    flask_app.register_blueprint(pages)

    from senas.api.session import session_api
    flask_app.register_blueprint(session_api, url_prefix='/api')

    from senas.api.match import match_api
    flask_app.register_blueprint(match_api, url_prefix='/api/match')

    from senas.api.leaderboard import leaderboard_api
    flask_app.register_blueprint(leaderboard_api, url_prefix='/api')

    from senas.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    # Guest session loading (cookie -> current_user) lives with the token code
    import senas.auth  # noqa: F401

    @flask_app.errorhandler(405)
    def method_not_allowed(exc):
        return jsonify({'message': 'Method not allowed'}), 405

    @flask_app.errorhandler(404)
    def not_found(exc):
        if request.path.startswith('/api/'):
            return jsonify({'error': 'Not found'}), 404
        return exc

    @click.command('db-reset')
    def db_reset_command():
        """Drops and recreates the guest user and match tables."""
        import senas.models  # noqa: F401
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            print('Database has been reset!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
