from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import os
import click
from config import Config

db = SQLAlchemy()
login_manager = LoginManager()
migrate = Migrate()
allowed_origins = [o.strip() for o in os.environ.get('CORS_ORIGINS', '').split(',') if o.strip()] or [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:5174",
    "http://127.0.0.1:5174",
]
socketio = SocketIO(cors_allowed_origins=allowed_origins, async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(flask_app)
    login_manager.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Cookie identity for plain HTTP requests; sockets resolve on connect
    from scoreboard.identity import init_identity
    init_identity(flask_app)

    # The relay owns the listener sets, so one instance lives per app
    from scoreboard.services.games import GameStore, ListenerRegistry, ScoreRelay
    flask_app.extensions['score_relay'] = ScoreRelay(
        GameStore(db, default_name=flask_app.config.get('DEFAULT_GAME_NAME', 'Main')),
        ListenerRegistry(),
        send=socketio.emit,
    )

    # Import and register blueprints here
    from scoreboard.main import main
    flask_app.register_blueprint(main)

    from scoreboard.api.games import games
    flask_app.register_blueprint(games, url_prefix='/games')

    # Register Socket.IO event handlers
    from scoreboard.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from scoreboard.models import Game
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            # Seed the ambient game
            db.session.add(Game(name=flask_app.config.get('DEFAULT_GAME_NAME', 'Main')))
            db.session.commit()
            print('Database has been reset and seeded!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
