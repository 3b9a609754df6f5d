from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
login_manager = LoginManager()
migrate = Migrate()
allowed_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
socketio = SocketIO(cors_allowed_origins=allowed_origins, async_mode=None)

def create_app(config_class=Config, oracle=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    login_manager.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Cryptographic oracle: injected, or the in-process mock
    from scoreledger.crypto import MockOracle
    if oracle is None:
        oracle = MockOracle()
    oracle.init_app(flask_app)

    from scoreledger.errors import LedgerError

    @flask_app.errorhandler(LedgerError)
    def handle_ledger_error(exc):
        return jsonify(exc.to_dict()), exc.status

    # Import and register blueprints here
    from scoreledger.main import main
    flask_app.register_blueprint(main)

    from scoreledger.api.scores import scores
    flask_app.register_blueprint(scores, url_prefix='/api/scores')

    if flask_app.config.get('ENABLE_MOCK_ORACLE_API') and isinstance(oracle, MockOracle):
        from scoreledger.api.oracle import oracle_api
        flask_app.register_blueprint(oracle_api, url_prefix='/api/oracle')

    # Register Socket.IO event handlers
    from scoreledger.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    # Flask-Login user loader
    from scoreledger.models import User

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, int(user_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'error': 'Login required', 'code': 'unauthorized'}), 401

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            # Seed users
            users = ['alice', 'bob', 'carol']
            for u in users:
                user = User(username=u)
                user.set_password('password')
                db.session.add(user)

            db.session.commit()
            print('Database has been reset and seeded!')

    @click.command('prune-grants')
    def prune_grants_command():
        """Removes access grants on handles no player points at."""
        from scoreledger.services.ledger import prune_stale_grants
        with flask_app.app_context():
            removed = prune_stale_grants()
            print(f'Removed {removed} stale grant(s).')

    flask_app.cli.add_command(db_reset_command)
    flask_app.cli.add_command(prune_grants_command)

    from scoreledger.services.ledger.maintenance import schedule_grant_pruning
    schedule_grant_pruning(flask_app)

    return flask_app
