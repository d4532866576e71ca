import logging
from flask import Flask, jsonify
from flask_cors import CORS
from flask_migrate import Migrate

from config import Config, warn_on_default_database
from models import db
from store import HabitStore, STORE_KEY
from errors import register_error_handlers
from Authentication import auth_bp
from Users import users_bp
from Habit import habits_bp
from Progress import progress_bp

logger = logging.getLogger(__name__)

migrate = Migrate()


def create_app(config=None, store=None):
    config = config or Config

    # Configure logging
    logging.basicConfig(level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.DEBUG))
    warn_on_default_database(config)

    # Initialize Flask app
    app = Flask(__name__)
    app.config.from_object(config)
    CORS(app, resources={r"/*": {
        "origins": app.config["FRONTEND_URL"],
        "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        "allow_headers": ["Content-Type", "Authorization"]
    }})
    db.init_app(app)
    migrate.init_app(app, db)

    # Create database tables
    with app.app_context():
        db.create_all()

    app.extensions[STORE_KEY] = store or HabitStore(db)
    register_error_handlers(app)

    app.register_blueprint(auth_bp)
    app.register_blueprint(users_bp)
    app.register_blueprint(habits_bp)
    app.register_blueprint(progress_bp)

    @app.route("/", methods=["GET"])
    def index():
        return jsonify({
            "message": "Habit Tracker API online",
            "endpoints": {
                "auth": "/api/auth/signup, /api/auth/login",
                "users": "/api/users/:id",
                "habits": "/api/habits",
                "progress": "/api/progress"
            }
        }), 200

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=app.config["PORT"])
