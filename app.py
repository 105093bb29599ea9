import logging
import os

from flask import Flask, jsonify
from flask_jwt_extended import JWTManager
from flask_migrate import Migrate

# Local imports
from commands import register_commands
from config import Config, build_settings
from database import db
from errors import register_error_handlers
from routes import register_blueprints

migrate = Migrate()
jwt = JWTManager()


def _auth_error(message):
    return jsonify({"message": message}), 401


@jwt.unauthorized_loader
def _missing_token(reason):
    return _auth_error("Authentication required")


@jwt.invalid_token_loader
def _invalid_token(reason):
    return _auth_error("Invalid token")


@jwt.expired_token_loader
def _expired_token(jwt_header, jwt_payload):
    return _auth_error("Token has expired")


def create_app(config_object=Config):
    """Build the Flask application; every collaborator is wired here explicitly."""
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.update(build_settings(config_object))

    if not app.config.get("JWT_SECRET_KEY"):
        raise RuntimeError("JWT_SECRET_KEY is not configured")

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    # Initialize extensions
    db.init_app(app)  # Initialize database
    migrate.init_app(app, db)  # Initialize Flask-Migrate AFTER db
    jwt.init_app(app)

    register_error_handlers(app)
    register_blueprints(app)
    register_commands(app)

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"}), 200

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=5001, debug=os.getenv("FLASK_DEBUG", "false").lower() == "true")
