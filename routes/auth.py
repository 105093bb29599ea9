from flask import Blueprint, current_app, jsonify, request, url_for

from database import db
from errors import ValidationFailure
from schemas import StaffLogin, StaffRegistration
from services import StaffAuthService

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")
diagnostics_bp = Blueprint("auth_diagnostics", __name__, url_prefix="/api/auth")


def _service():
    return StaffAuthService(db.session, current_app.config)


@auth_bp.route("/login", methods=["POST"])
def login():
    """Staff authentication endpoint"""
    dto = StaffLogin.from_payload(request.get_json(silent=True))
    return jsonify(_service().login(dto)), 200


@auth_bp.route("/register", methods=["POST"])
def register():
    """Staff registration endpoint"""
    dto = StaffRegistration.from_payload(request.get_json(silent=True))
    result = _service().register(dto)
    current_app.logger.info(f"Staff user {dto.username} registered")
    return jsonify(result), 201, {"Location": url_for("auth.login")}


@diagnostics_bp.route("/hash-password", methods=["GET"])
def hash_password():
    """Generate a password hash for seeding a staff row (development only)"""
    password = request.args.get("password")
    if not password:
        raise ValidationFailure("Password is required")

    password_hash = _service().hash_password(password)
    return jsonify({
        "password": password,
        "hash": password_hash,
        "sqlInsert": f"UPDATE users SET password_hash = '{password_hash}' WHERE username = 'admin';",
    }), 200
