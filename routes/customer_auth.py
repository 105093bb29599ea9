from flask import Blueprint, current_app, jsonify, request, url_for
from flask_jwt_extended import get_jwt

from authz import customer_required
from database import db
from schemas import CustomerLogin, CustomerRegistration
from services import CustomerAuthService

customer_auth_bp = Blueprint("customer_auth", __name__, url_prefix="/api/customerauth")


def _service():
    return CustomerAuthService(db.session, current_app.config)


@customer_auth_bp.route("/login", methods=["POST"])
def login():
    """Customer login with either email or contact number"""
    dto = CustomerLogin.from_payload(request.get_json(silent=True))
    return jsonify(_service().login(dto)), 200


@customer_auth_bp.route("/register", methods=["POST"])
def register():
    dto = CustomerRegistration.from_payload(request.get_json(silent=True))
    result = _service().register(dto)
    return jsonify(result), 201, {"Location": url_for("customer_auth.login")}


@customer_auth_bp.route("/profile", methods=["GET"])
@customer_required
def profile():
    """Profile of the customer named by the token's customer_id claim"""
    customer = _service().get_profile(get_jwt().get("customer_id"))
    return jsonify(customer.to_dict()), 200
