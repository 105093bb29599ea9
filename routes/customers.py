from flask import Blueprint, jsonify, request, url_for

from authz import staff_required
from database import db
from schemas import CustomerInput
from services import CustomerService

customers_bp = Blueprint("customers", __name__, url_prefix="/api/customer")


def _service():
    return CustomerService(db.session)


@customers_bp.route("", methods=["GET"])
@staff_required
def list_customers():
    return jsonify([c.to_dict() for c in _service().get_all()]), 200


@customers_bp.route("/<uuid:customer_id>", methods=["GET"])
@staff_required
def get_customer(customer_id):
    return jsonify(_service().get(customer_id).to_dict()), 200


@customers_bp.route("/search/email/<path:email>", methods=["GET"])
@staff_required
def get_customer_by_email(email):
    return jsonify(_service().get_by_email(email).to_dict()), 200


@customers_bp.route("/search/contact/<contact_number>", methods=["GET"])
@staff_required
def get_customer_by_contact(contact_number):
    return jsonify(_service().get_by_contact(contact_number).to_dict()), 200


@customers_bp.route("/state/<state>", methods=["GET"])
@staff_required
def list_customers_by_state(state):
    return jsonify([c.to_dict() for c in _service().get_by_state(state)]), 200


@customers_bp.route("", methods=["POST"])
@staff_required
def create_customer():
    dto = CustomerInput.from_payload(request.get_json(silent=True))
    customer = _service().create(dto)
    location = url_for("customers.get_customer", customer_id=customer.id)
    return jsonify(customer.to_dict()), 201, {"Location": location}


@customers_bp.route("/<uuid:customer_id>", methods=["PUT"])
@staff_required
def update_customer(customer_id):
    dto = CustomerInput.from_payload(request.get_json(silent=True))
    return jsonify(_service().update(customer_id, dto).to_dict()), 200


@customers_bp.route("/<uuid:customer_id>", methods=["DELETE"])
@staff_required
def delete_customer(customer_id):
    _service().delete(customer_id)
    return jsonify({"message": "Customer has been deleted successfully"}), 200
