from flask import Blueprint, current_app, jsonify, request, url_for

from authz import ADMIN, roles_required
from database import db
from schemas import PujaTypeInput, PujaTypeUpdate
from services import PujaTypeService

puja_types_bp = Blueprint("puja_types", __name__, url_prefix="/api/pujatype")


def _service():
    return PujaTypeService(db.session)


@puja_types_bp.route("", methods=["GET"])
def list_puja_types():
    return jsonify([p.to_dict() for p in _service().get_all()]), 200


@puja_types_bp.route("/active", methods=["GET"])
def list_active_puja_types():
    """Catalog as shown to customers"""
    return jsonify([p.to_dict() for p in _service().get_active()]), 200


@puja_types_bp.route("/<int:puja_type_id>", methods=["GET"])
def get_puja_type(puja_type_id):
    return jsonify(_service().get(puja_type_id).to_dict()), 200


@puja_types_bp.route("", methods=["POST"])
@roles_required(*ADMIN)
def create_puja_type():
    dto = PujaTypeInput.from_payload(request.get_json(silent=True))
    puja_type = _service().create(dto)
    current_app.logger.info(f"Puja type {puja_type.id} created")
    location = url_for("puja_types.get_puja_type", puja_type_id=puja_type.id)
    return jsonify(puja_type.to_dict()), 201, {"Location": location}


@puja_types_bp.route("/<int:puja_type_id>", methods=["PUT"])
@roles_required(*ADMIN)
def update_puja_type(puja_type_id):
    dto = PujaTypeUpdate.from_payload(request.get_json(silent=True))
    return jsonify(_service().update(puja_type_id, dto).to_dict()), 200


@puja_types_bp.route("/<int:puja_type_id>", methods=["DELETE"])
@roles_required(*ADMIN)
def delete_puja_type(puja_type_id):
    _service().delete(puja_type_id)
    return jsonify({"message": f"Puja type with ID {puja_type_id} has been deleted successfully"}), 200


@puja_types_bp.route("/<int:puja_type_id>/deactivate", methods=["PATCH"])
@roles_required(*ADMIN)
def deactivate_puja_type(puja_type_id):
    _service().deactivate(puja_type_id)
    return jsonify({"message": f"Puja type with ID {puja_type_id} has been deactivated successfully"}), 200
