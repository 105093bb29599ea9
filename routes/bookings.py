from flask import Blueprint, current_app, jsonify, request, url_for

from authz import ADMIN, ADMIN_OR_MANAGER, ensure_customer_access, roles_required, staff_or_customer_required
from database import db
from errors import ValidationFailure
from models import BOOKING_STATUSES
from schemas import BookingCreate, BookingUpdate, DateRange, PaymentChange, StatusChange
from services import BookingService

bookings_bp = Blueprint("bookings", __name__, url_prefix="/api/pujabooking")


def _service():
    return BookingService(db.session)


def _listing(bookings):
    return jsonify([b.to_dict() for b in bookings]), 200


# Reads -----------------------------------------------------------------------

@bookings_bp.route("", methods=["GET"])
@roles_required(*ADMIN_OR_MANAGER)
def list_bookings():
    return _listing(_service().get_all())


@bookings_bp.route("/<int:booking_id>", methods=["GET"])
@staff_or_customer_required
def get_booking(booking_id):
    current_app.logger.info(f"Retrieving booking with ID {booking_id}")
    booking = _service().get(booking_id)
    ensure_customer_access(booking.customer_id)
    return jsonify(booking.to_dict()), 200


@bookings_bp.route("/customer/<uuid:customer_id>", methods=["GET"])
@staff_or_customer_required
def list_bookings_for_customer(customer_id):
    ensure_customer_access(customer_id)
    return _listing(_service().get_by_customer(customer_id))


@bookings_bp.route("/puja-type/<int:puja_type_id>", methods=["GET"])
@roles_required(*ADMIN_OR_MANAGER)
def list_bookings_for_puja_type(puja_type_id):
    return _listing(_service().get_by_puja_type(puja_type_id))


@bookings_bp.route("/status/<status>", methods=["GET"])
@roles_required(*ADMIN_OR_MANAGER)
def list_bookings_by_status(status):
    if status not in BOOKING_STATUSES:
        raise ValidationFailure(f"BookingStatus must be one of: {', '.join(BOOKING_STATUSES)}")
    return _listing(_service().get_by_status(status))


@bookings_bp.route("/date-range", methods=["GET"])
@roles_required(*ADMIN_OR_MANAGER)
def list_bookings_by_date_range():
    window = DateRange.from_query(request.args)
    return _listing(_service().get_by_date_range(window.start, window.end))


@bookings_bp.route("/pending-payments", methods=["GET"])
@roles_required(*ADMIN_OR_MANAGER)
def list_pending_payments():
    return _listing(_service().get_pending_payments())


@bookings_bp.route("/stats", methods=["GET"])
@roles_required(*ADMIN_OR_MANAGER)
def booking_stats():
    service = _service()
    return jsonify({
        "totalRevenue": float(service.total_revenue()),
        "totalBookings": service.total_bookings(),
    }), 200


# Writes ----------------------------------------------------------------------

@bookings_bp.route("", methods=["POST"])
@staff_or_customer_required
def create_booking():
    dto = BookingCreate.from_payload(request.get_json(silent=True))
    ensure_customer_access(dto.customer_id)
    booking = _service().create(dto)
    location = url_for("bookings.get_booking", booking_id=booking.id)
    return jsonify(booking.to_dict()), 201, {"Location": location}


@bookings_bp.route("/<int:booking_id>", methods=["PUT"])
@roles_required(*ADMIN_OR_MANAGER)
def update_booking(booking_id):
    dto = BookingUpdate.from_payload(request.get_json(silent=True))
    return jsonify(_service().update(booking_id, dto).to_dict()), 200


@bookings_bp.route("/<int:booking_id>/status", methods=["PATCH"])
@roles_required(*ADMIN_OR_MANAGER)
def update_booking_status(booking_id):
    dto = StatusChange.from_payload(request.get_json(silent=True))
    _service().set_status(booking_id, dto)
    return jsonify({"message": f"Booking status updated to {dto.status} successfully"}), 200


@bookings_bp.route("/<int:booking_id>/payment", methods=["PATCH"])
@roles_required(*ADMIN_OR_MANAGER)
def update_payment_status(booking_id):
    dto = PaymentChange.from_payload(request.get_json(silent=True))
    _service().set_payment_status(booking_id, dto)
    state = "paid" if dto.is_paid else "unpaid"
    return jsonify({"message": f"Booking with ID {booking_id} marked as {state}"}), 200


@bookings_bp.route("/<int:booking_id>/cancel", methods=["PATCH"])
@staff_or_customer_required
def cancel_booking(booking_id):
    service = _service()
    ensure_customer_access(service.get(booking_id).customer_id)
    service.cancel(booking_id)
    return jsonify({"message": f"Booking with ID {booking_id} has been cancelled successfully"}), 200


@bookings_bp.route("/<int:booking_id>", methods=["DELETE"])
@roles_required(*ADMIN)
def delete_booking(booking_id):
    _service().delete(booking_id)
    return jsonify({"message": f"Booking with ID {booking_id} has been deleted successfully"}), 200
