# models/booking.py
from datetime import datetime, timezone

from database import db

BOOKING_MODES = ("Online", "Offline", "Phone")
BOOKING_STATUSES = ("Pending", "Confirmed", "Completed", "Cancelled")
CURRENCIES = ("INR", "USD", "EUR", "GBP")


class PujaBooking(db.Model):
    __tablename__ = "puja_bookings"

    id = db.Column(db.Integer, primary_key=True)

    # Restrict: a referenced puja type or customer cannot be deleted
    puja_type_id = db.Column(
        db.Integer, db.ForeignKey("puja_types.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    customer_id = db.Column(
        db.Uuid, db.ForeignKey("customers.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    # Booking details
    booking_mode = db.Column(db.String(20), nullable=False)  # Online, Offline, Phone
    puja_date = db.Column(db.Date, nullable=False)
    puja_time = db.Column(db.Time, nullable=True)
    people_count = db.Column(db.Integer, nullable=False)
    note = db.Column(db.Text)

    # Lifecycle and payment
    status = db.Column(db.String(30), nullable=False, default="Pending")  # Pending, Confirmed, Completed, Cancelled
    total_amount = db.Column(db.Numeric(12, 2), nullable=False)
    currency = db.Column(db.String(10), nullable=False, default="INR")
    is_paid = db.Column(db.Boolean, nullable=False, default=False)

    created_at = db.Column(db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = db.Column(db.DateTime, nullable=True)

    version = db.Column(db.Integer, nullable=False, default=1)
    __mapper_args__ = {"version_id_col": version}

    # Relationships (no backrefs: deleting the parent must not touch bookings)
    puja_type = db.relationship("PujaType", lazy="joined")
    customer = db.relationship("Customer", lazy="joined")

    def to_dict(self):
        """Booking plus the joined catalog/customer fields"""
        puja_type = self.puja_type
        customer = self.customer
        return {
            "bookingId": self.id,
            "pujaTypeId": self.puja_type_id,
            "pujaTypeName": puja_type.name if puja_type else "",
            "customerId": str(self.customer_id),
            "customerName": customer.full_name if customer else "",
            "customerEmail": (customer.email or "") if customer else "",
            "customerContact": customer.contact_number if customer else "",
            "bookingMode": self.booking_mode,
            "pujaDate": self.puja_date.isoformat() if self.puja_date else None,
            "pujaTime": self.puja_time.strftime("%H:%M:%S") if self.puja_time else None,
            "peopleCount": self.people_count,
            "note": self.note,
            "bookingStatus": self.status,
            "totalAmount": float(self.total_amount) if self.total_amount is not None else 0.0,
            "currency": self.currency,
            "isPaid": self.is_paid,
            "createdDate": self.created_at.isoformat() if self.created_at else None,
            "updatedDate": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<PujaBooking {self.id} {self.status}>"
