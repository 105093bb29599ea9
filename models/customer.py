# models/customer.py
import uuid
from datetime import datetime, timezone

from database import db


class Customer(db.Model):
    __tablename__ = "customers"

    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    first_name = db.Column(db.String(120), nullable=False)
    last_name = db.Column(db.String(120), nullable=False)
    contact_number = db.Column(db.String(20), unique=True, nullable=False)
    email = db.Column(db.String(320), unique=True, nullable=True)

    # Only self-registered customers have a credential
    password_hash = db.Column(db.String(255), nullable=True)

    country = db.Column(db.String(120))
    state = db.Column(db.String(120))
    district = db.Column(db.String(120))

    # Stored as a small integer (1/0) for compatibility with the legacy table
    is_active = db.Column(db.SmallInteger, nullable=False, default=1)

    created_at = db.Column(db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = db.Column(db.DateTime, nullable=True)

    version = db.Column(db.Integer, nullable=False, default=1)
    __mapper_args__ = {"version_id_col": version}

    @property
    def active(self):
        return bool(self.is_active)

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    def can_log_in(self):
        return self.active and bool(self.password_hash)

    def to_dict(self):
        return {
            "customerId": str(self.id),
            "firstName": self.first_name,
            "lastName": self.last_name,
            "contactNumber": self.contact_number,
            "email": self.email,
            "country": self.country,
            "state": self.state,
            "district": self.district,
            "isActive": self.is_active,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Customer {self.full_name} {self.contact_number}>"
