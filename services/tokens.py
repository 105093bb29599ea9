"""Bearer token issuance for both principal types"""

from datetime import timedelta

from flask_jwt_extended import create_access_token

from services.base import utcnow

CUSTOMER_ROLE = "Customer"


def _issue(identity, claims, expiry_hours):
    expires = timedelta(hours=expiry_hours)
    token = create_access_token(identity=identity, additional_claims=claims, expires_delta=expires)
    return token, utcnow() + expires


def issue_staff_token(user, expiry_hours=24):
    claims = {
        "username": user.username,
        "email": user.email,
        "role": user.role,
    }
    return _issue(str(user.id), claims, expiry_hours)


def issue_customer_token(customer, expiry_hours=24):
    # customer_id duplicates sub so authorization can read it by name
    claims = {
        "name": customer.full_name,
        "email": customer.email or "",
        "contact": customer.contact_number,
        "role": CUSTOMER_ROLE,
        "customer_id": str(customer.id),
    }
    return _issue(str(customer.id), claims, expiry_hours)
