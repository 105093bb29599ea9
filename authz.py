"""Role and ownership gates for the JSON API.

Token signature/issuer/audience/expiry checks are done by Flask-JWT-Extended;
the decorators here only look at the claims of an already verified token.
"""
from dataclasses import dataclass
from functools import wraps
from typing import Optional

from flask_jwt_extended import get_jwt, verify_jwt_in_request

from errors import AuthorizationDenied
from models import STAFF_ROLES
from services.tokens import CUSTOMER_ROLE

ADMIN = ("Admin",)
ADMIN_OR_MANAGER = ("Admin", "Manager")


@dataclass(frozen=True)
class Principal:
    subject: str
    role: str
    customer_id: Optional[str] = None

    @property
    def is_staff(self):
        return self.role in STAFF_ROLES

    @property
    def is_customer(self):
        return self.role == CUSTOMER_ROLE


def current_principal():
    claims = get_jwt()
    return Principal(
        subject=claims.get("sub", ""),
        role=claims.get("role", ""),
        customer_id=claims.get("customer_id"),
    )


def roles_required(*roles):
    """Require a valid bearer token whose role claim is one of ``roles``."""

    def wrapper(fn):
        @wraps(fn)
        def decorator(*args, **kwargs):
            verify_jwt_in_request()
            if current_principal().role not in roles:
                raise AuthorizationDenied("You do not have permission to perform this action")
            return fn(*args, **kwargs)

        return decorator

    return wrapper


def staff_required(fn):
    return roles_required(*STAFF_ROLES)(fn)


def customer_required(fn):
    return roles_required(CUSTOMER_ROLE)(fn)


def staff_or_customer_required(fn):
    return roles_required(*STAFF_ROLES, CUSTOMER_ROLE)(fn)


def ensure_customer_access(customer_id):
    """Staff may act on any customer; a customer only on itself."""
    principal = current_principal()
    if principal.is_staff:
        return principal
    if principal.is_customer and principal.customer_id and principal.customer_id == str(customer_id):
        return principal
    raise AuthorizationDenied("You can only access your own bookings")
