"""Shared fixtures: a fresh in-memory database per test plus ready-made principals."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from app import create_app
from config import TestingConfig
from database import db
from models import PujaType
from schemas import CustomerRegistration, StaffRegistration
from services import CustomerAuthService, StaffAuthService


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session(app):
    return db.session


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


def register_staff(app, username, role):
    dto = StaffRegistration(
        username=username, email=f"{username}@pujapath.org", password="staffpass", role=role
    )
    return StaffAuthService(db.session, app.config).register(dto)


def register_customer(app, first_name="Asha", last_name="Rao",
                      contact="9876543210", email="asha@pujapath.org", password="secret1"):
    dto = CustomerRegistration(
        first_name=first_name,
        last_name=last_name,
        contact_number=contact,
        email=email,
        password=password,
    )
    return CustomerAuthService(db.session, app.config).register(dto)


@pytest.fixture
def admin_headers(app):
    return bearer(register_staff(app, "admin", "Admin")["token"])


@pytest.fixture
def manager_headers(app):
    return bearer(register_staff(app, "manager", "Manager")["token"])


@pytest.fixture
def clerk_headers(app):
    return bearer(register_staff(app, "clerk", "User")["token"])


@pytest.fixture
def asha(app):
    """A self-registered customer: the auth response dict."""
    return register_customer(app)


@pytest.fixture
def asha_headers(asha):
    return bearer(asha["token"])


@pytest.fixture
def ganesh_puja(session):
    puja_type = PujaType(name="Ganesh Puja", price=Decimal("500.00"), duration="1-2 hours")
    session.add(puja_type)
    session.commit()
    return puja_type


@pytest.fixture
def future_date():
    return date.today() + timedelta(days=30)


def booking_payload(puja_type_id, customer_id, puja_date, **overrides):
    payload = {
        "pujaTypeId": puja_type_id,
        "customerId": str(customer_id),
        "bookingMode": "Online",
        "pujaDate": puja_date.isoformat(),
        "pujaTime": "10:30",
        "peopleCount": 4,
        "totalAmount": 500,
        "currency": "INR",
    }
    payload.update(overrides)
    return payload
