"""Payload validation: every problem is reported, not just the first."""

from datetime import date, time
from decimal import Decimal

import pytest

from errors import ValidationFailure
from schemas import (
    BookingCreate,
    BookingUpdate,
    CustomerInput,
    CustomerRegistration,
    DateRange,
    PujaTypeInput,
    PujaTypeUpdate,
    StaffRegistration,
    StatusChange,
)

CUSTOMER_ID = "6f1c2a8e-1b7d-4c1e-9f6a-0d2b3c4e5f60"


def _errors(schema, payload):
    with pytest.raises(ValidationFailure) as exc:
        schema.from_payload(payload)
    return exc.value.errors


def _booking(**overrides):
    payload = {
        "pujaTypeId": 1,
        "customerId": CUSTOMER_ID,
        "bookingMode": "Online",
        "pujaDate": "2030-01-15",
        "peopleCount": 2,
        "totalAmount": "1100.50",
    }
    payload.update(overrides)
    return payload


class TestCustomerPayloads:
    def test_valid_payload_is_trimmed(self):
        dto = CustomerInput.from_payload({
            "firstName": "  Asha ",
            "lastName": "Rao",
            "contactNumber": "+91 98765-43210",
            "email": "",
            "state": "Karnataka",
        })

        assert dto.first_name == "Asha"
        assert dto.email is None
        assert dto.state == "Karnataka"

    def test_all_problems_collected(self):
        errors = _errors(CustomerInput, {"firstName": "A", "contactNumber": "12ab", "email": "not-an-email"})

        assert "FirstName must be at least 2 characters" in errors
        assert "LastName is required" in errors
        assert "ContactNumber must be at least 10 characters" in errors
        assert "Email format is invalid" in errors
        assert len(errors) == 4

    def test_contact_characters(self):
        errors = _errors(CustomerInput, {"firstName": "Asha", "lastName": "Rao", "contactNumber": "98765abcde"})
        assert errors == ["ContactNumber can only contain digits, +, -, spaces, and parentheses"]

    def test_explicit_null_is_missing(self):
        errors = _errors(CustomerInput, {"firstName": None, "lastName": "Rao", "contactNumber": "9876543210"})
        assert errors == ["FirstName is required"]

    def test_registration_requires_email_and_password(self):
        errors = _errors(CustomerRegistration, {"firstName": "Asha", "lastName": "Rao", "contactNumber": "9876543210"})

        assert "Email is required" in errors
        assert "Password is required" in errors

    def test_short_password(self):
        errors = _errors(CustomerRegistration, {
            "firstName": "Asha", "lastName": "Rao", "contactNumber": "9876543210",
            "email": "asha@pujapath.org", "password": "12345",
        })
        assert errors == ["Password must be at least 6 characters"]

    def test_password_is_not_trimmed(self):
        dto = CustomerRegistration.from_payload({
            "firstName": "Asha", "lastName": "Rao", "contactNumber": "9876543210",
            "email": "asha@pujapath.org", "password": " secret ",
        })
        assert dto.password == " secret "

    def test_body_must_be_an_object(self):
        assert _errors(CustomerInput, ["firstName"]) == ["Request body must be a JSON object"]


class TestStaffPayloads:
    def test_role_defaults_to_user(self):
        dto = StaffRegistration.from_payload(
            {"username": "pandit", "email": "pandit@pujapath.org", "password": "staffpass", "role": ""}
        )
        assert dto.role == "User"

    def test_unknown_role(self):
        errors = _errors(StaffRegistration, {
            "username": "pandit", "email": "pandit@pujapath.org", "password": "staffpass", "role": "Root",
        })
        assert errors == ["Role must be one of: Admin, Manager, User"]


class TestPujaTypePayloads:
    def test_defaults_to_active_on_create(self):
        dto = PujaTypeInput.from_payload({"pujaTypeName": "Ganesh Puja", "price": "500.00"})

        assert dto.is_active is True
        assert dto.price == Decimal("500.00")

    def test_is_active_required_on_update(self):
        errors = _errors(PujaTypeUpdate, {"pujaTypeName": "Ganesh Puja", "price": 500})
        assert errors == ["IsActive is required"]

    def test_price_bounds(self):
        too_high = _errors(PujaTypeInput, {"pujaTypeName": "Havan", "price": 1000000})
        negative = _errors(PujaTypeInput, {"pujaTypeName": "Havan", "price": -1})

        assert too_high[0].startswith("Price cannot exceed 999999.99")
        assert negative == ["Price must be greater than or equal to 0"]


class TestBookingPayloads:
    def test_valid_create(self):
        dto = BookingCreate.from_payload(_booking(pujaTypeId="3", bookingMode="Phone", pujaTime="18:45"))

        assert dto.puja_type_id == 3
        assert dto.puja_date == date(2030, 1, 15)
        assert dto.puja_time == time(18, 45)
        assert dto.currency == "INR"
        assert dto.total_amount == Decimal("1100.50")

    def test_empty_create_lists_every_missing_field(self):
        errors = _errors(BookingCreate, {})

        assert "PujaDate is required" in errors
        assert "BookingMode is required" in errors
        assert "PujaTypeId is required" in errors
        assert "PeopleCount is required" in errors
        assert "TotalAmount is required" in errors
        assert "CustomerId is required" in errors

    def test_out_of_range_values(self):
        errors = _errors(BookingCreate, _booking(
            bookingMode="Carrier pigeon",
            pujaDate="15/01/2030",
            peopleCount=0,
            currency="JPY",
        ))

        assert "BookingMode must be one of: Online, Offline, Phone" in errors
        assert "PujaDate must be a date (YYYY-MM-DD)" in errors
        assert "PeopleCount must be greater than or equal to 1" in errors
        assert "Currency must be one of: INR, USD, EUR, GBP" in errors

    def test_malformed_customer_id(self):
        assert _errors(BookingCreate, _booking(customerId="not-a-guid")) == ["CustomerId must be a valid GUID"]

    def test_infinite_people_count_is_rejected(self):
        assert _errors(BookingCreate, _booking(peopleCount=float("inf"))) == ["PeopleCount must be a finite number"]

    def test_huge_puja_type_id_is_rejected(self):
        errors = _errors(BookingCreate, _booking(pujaTypeId=10**30))
        assert errors == ["PujaTypeId cannot exceed 2147483647"]

    def test_infinite_amount_is_rejected(self):
        errors = _errors(BookingCreate, _booking(totalAmount=float("inf")))
        assert len(errors) == 1
        assert errors[0].startswith("TotalAmount")

    def test_update_requires_status_and_paid_flag(self):
        payload = _booking(bookingStatus="Done")
        del payload["customerId"]
        errors = _errors(BookingUpdate, payload)

        assert "BookingStatus must be one of: Pending, Confirmed, Completed, Cancelled" in errors
        assert "IsPaid is required" in errors

    def test_status_change(self):
        assert StatusChange.from_payload({"bookingStatus": "Completed"}).status == "Completed"
        assert _errors(StatusChange, {}) == ["BookingStatus is required"]


class TestDateRange:
    def test_inverted_range(self):
        with pytest.raises(ValidationFailure, match="startDate must not be after endDate"):
            DateRange.from_query({"startDate": "2030-02-01", "endDate": "2030-01-01"})

    def test_missing_bounds(self):
        with pytest.raises(ValidationFailure) as exc:
            DateRange.from_query({})
        assert len(exc.value.errors) == 2
