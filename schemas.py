"""Request payloads for the JSON API - Pydantic models for validation.

Every ``from_payload`` validates a decoded JSON body against the model and
turns all of pydantic's errors into a single ``ValidationFailure``.
"""
import uuid
from datetime import date, time
from decimal import Decimal
from typing import Literal, Optional, get_args

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    ValidationError,
    condecimal,
    constr,
    field_validator,
    model_validator,
)

from errors import ValidationFailure

CONTACT_PATTERN = r"^[0-9+\-\s()]*$"
MAX_AMOUNT = Decimal("9999999999.99")
MAX_PRICE = Decimal("999999.99")
MAX_ID = 2**31 - 1

Role = Literal["Admin", "Manager", "User"]
BookingMode = Literal["Online", "Offline", "Phone"]
BookingStatus = Literal["Pending", "Confirmed", "Completed", "Cancelled"]
Currency = Literal["INR", "USD", "EUR", "GBP"]

_MESSAGES = {
    "missing": "{label} is required",
    "string_type": "{label} must be text",
    "string_too_short": "{label} must be at least {min_length} characters",
    "string_too_long": "{label} cannot exceed {max_length} characters",
    "string_pattern_mismatch": "{label} can only contain digits, +, -, spaces, and parentheses",
    "greater_than_equal": "{label} must be greater than or equal to {ge}",
    "less_than_equal": "{label} cannot exceed {le}",
    "int_type": "{label} must be a whole number",
    "int_parsing": "{label} must be a whole number",
    "int_from_float": "{label} must be a whole number",
    "finite_number": "{label} must be a finite number",
    "decimal_type": "{label} must be a number",
    "decimal_parsing": "{label} must be a number",
    "bool_type": "{label} must be true or false",
    "bool_parsing": "{label} must be true or false",
    "date_type": "{label} must be a date (YYYY-MM-DD)",
    "date_parsing": "{label} must be a date (YYYY-MM-DD)",
    "date_from_datetime_parsing": "{label} must be a date (YYYY-MM-DD)",
    "date_from_datetime_inexact": "{label} must be a date (YYYY-MM-DD)",
    "time_type": "{label} must be a time of day (HH:MM or HH:MM:SS)",
    "time_parsing": "{label} must be a time of day (HH:MM or HH:MM:SS)",
    "uuid_type": "{label} must be a valid GUID",
    "uuid_parsing": "{label} must be a valid GUID",
}


def _label(key):
    return key[:1].upper() + key[1:]


def _choices(model, key):
    for name, info in model.model_fields.items():
        if key in (name, info.alias):
            return ", ".join(get_args(info.annotation))
    return ""


def _describe(model, error):
    ctx = error.get("ctx") or {}
    loc = error.get("loc") or ()
    if not loc:
        # model-level check
        return str(ctx.get("error", error["msg"]))

    key = str(loc[0])
    label = _label(key)
    kind = error["type"]

    if error.get("input", "") is None or (kind == "string_too_short" and ctx.get("min_length") == 1):
        return f"{label} is required"
    if kind == "literal_error":
        return f"{label} must be one of: {_choices(model, key)}"
    if kind == "value_error":
        # EmailStr reports a reason instead of an exception
        return f"{label} {ctx['error']}" if "error" in ctx else f"{label} format is invalid"
    if kind in _MESSAGES:
        return _MESSAGES[kind].format(label=label, **ctx)
    return f"{label}: {error['msg']}"


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


def parse_uuid(value):
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None


class Payload(BaseModel):
    """Base for request bodies: camelCase aliases in, snake_case attributes out."""

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_payload(cls, data):
        if not isinstance(data, dict):
            raise ValidationFailure("Request body must be a JSON object")
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ValidationFailure([_describe(cls, error) for error in exc.errors()]) from None


# ---------------------------------------------------------------------------
# Staff authentication
# ---------------------------------------------------------------------------

class StaffLogin(Payload):
    username: constr(min_length=1)
    password: constr(min_length=1)


class StaffRegistration(Payload):
    username: constr(strip_whitespace=True, min_length=3, max_length=100)
    email: EmailStr
    password: constr(min_length=6, max_length=100)
    role: Role = "User"

    @field_validator("role", mode="before")
    @classmethod
    def default_role(cls, v):
        return _blank_to_none(v) or "User"


# ---------------------------------------------------------------------------
# Customers
# ---------------------------------------------------------------------------

class CustomerInput(Payload):
    """The contact-details shape shared by CRUD and self-registration."""

    first_name: constr(strip_whitespace=True, min_length=2, max_length=120) = Field(alias="firstName")
    last_name: constr(strip_whitespace=True, min_length=2, max_length=120) = Field(alias="lastName")
    contact_number: constr(
        strip_whitespace=True, min_length=10, max_length=20, pattern=CONTACT_PATTERN
    ) = Field(alias="contactNumber")
    email: Optional[EmailStr] = None
    country: Optional[constr(strip_whitespace=True, max_length=120)] = None
    state: Optional[constr(strip_whitespace=True, max_length=120)] = None
    district: Optional[constr(strip_whitespace=True, max_length=120)] = None

    @field_validator("email", "country", "state", "district", mode="before")
    @classmethod
    def blank_is_missing(cls, v):
        return _blank_to_none(v)


class CustomerRegistration(CustomerInput):
    email: EmailStr
    password: constr(min_length=6, max_length=100)


class CustomerLogin(Payload):
    email_or_contact: constr(strip_whitespace=True, min_length=1) = Field(alias="emailOrContact")
    password: constr(min_length=1)


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class PujaTypeInput(Payload):
    name: constr(strip_whitespace=True, min_length=3, max_length=500) = Field(alias="pujaTypeName")
    price: condecimal(ge=0, le=MAX_PRICE)
    description: Optional[str] = None
    image_url: Optional[constr(strip_whitespace=True, max_length=500)] = Field(default=None, alias="imageUrl")
    benefits: Optional[str] = Field(default=None, alias="benefitOfPooja")
    duration: Optional[constr(strip_whitespace=True, max_length=100)] = Field(default=None, alias="poojaDuration")
    required_items: Optional[str] = Field(default=None, alias="requiredThings")
    is_active: bool = Field(default=True, alias="isActive")

    @field_validator("image_url", "duration", mode="before")
    @classmethod
    def blank_is_missing(cls, v):
        return _blank_to_none(v)


class PujaTypeUpdate(PujaTypeInput):
    """Full replacement; the active flag must be stated explicitly."""

    is_active: bool = Field(alias="isActive")


# ---------------------------------------------------------------------------
# Bookings
# ---------------------------------------------------------------------------

class BookingFields(Payload):
    puja_type_id: int = Field(alias="pujaTypeId", ge=1, le=MAX_ID)
    booking_mode: BookingMode = Field(alias="bookingMode")
    puja_date: date = Field(alias="pujaDate")
    puja_time: Optional[time] = Field(default=None, alias="pujaTime")
    people_count: int = Field(alias="peopleCount", ge=1, le=1000)
    note: Optional[str] = None
    total_amount: condecimal(ge=0, le=MAX_AMOUNT) = Field(alias="totalAmount")
    currency: Currency = "INR"

    @field_validator("puja_time", mode="before")
    @classmethod
    def blank_time(cls, v):
        return _blank_to_none(v)

    @field_validator("booking_mode", "currency", mode="before")
    @classmethod
    def trim_choice(cls, v):
        return v.strip() if isinstance(v, str) else v


class BookingCreate(BookingFields):
    customer_id: uuid.UUID = Field(alias="customerId")


class BookingUpdate(BookingFields):
    status: BookingStatus = Field(alias="bookingStatus")
    is_paid: bool = Field(alias="isPaid")


class StatusChange(Payload):
    status: BookingStatus = Field(alias="bookingStatus")


class PaymentChange(Payload):
    is_paid: bool = Field(alias="isPaid")


class DateRange(Payload):
    start: date = Field(alias="startDate")
    end: date = Field(alias="endDate")

    @model_validator(mode="after")
    def ordered(self):
        if self.start > self.end:
            raise ValueError("startDate must not be after endDate")
        return self

    @classmethod
    def from_query(cls, args):
        return cls.from_payload({key: args.get(key) for key in ("startDate", "endDate") if args.get(key)})
