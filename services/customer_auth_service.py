"""Customer self-service authentication"""

import logging

from sqlalchemy.exc import IntegrityError

from errors import AuthenticationFailed, DuplicateEntity, NotFound
from models import Customer
from repositories import CustomerRepository
from schemas import parse_uuid
from services.base import BaseService, utcnow
from services.passwords import PasswordHasher
from services.tokens import issue_customer_token

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = (
    "Invalid email/contact number or password. Please check your credentials and try again."
)


class CustomerAuthService(BaseService):
    entity_label = "Customer"

    def __init__(self, db, config):
        super().__init__(db)
        self.repo = CustomerRepository()
        self.hasher = PasswordHasher(config.get("PASSWORD_HASH_SCHEME", "sha256"))
        self.expiry_hours = int(config.get("JWT_EXPIRY_HOURS", 24))

    def login(self, dto):
        customer = self.repo.get_by_email_or_contact(self.db, dto.email_or_contact)

        # Customers created through plain CRUD have no credential
        if customer is None or not customer.can_log_in():
            logger.warning(f"Login failed: customer {dto.email_or_contact} not found, inactive or without a password")
            raise AuthenticationFailed(INVALID_CREDENTIALS)

        if not self.hasher.verify(dto.password, customer.password_hash):
            logger.warning(f"Login failed: invalid password for customer {dto.email_or_contact}")
            raise AuthenticationFailed(INVALID_CREDENTIALS)

        return self._auth_response(customer)

    def register(self, dto):
        if dto.email and self.repo.get_by_email(self.db, dto.email) is not None:
            raise DuplicateEntity("A customer with this email already exists")
        if self.repo.get_by_contact(self.db, dto.contact_number) is not None:
            raise DuplicateEntity("A customer with this contact number already exists")

        now = utcnow()
        customer = Customer(
            first_name=dto.first_name,
            last_name=dto.last_name,
            contact_number=dto.contact_number,
            email=dto.email,
            password_hash=self.hasher.hash(dto.password),
            country=dto.country,
            state=dto.state,
            district=dto.district,
            is_active=1,
            created_at=now,
            updated_at=now,
        )
        try:
            self.repo.add(self.db, customer)
            self._commit()
        except IntegrityError as exc:
            raise DuplicateEntity("A customer with this email or contact number already exists") from exc

        logger.info(f"Registered customer {customer.id}")
        return self._auth_response(customer)

    def get_profile(self, customer_id_claim):
        """Resolve the customer_id claim of a Customer token to an active customer."""
        customer_id = parse_uuid(customer_id_claim) if customer_id_claim else None
        if customer_id is None:
            raise AuthenticationFailed("Invalid token")

        customer = self.repo.get_by_id(self.db, customer_id)
        if customer is None:
            raise NotFound("Customer not found")
        if not customer.active:
            raise AuthenticationFailed("Customer account is inactive")
        return customer

    def _auth_response(self, customer):
        token, expires_at = issue_customer_token(customer, self.expiry_hours)
        return {
            "token": token,
            "customerId": str(customer.id),
            "firstName": customer.first_name,
            "lastName": customer.last_name,
            "email": customer.email or "",
            "contactNumber": customer.contact_number,
            "expiresAt": expires_at.isoformat(),
        }
