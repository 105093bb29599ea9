"""Customer service - CRUD and lookups over the customer store"""

import logging

from sqlalchemy.exc import IntegrityError

from errors import DuplicateEntity, NotFound
from models import Customer
from repositories import CustomerRepository
from services.base import BaseService, utcnow

logger = logging.getLogger(__name__)


class CustomerService(BaseService):
    entity_label = "Customer"

    def __init__(self, db):
        super().__init__(db)
        self.repo = CustomerRepository()

    def get_all(self):
        return self.repo.get_all(self.db)

    def get(self, customer_id):
        customer = self.repo.get_by_id(self.db, customer_id)
        if customer is None:
            raise NotFound(f"Customer with ID {customer_id} not found")
        return customer

    def get_by_email(self, email):
        customer = self.repo.get_by_email(self.db, email)
        if customer is None:
            raise NotFound(f"Customer with email {email} not found")
        return customer

    def get_by_contact(self, contact_number):
        customer = self.repo.get_by_contact(self.db, contact_number)
        if customer is None:
            raise NotFound(f"Customer with contact number {contact_number} not found")
        return customer

    def get_by_state(self, state):
        return self.repo.get_by_state(self.db, state)

    def create(self, dto):
        """Create a customer from a validated CustomerInput (no credential)."""
        self._check_unique(dto)

        customer = Customer(
            first_name=dto.first_name,
            last_name=dto.last_name,
            contact_number=dto.contact_number,
            email=dto.email,
            country=dto.country,
            state=dto.state,
            district=dto.district,
            is_active=1,
            created_at=utcnow(),
        )
        try:
            self.repo.add(self.db, customer)
            self._commit()
        except IntegrityError as exc:
            raise DuplicateEntity("A customer with this email or contact number already exists") from exc

        logger.info(f"Created customer {customer.id}")
        return customer

    def update(self, customer_id, dto):
        customer = self.get(customer_id)
        self._check_unique(dto, exclude_id=customer.id)

        customer.first_name = dto.first_name
        customer.last_name = dto.last_name
        customer.contact_number = dto.contact_number
        customer.email = dto.email
        customer.country = dto.country
        customer.state = dto.state
        customer.district = dto.district
        customer.updated_at = utcnow()

        try:
            self._save_changes(customer.id, self.repo.exists)
        except IntegrityError as exc:
            raise DuplicateEntity("A customer with this email or contact number already exists") from exc
        return customer

    def delete(self, customer_id):
        customer = self.get(customer_id)
        self._delete(customer, customer.id, self.repo.exists)
        logger.info(f"Deleted customer {customer_id}")

    def _check_unique(self, dto, exclude_id=None):
        if dto.email and self.repo.get_by_email(self.db, dto.email, exclude_id) is not None:
            raise DuplicateEntity("A customer with this email already exists")
        if self.repo.get_by_contact(self.db, dto.contact_number, exclude_id) is not None:
            raise DuplicateEntity("A customer with this contact number already exists")
