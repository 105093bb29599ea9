"""Booking service - lifecycle, payment flag and reporting for puja bookings.

Guards differ per operation:

* ``update``      refuses bookings that are already Cancelled
* ``cancel``      refuses bookings that are Completed
* ``set_status``  accepts any of the four statuses unconditionally
"""

import logging
from datetime import date
from decimal import Decimal

from errors import InvalidTransition, NotFound, ValidationFailure
from models import PujaBooking
from repositories import BookingRepository, CustomerRepository, PujaTypeRepository
from services.base import BaseService, utcnow

logger = logging.getLogger(__name__)

CANCELLED = "Cancelled"
COMPLETED = "Completed"


class BookingService(BaseService):
    entity_label = "Booking"

    def __init__(self, db):
        super().__init__(db)
        self.repo = BookingRepository()
        self.puja_types = PujaTypeRepository()
        self.customers = CustomerRepository()

    # -- reads -------------------------------------------------------------

    def get_all(self):
        return self.repo.get_all(self.db)

    def get(self, booking_id):
        booking = self.repo.get_by_id(self.db, booking_id)
        if booking is None:
            raise NotFound(f"Booking with ID {booking_id} not found")
        return booking

    def get_by_customer(self, customer_id):
        return self.repo.get_by_customer(self.db, customer_id)

    def get_by_puja_type(self, puja_type_id):
        return self.repo.get_by_puja_type(self.db, puja_type_id)

    def get_by_status(self, status):
        return self.repo.get_by_status(self.db, status)

    def get_by_date_range(self, start_date, end_date):
        if start_date > end_date:
            raise ValidationFailure("startDate must not be after endDate")
        return self.repo.get_by_date_range(self.db, start_date, end_date)

    def get_pending_payments(self):
        return self.repo.get_pending_payments(self.db)

    def total_revenue(self):
        """Sum of paid, non-cancelled bookings."""
        return Decimal(str(self.repo.total_revenue(self.db))).quantize(Decimal("0.01"))

    def total_bookings(self):
        return self.repo.count_active(self.db)

    # -- writes ------------------------------------------------------------

    def create(self, dto):
        if not self.puja_types.exists(self.db, dto.puja_type_id):
            raise ValidationFailure(f"PujaType with ID {dto.puja_type_id} not found")

        if not self.customers.exists(self.db, dto.customer_id):
            raise ValidationFailure(f"Customer with ID {dto.customer_id} not found")

        if dto.puja_date < date.today():
            raise ValidationFailure("Booking date cannot be in the past")

        booking = PujaBooking(
            puja_type_id=dto.puja_type_id,
            customer_id=dto.customer_id,
            booking_mode=dto.booking_mode.strip(),
            puja_date=dto.puja_date,
            puja_time=dto.puja_time,
            people_count=dto.people_count,
            note=dto.note,
            status="Pending",
            total_amount=dto.total_amount,
            currency=dto.currency,
            is_paid=False,
            created_at=utcnow(),
        )
        self.repo.add(self.db, booking)
        self._commit()
        logger.info(f"Created booking {booking.id} for customer {booking.customer_id}")
        return booking

    def update(self, booking_id, dto):
        """Full overwrite, including status and paid flag."""
        booking = self.get(booking_id)

        if not self.puja_types.exists(self.db, dto.puja_type_id):
            raise ValidationFailure(f"PujaType with ID {dto.puja_type_id} not found")

        if booking.status == CANCELLED:
            logger.warning(f"Refused update of cancelled booking {booking_id}")
            raise InvalidTransition("Cannot update a cancelled booking")

        booking.puja_type_id = dto.puja_type_id
        booking.booking_mode = dto.booking_mode.strip()
        booking.puja_date = dto.puja_date
        booking.puja_time = dto.puja_time
        booking.people_count = dto.people_count
        booking.note = dto.note
        booking.status = dto.status
        booking.total_amount = dto.total_amount
        booking.currency = dto.currency
        booking.is_paid = dto.is_paid
        booking.updated_at = utcnow()

        self._save_changes(booking_id, self.repo.exists)
        # Reload the joined puja type if the reference changed
        self.db.refresh(booking)
        return booking

    def set_status(self, booking_id, dto):
        """Overwrite the status without consulting the transition graph."""
        booking = self.get(booking_id)
        booking.status = dto.status
        booking.updated_at = utcnow()
        self._save_changes(booking_id, self.repo.exists)
        return booking

    def set_payment_status(self, booking_id, dto):
        booking = self.get(booking_id)
        booking.is_paid = dto.is_paid
        booking.updated_at = utcnow()
        self._save_changes(booking_id, self.repo.exists)
        return booking

    def cancel(self, booking_id):
        booking = self.get(booking_id)

        if booking.status == COMPLETED:
            logger.warning(f"Refused cancellation of completed booking {booking_id}")
            raise InvalidTransition("Cannot cancel a completed booking")

        booking.status = CANCELLED
        booking.updated_at = utcnow()
        self._save_changes(booking_id, self.repo.exists)
        return booking

    def delete(self, booking_id):
        booking = self.get(booking_id)
        self._delete(booking, booking_id, self.repo.exists)
        logger.info(f"Deleted booking {booking_id}")
