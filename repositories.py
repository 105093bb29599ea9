"""Repositories - database access for the credential store, catalog and bookings"""

from typing import Optional

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from models import Customer, PujaBooking, PujaType, User


class UserRepository:
    """Repository for staff user database operations"""

    @staticmethod
    def get_by_username(db: Session, username: str) -> Optional[User]:
        """Exact, case-sensitive username match"""
        return db.execute(select(User).where(User.username == username)).scalar_one_or_none()

    @staticmethod
    def get_by_email(db: Session, email: str) -> Optional[User]:
        return db.execute(select(User).where(User.email == email)).scalar_one_or_none()

    @staticmethod
    def add(db: Session, user: User) -> User:
        db.add(user)
        db.flush()
        return user


class CustomerRepository:
    """Repository for customer database operations"""

    @staticmethod
    def get_all(db: Session) -> list[Customer]:
        return list(db.execute(select(Customer).order_by(Customer.created_at.desc())).scalars())

    @staticmethod
    def get_by_id(db: Session, customer_id) -> Optional[Customer]:
        return db.get(Customer, customer_id)

    @staticmethod
    def get_by_email(db: Session, email: str, exclude_id=None) -> Optional[Customer]:
        query = select(Customer).where(Customer.email == email)
        if exclude_id is not None:
            query = query.where(Customer.id != exclude_id)
        return db.execute(query.limit(1)).scalar_one_or_none()

    @staticmethod
    def get_by_contact(db: Session, contact_number: str, exclude_id=None) -> Optional[Customer]:
        query = select(Customer).where(Customer.contact_number == contact_number)
        if exclude_id is not None:
            query = query.where(Customer.id != exclude_id)
        return db.execute(query.limit(1)).scalar_one_or_none()

    @staticmethod
    def get_by_email_or_contact(db: Session, email_or_contact: str) -> Optional[Customer]:
        """Single login field matched against either email or contact number"""
        query = select(Customer).where(
            or_(Customer.email == email_or_contact, Customer.contact_number == email_or_contact)
        )
        return db.execute(query.limit(1)).scalar_one_or_none()

    @staticmethod
    def get_by_state(db: Session, state: str) -> list[Customer]:
        query = (
            select(Customer)
            .where(Customer.state == state)
            .order_by(Customer.last_name, Customer.first_name)
        )
        return list(db.execute(query).scalars())

    @staticmethod
    def exists(db: Session, customer_id) -> bool:
        query = select(func.count()).select_from(Customer).where(Customer.id == customer_id)
        return db.execute(query).scalar_one() > 0

    @staticmethod
    def add(db: Session, customer: Customer) -> Customer:
        db.add(customer)
        db.flush()
        return customer


class PujaTypeRepository:
    """Repository for catalog database operations"""

    @staticmethod
    def get_all(db: Session) -> list[PujaType]:
        return list(db.execute(select(PujaType).order_by(PujaType.id)).scalars())

    @staticmethod
    def get_active(db: Session) -> list[PujaType]:
        query = select(PujaType).where(PujaType.is_active.is_(True)).order_by(PujaType.id)
        return list(db.execute(query).scalars())

    @staticmethod
    def get_by_id(db: Session, puja_type_id: int) -> Optional[PujaType]:
        return db.get(PujaType, puja_type_id)

    @staticmethod
    def exists(db: Session, puja_type_id: int) -> bool:
        query = select(func.count()).select_from(PujaType).where(PujaType.id == puja_type_id)
        return db.execute(query).scalar_one() > 0

    @staticmethod
    def add(db: Session, puja_type: PujaType) -> PujaType:
        db.add(puja_type)
        db.flush()
        return puja_type


class BookingRepository:
    """Repository for booking database operations"""

    @staticmethod
    def _newest_first(query):
        return query.order_by(PujaBooking.created_at.desc(), PujaBooking.id.desc())

    @staticmethod
    def _fetch(db: Session, query) -> list[PujaBooking]:
        return list(db.execute(query).unique().scalars())

    def get_all(self, db: Session) -> list[PujaBooking]:
        return self._fetch(db, self._newest_first(select(PujaBooking)))

    @staticmethod
    def get_by_id(db: Session, booking_id: int) -> Optional[PujaBooking]:
        return db.get(PujaBooking, booking_id)

    def get_by_customer(self, db: Session, customer_id) -> list[PujaBooking]:
        query = select(PujaBooking).where(PujaBooking.customer_id == customer_id)
        return self._fetch(db, self._newest_first(query))

    def get_by_puja_type(self, db: Session, puja_type_id: int) -> list[PujaBooking]:
        query = select(PujaBooking).where(PujaBooking.puja_type_id == puja_type_id)
        return self._fetch(db, self._newest_first(query))

    def get_by_status(self, db: Session, status: str) -> list[PujaBooking]:
        query = select(PujaBooking).where(PujaBooking.status == status)
        return self._fetch(db, self._newest_first(query))

    def get_by_date_range(self, db: Session, start_date, end_date) -> list[PujaBooking]:
        """Inclusive on both ends, earliest puja date first"""
        query = (
            select(PujaBooking)
            .where(PujaBooking.puja_date >= start_date, PujaBooking.puja_date <= end_date)
            .order_by(PujaBooking.puja_date, PujaBooking.puja_time, PujaBooking.id)
        )
        return self._fetch(db, query)

    def get_pending_payments(self, db: Session) -> list[PujaBooking]:
        query = select(PujaBooking).where(
            PujaBooking.is_paid.is_(False), PujaBooking.status != "Cancelled"
        )
        return self._fetch(db, self._newest_first(query))

    @staticmethod
    def total_revenue(db: Session):
        query = select(func.coalesce(func.sum(PujaBooking.total_amount), 0)).where(
            PujaBooking.is_paid.is_(True), PujaBooking.status != "Cancelled"
        )
        return db.execute(query).scalar_one()

    @staticmethod
    def count_active(db: Session) -> int:
        query = select(func.count()).select_from(PujaBooking).where(PujaBooking.status != "Cancelled")
        return db.execute(query).scalar_one()

    @staticmethod
    def exists(db: Session, booking_id: int) -> bool:
        query = select(func.count()).select_from(PujaBooking).where(PujaBooking.id == booking_id)
        return db.execute(query).scalar_one() > 0

    @staticmethod
    def add(db: Session, booking: PujaBooking) -> PujaBooking:
        db.add(booking)
        db.flush()
        return booking
