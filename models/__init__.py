# models/__init__.py
from .user import User, STAFF_ROLES
from .customer import Customer
from .puja_type import PujaType
from .booking import PujaBooking, BOOKING_STATUSES, BOOKING_MODES, CURRENCIES
