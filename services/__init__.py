from .auth_service import StaffAuthService
from .booking_service import BookingService
from .customer_auth_service import CustomerAuthService
from .customer_service import CustomerService
from .passwords import PasswordHasher
from .puja_type_service import PujaTypeService
