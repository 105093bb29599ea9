"""
Tests for both principal types.

Covers:
- PasswordHasher: legacy SHA-256 digests and the bcrypt scheme
- StaffAuthService: register / login / duplicate checks
- CustomerAuthService: register / login by email or contact / profile
- Token claims as seen by the decoder
"""

import uuid

import pytest
from flask_jwt_extended import decode_token

from conftest import register_customer, register_staff
from errors import AuthenticationFailed, DuplicateEntity, NotFound
from schemas import CustomerInput, CustomerLogin, CustomerRegistration, StaffLogin, StaffRegistration
from services import CustomerAuthService, CustomerService, PasswordHasher, StaffAuthService
from services.passwords import sha256_digest


# ════════════════════════════════════════════════════════════════════════
# Password hashing
# ════════════════════════════════════════════════════════════════════════


class TestPasswordHasher:
    def test_sha256_digest_is_base64(self):
        assert sha256_digest("password") == "XohImNooBHFR0OVvjcYpJ3NgPQ1qq73WKhHvch0VQtg="

    def test_hash_then_verify(self):
        hasher = PasswordHasher()
        stored = hasher.hash("secret1")

        assert hasher.verify("secret1", stored)
        assert not hasher.verify("secret2", stored)

    def test_hash_is_deterministic(self):
        hasher = PasswordHasher("sha256")
        assert hasher.hash("secret1") == hasher.hash("secret1")

    def test_empty_stored_hash_never_verifies(self):
        assert PasswordHasher().verify("secret1", None) is False
        assert PasswordHasher().verify("secret1", "") is False

    def test_bcrypt_scheme(self):
        stored = PasswordHasher("bcrypt").hash("secret1")

        assert stored.startswith("$2")
        assert PasswordHasher("bcrypt").verify("secret1", stored)
        # Stores can mix schemes while migrating
        assert PasswordHasher("sha256").verify("secret1", stored)

    def test_unknown_scheme(self):
        with pytest.raises(ValueError):
            PasswordHasher("md5")


# ════════════════════════════════════════════════════════════════════════
# Staff
# ════════════════════════════════════════════════════════════════════════


class TestStaffAuth:
    def test_register_returns_token_and_role(self, app):
        result = register_staff(app, "pandit", "Manager")

        assert result["username"] == "pandit"
        assert result["role"] == "Manager"
        assert result["token"]
        assert result["expiresAt"]

    def test_login(self, app, session):
        register_staff(app, "pandit", "User")
        service = StaffAuthService(session, app.config)

        result = service.login(StaffLogin(username="pandit", password="staffpass"))

        assert result["email"] == "pandit@pujapath.org"

    @pytest.mark.parametrize("username,password", [("pandit", "wrongpass"), ("nobody", "staffpass")])
    def test_login_failures_look_alike(self, app, session, username, password):
        register_staff(app, "pandit", "User")
        service = StaffAuthService(session, app.config)

        with pytest.raises(AuthenticationFailed, match="Invalid username or password"):
            service.login(StaffLogin(username=username, password=password))

    def test_inactive_user_cannot_log_in(self, app, session):
        register_staff(app, "pandit", "User")
        service = StaffAuthService(session, app.config)
        service.get_user_by_username("pandit").is_active = False
        session.commit()

        with pytest.raises(AuthenticationFailed):
            service.login(StaffLogin(username="pandit", password="staffpass"))

    def test_duplicate_username(self, app, session):
        register_staff(app, "pandit", "User")
        dto = StaffRegistration(username="pandit", email="other@pujapath.org", password="staffpass")

        with pytest.raises(DuplicateEntity, match="Username already exists"):
            StaffAuthService(session, app.config).register(dto)

    def test_duplicate_email(self, app, session):
        register_staff(app, "pandit", "User")
        dto = StaffRegistration(username="pandit2", email="pandit@pujapath.org", password="staffpass")

        with pytest.raises(DuplicateEntity, match="Email already exists"):
            StaffAuthService(session, app.config).register(dto)

    def test_staff_token_claims(self, app):
        claims = decode_token(register_staff(app, "pandit", "Admin")["token"])

        assert claims["role"] == "Admin"
        assert claims["username"] == "pandit"
        assert claims["iss"] == app.config["JWT_ISSUER"]
        assert claims["aud"] == app.config["JWT_AUDIENCE"]
        assert "customer_id" not in claims


# ════════════════════════════════════════════════════════════════════════
# Customers
# ════════════════════════════════════════════════════════════════════════


class TestCustomerAuth:
    def test_register_then_login_by_email_and_contact(self, app, session, asha):
        service = CustomerAuthService(session, app.config)

        by_email = service.login(CustomerLogin(email_or_contact="asha@pujapath.org", password="secret1"))
        by_contact = service.login(CustomerLogin(email_or_contact="9876543210", password="secret1"))

        assert by_email["customerId"] == by_contact["customerId"] == asha["customerId"]
        assert by_email["firstName"] == "Asha"

    def test_wrong_password(self, app, session, asha):
        service = CustomerAuthService(session, app.config)

        with pytest.raises(AuthenticationFailed, match="Invalid email/contact number or password"):
            service.login(CustomerLogin(email_or_contact="asha@pujapath.org", password="nope"))

    def test_customer_without_password_cannot_log_in(self, app, session):
        CustomerService(session).create(
            CustomerInput(first_name="Meera", last_name="Iyer", contact_number="9000000001", email="meera@pujapath.org")
        )
        service = CustomerAuthService(session, app.config)

        with pytest.raises(AuthenticationFailed):
            service.login(CustomerLogin(email_or_contact="meera@pujapath.org", password="anything"))

    def test_inactive_customer_cannot_log_in(self, app, session, asha):
        customer = CustomerService(session).get(uuid.UUID(asha["customerId"]))
        customer.is_active = 0
        session.commit()

        dto = CustomerLogin(email_or_contact="9876543210", password="secret1")
        with pytest.raises(AuthenticationFailed):
            CustomerAuthService(session, app.config).login(dto)

    def test_duplicate_email_then_contact(self, app, session, asha):
        service = CustomerAuthService(session, app.config)
        same_email = CustomerRegistration(
            first_name="Asha", last_name="Rao", contact_number="9111111111",
            email="asha@pujapath.org", password="secret1",
        )
        same_contact = CustomerRegistration(
            first_name="Asha", last_name="Rao", contact_number="9876543210",
            email="asha2@pujapath.org", password="secret1",
        )

        with pytest.raises(DuplicateEntity, match="email"):
            service.register(same_email)
        with pytest.raises(DuplicateEntity, match="contact number"):
            service.register(same_contact)

    def test_customer_token_claims(self, asha):
        claims = decode_token(asha["token"])

        assert claims["role"] == "Customer"
        assert claims["customer_id"] == asha["customerId"]
        assert claims["sub"] == asha["customerId"]
        assert claims["name"] == "Asha Rao"
        assert claims["contact"] == "9876543210"

    def test_profile_resolves_by_id(self, app, session, asha):
        register_customer(app, "Ravi", "Kumar", "9123456780", "ravi@pujapath.org")

        customer = CustomerAuthService(session, app.config).get_profile(asha["customerId"])

        assert str(customer.id) == asha["customerId"]
        assert customer.first_name == "Asha"

    def test_profile_with_garbage_claim(self, app, session):
        with pytest.raises(AuthenticationFailed, match="Invalid token"):
            CustomerAuthService(session, app.config).get_profile("not-a-uuid")

    def test_profile_of_deleted_customer(self, app, session):
        with pytest.raises(NotFound):
            CustomerAuthService(session, app.config).get_profile(str(uuid.uuid4()))


class TestRegistrationScenario:
    def test_asha_rao_registers_and_logs_in(self, client):
        registered = client.post("/api/customerauth/register", json={
            "firstName": "Asha",
            "lastName": "Rao",
            "contactNumber": "9876543210",
            "email": "a@example.com",
            "password": "secret1",
        })
        login = client.post(
            "/api/customerauth/login", json={"emailOrContact": "a@example.com", "password": "secret1"}
        )
        wrong = client.post(
            "/api/customerauth/login", json={"emailOrContact": "a@example.com", "password": "wrong"}
        )

        assert registered.status_code == 201
        assert login.status_code == 200
        assert login.get_json()["token"]
        assert login.get_json()["customerId"] == registered.get_json()["customerId"]
        assert wrong.status_code == 401
