"""Staff authentication - login, registration and token issuance"""

import logging

from sqlalchemy.exc import IntegrityError

from errors import AuthenticationFailed, DuplicateEntity
from models import User
from repositories import UserRepository
from services.base import BaseService, utcnow
from services.passwords import PasswordHasher
from services.tokens import issue_staff_token

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


class StaffAuthService(BaseService):
    entity_label = "User"

    def __init__(self, db, config):
        super().__init__(db)
        self.repo = UserRepository()
        self.hasher = PasswordHasher(config.get("PASSWORD_HASH_SCHEME", "sha256"))
        self.expiry_hours = int(config.get("JWT_EXPIRY_HOURS", 24))

    def login(self, dto):
        user = self.repo.get_by_username(self.db, dto.username)

        # Every failure looks the same to the caller
        if user is None or not user.is_active:
            logger.warning(f"Login failed: user {dto.username} not found or inactive")
            raise AuthenticationFailed(INVALID_CREDENTIALS)

        if not self.hasher.verify(dto.password, user.password_hash):
            logger.warning(f"Login failed: invalid password for user {dto.username}")
            raise AuthenticationFailed(INVALID_CREDENTIALS)

        return self._auth_response(user)

    def register(self, dto):
        if self.repo.get_by_username(self.db, dto.username) is not None:
            raise DuplicateEntity("Username already exists")
        if self.repo.get_by_email(self.db, dto.email) is not None:
            raise DuplicateEntity("Email already exists")

        user = User(
            username=dto.username,
            email=dto.email,
            password_hash=self.hasher.hash(dto.password),
            role=dto.role,
            is_active=True,
            created_at=utcnow(),
        )
        try:
            self.repo.add(self.db, user)
            self._commit()
        except IntegrityError as exc:
            # Lost a race with a concurrent registration
            raise DuplicateEntity("Username or email already exists") from exc

        logger.info(f"Registered staff user {user.username} with role {user.role}")
        return self._auth_response(user)

    def get_user_by_username(self, username):
        return self.repo.get_by_username(self.db, username)

    def hash_password(self, password):
        return self.hasher.hash(password)

    def _auth_response(self, user):
        token, expires_at = issue_staff_token(user, self.expiry_hours)
        return {
            "token": token,
            "username": user.username,
            "email": user.email,
            "role": user.role,
            "expiresAt": expires_at.isoformat(),
        }
