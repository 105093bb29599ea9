# models/user.py
import uuid
from datetime import datetime, timezone

from database import db

STAFF_ROLES = ("Admin", "Manager", "User")


class User(db.Model):
    """Staff principal (Admin / Manager / User)"""

    __tablename__ = "users"

    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    username = db.Column(db.String(100), unique=True, nullable=False)
    email = db.Column(db.String(320), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)

    # User roles: 'Admin', 'Manager', 'User'
    role = db.Column(db.String(50), nullable=False, default="User")
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    # Timestamps
    created_at = db.Column(db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = db.Column(db.DateTime, nullable=True)

    def to_dict(self):
        """Return user data for API responses (never the hash)"""
        return {
            "userId": str(self.id),
            "username": self.username,
            "email": self.email,
            "role": self.role,
            "isActive": self.is_active,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<User {self.username} ({self.role})>"
