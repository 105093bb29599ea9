import os
from datetime import timedelta

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Application configuration read from the environment (.env supported)"""

    # Get database URL with fallback for SQLite (local development)
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL") or "sqlite:///pujapath.db"
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")

    # Bearer tokens
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY")
    JWT_ISSUER = os.getenv("JWT_ISSUER", "pujapath-booking")
    JWT_AUDIENCE = os.getenv("JWT_AUDIENCE", "pujapath-clients")
    JWT_EXPIRY_HOURS = int(os.getenv("JWT_EXPIRY_HOURS", "24"))

    # 'sha256' keeps hashes compatible with existing rows; 'bcrypt' for new deployments
    PASSWORD_HASH_SCHEME = os.getenv("PASSWORD_HASH_SCHEME", "sha256")

    # Development-only switches
    ENABLE_DIAGNOSTICS = _env_flag("ENABLE_DIAGNOSTICS")
    EXPOSE_ERROR_DETAILS = _env_flag("EXPOSE_ERROR_DETAILS")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "test-signing-key-with-enough-length-for-hs256"
    JWT_ISSUER = "pujapath-test"
    JWT_AUDIENCE = "pujapath-test-clients"
    PASSWORD_HASH_SCHEME = "sha256"
    ENABLE_DIAGNOSTICS = False
    EXPOSE_ERROR_DETAILS = False
    LOG_LEVEL = "DEBUG"


def build_settings(config_object):
    """Derive framework settings (JWT, engine options) from a config class."""
    database_url = config_object.SQLALCHEMY_DATABASE_URI
    expiry_hours = int(getattr(config_object, "JWT_EXPIRY_HOURS", 24))

    settings = {
        "JWT_ACCESS_TOKEN_EXPIRES": timedelta(hours=expiry_hours),
        "JWT_ENCODE_ISSUER": config_object.JWT_ISSUER,
        "JWT_DECODE_ISSUER": config_object.JWT_ISSUER,
        "JWT_ENCODE_AUDIENCE": config_object.JWT_AUDIENCE,
        "JWT_DECODE_AUDIENCE": config_object.JWT_AUDIENCE,
        "JWT_TOKEN_LOCATION": ["headers"],
    }

    # Only add connection pooling for PostgreSQL/MySQL/SQL Server (not SQLite)
    if not database_url.startswith("sqlite"):
        settings["SQLALCHEMY_ENGINE_OPTIONS"] = {
            "pool_pre_ping": True,
            "pool_recycle": 300,
            "pool_size": 10,
            "max_overflow": 20,
        }
    return settings
