"""Password hashing.

The default ``sha256`` scheme is a single unsalted SHA-256 pass, Base64
encoded. It is kept only so hashes stay compatible with rows created by the
previous system; it has no salt and no work factor and is NOT suitable for
new deployments. Set ``PASSWORD_HASH_SCHEME=bcrypt`` to store bcrypt hashes
instead; bcrypt hashes are always recognised on verify so existing stores can
be migrated one login at a time.
"""
import base64
import hashlib
import hmac

from flask_bcrypt import check_password_hash, generate_password_hash

SHA256_SCHEME = "sha256"
BCRYPT_SCHEME = "bcrypt"
SCHEMES = (SHA256_SCHEME, BCRYPT_SCHEME)


def sha256_digest(password):
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


def is_bcrypt_hash(password_hash):
    return password_hash.startswith(("$2a$", "$2b$", "$2y$"))


class PasswordHasher:
    def __init__(self, scheme=SHA256_SCHEME):
        if scheme not in SCHEMES:
            raise ValueError(f"Unknown password hash scheme: {scheme!r} (expected one of {SCHEMES})")
        self.scheme = scheme

    def hash(self, password):
        if self.scheme == BCRYPT_SCHEME:
            return generate_password_hash(password).decode("utf-8")
        return sha256_digest(password)

    def verify(self, password, password_hash):
        if not password_hash:
            return False
        if is_bcrypt_hash(password_hash):
            return check_password_hash(password_hash, password)
        return hmac.compare_digest(sha256_digest(password).encode("ascii"), password_hash.encode("utf-8"))
