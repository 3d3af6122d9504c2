"""
Password Hasher Implementation
bcrypt with a per-hash random salt
"""
import bcrypt

from jobboard.application.services.auth.interfaces import IPasswordHasher
from jobboard.core.exceptions import ValidationException


# bcrypt only looks at the first 72 bytes of input
MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(IPasswordHasher):
    """bcrypt password hasher"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash_password(self, password: str) -> str:
        """Hash a plain password with a fresh salt"""
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValidationException(
                "password", f"must be at most {MAX_PASSWORD_BYTES} bytes"
            )
        digest = bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self.rounds))
        return digest.decode("utf-8")

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Constant-time check; False on mismatch or a malformed digest"""
        try:
            return bcrypt.checkpw(
                plain_password.encode("utf-8"),
                hashed_password.encode("utf-8"),
            )
        except ValueError:
            return False
