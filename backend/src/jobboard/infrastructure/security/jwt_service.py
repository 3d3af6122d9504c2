"""
JWT Service Implementation
HS256 access tokens signed with the configured secret
"""
from datetime import datetime, timedelta
from uuid import UUID

from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError
from loguru import logger

from jobboard.core.exceptions import InvalidTokenException, ExpiredTokenException
from jobboard.application.services.auth.interfaces import IJwtService, TokenIdentity


class JwtService(IJwtService):
    """Stateless JWT access tokens"""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int = 60
    ):
        if not secret_key:
            raise ValueError("JWT secret key is required")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def create_access_token(self, user_id: UUID, email: str) -> str:
        """Create access token"""
        now = datetime.utcnow()
        expire = now + timedelta(minutes=self.expire_minutes)

        payload = {
            "sub": str(user_id),
            "email": email,
            "exp": expire,
            "iat": now,
            "type": "access"
        }

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> TokenIdentity:
        """Verify signature and expiry, then extract the caller identity"""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise ExpiredTokenException()
        except JWTError as e:
            logger.warning(f"JWT verification failed: {str(e)}")
            raise InvalidTokenException()

        if payload.get("type") != "access":
            raise InvalidTokenException("Invalid token type")

        subject = payload.get("sub")
        email = payload.get("email")
        if not subject or not email:
            raise InvalidTokenException("Malformed token payload")

        try:
            user_id = UUID(subject)
        except (TypeError, ValueError):
            raise InvalidTokenException("Malformed token payload")

        return TokenIdentity(user_id=user_id, email=email)
