"""
Authentication Service Implementation
Concrete implementation of IAuthService
"""
from dataclasses import replace
from typing import List, Optional, Tuple
from uuid import UUID, uuid4
from datetime import datetime

from loguru import logger

from jobboard.domain.entities import User
from jobboard.domain.enums import UserRole
from jobboard.domain.patches import UserPatch
from jobboard.domain.value_objects import Email
from jobboard.core.exceptions import (
    AuthorizationException,
    DuplicateResourceException,
    InvalidPasswordException,
    ResourceNotFoundException,
    UnknownEmailException,
    ValidationException,
)
from jobboard.application.repositories.interfaces import IUserRepository
from .interfaces import IAuthService, IJwtService, IPasswordHasher


def _parse_email(email: str) -> Email:
    try:
        return Email(email)
    except ValueError as e:
        raise ValidationException("email", str(e))


class AuthService(IAuthService):
    """Authentication service implementation"""

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
        jwt_service: IJwtService
    ):
        self.user_repo = user_repository
        self.password_hasher = password_hasher
        self.jwt_service = jwt_service

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        phone: Optional[str] = None
    ) -> User:
        """Register a new user"""

        email_vo = _parse_email(email)
        logger.info(f"Registering new user: {email_vo}")

        if not name or not name.strip():
            raise ValidationException("name", "cannot be empty")
        if not password:
            raise ValidationException("password", "cannot be empty")

        if await self.user_repo.exists_by_email(str(email_vo)):
            raise DuplicateResourceException("User", "email", str(email_vo))

        password_hash = self.password_hasher.hash_password(password)

        user = User(
            id=uuid4(),
            email=email_vo,
            password_hash=password_hash,
            name=name.strip(),
            phone=phone,
            role=UserRole.JOB_SEEKER,
            created_at=datetime.utcnow(),
            updated_at=datetime.utcnow()
        )

        created_user = await self.user_repo.create(user)

        logger.info(f"User registered successfully: {email_vo}")

        return created_user

    async def login(self, email: str, password: str) -> Tuple[User, str]:
        """Authenticate user and issue an access token"""

        normalized = email.strip().lower()
        logger.info(f"Login attempt: {normalized}")

        user = await self.user_repo.get_by_email(normalized)
        if not user:
            logger.warning(f"Login failed: User not found - {normalized}")
            raise UnknownEmailException(normalized)

        if not self.password_hasher.verify_password(password, user.password_hash):
            logger.warning(f"Login failed: Invalid password - {normalized}")
            raise InvalidPasswordException()

        token = self.jwt_service.create_access_token(user.id, str(user.email))

        logger.info(f"User logged in successfully: {normalized}")

        return user, token

    async def get_profile(self, user_id: UUID) -> User:
        user = await self.user_repo.get_profile(user_id)
        if not user:
            raise ResourceNotFoundException("User", str(user_id))
        return user

    async def list_users(self) -> List[User]:
        return await self.user_repo.list_all()

    async def update_user(self, user_id: UUID, caller_id: UUID, patch: UserPatch) -> User:
        """Partial update of the caller's own account; role is never client-patchable"""

        if user_id != caller_id:
            logger.warning(f"User {caller_id} attempted to update user {user_id}")
            raise AuthorizationException("You can only update your own account")

        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise ResourceNotFoundException("User", str(user_id))
        if patch.is_empty():
            return user

        changes = patch.changes()
        updates = {}

        if "name" in changes:
            if not changes["name"].strip():
                raise ValidationException("name", "cannot be empty")
            updates["name"] = changes["name"].strip()

        if "email" in changes:
            email_vo = _parse_email(changes["email"])
            if email_vo != user.email and await self.user_repo.exists_by_email(str(email_vo)):
                raise DuplicateResourceException("User", "email", str(email_vo))
            updates["email"] = email_vo

        if "password" in changes:
            updates["password_hash"] = self.password_hasher.hash_password(changes["password"])

        if "phone" in changes:
            updates["phone"] = changes["phone"]

        updated = await self.user_repo.update(
            replace(user, updated_at=datetime.utcnow(), **updates)
        )

        logger.info(f"Updated user {user_id}")
        return updated
