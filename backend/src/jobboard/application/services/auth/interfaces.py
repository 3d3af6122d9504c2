"""
Authentication Service Interfaces
Abstract base classes for authentication services
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple
from uuid import UUID

from jobboard.domain.entities import User
from jobboard.domain.patches import UserPatch


@dataclass(frozen=True)
class TokenIdentity:
    """Caller identity carried by a validated access token"""

    user_id: UUID
    email: str


class IPasswordHasher(ABC):
    """Password hashing interface"""

    @abstractmethod
    def hash_password(self, password: str) -> str:
        """Hash a plain password"""
        pass

    @abstractmethod
    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify password against hash"""
        pass


class IJwtService(ABC):
    """JWT token service interface"""

    @abstractmethod
    def create_access_token(self, user_id: UUID, email: str) -> str:
        """Create access token"""
        pass

    @abstractmethod
    def verify_token(self, token: str) -> TokenIdentity:
        """Verify and decode token"""
        pass


class IAuthService(ABC):
    """Authentication and account service interface"""

    @abstractmethod
    async def register(
        self,
        name: str,
        email: str,
        password: str,
        phone: Optional[str] = None
    ) -> User:
        """Register a new job seeker"""
        pass

    @abstractmethod
    async def login(self, email: str, password: str) -> Tuple[User, str]:
        """
        Authenticate user

        Returns:
            Tuple of (User, access token)
        """
        pass

    @abstractmethod
    async def get_profile(self, user_id: UUID) -> User:
        """User with companies, applications and resumes"""
        pass

    @abstractmethod
    async def list_users(self) -> List[User]:
        pass

    @abstractmethod
    async def update_user(self, user_id: UUID, caller_id: UUID, patch: UserPatch) -> User:
        """Apply a partial update to the caller's own account"""
        pass
