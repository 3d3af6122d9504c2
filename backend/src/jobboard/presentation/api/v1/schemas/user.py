"""
User Request/Response Schemas
Passwords are accepted on input and never rendered
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field

from jobboard.domain.entities import User
from jobboard.domain.enums import UserRole
from jobboard.domain.patches import UserPatch
from .base import CamelModel


class RegisterRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72)
    phone: Optional[str] = Field(None, max_length=32)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserUpdateRequest(CamelModel):
    """Partial update; omitted fields are left untouched and null clears phone"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=1, max_length=72)
    phone: Optional[str] = Field(None, max_length=32)

    def to_patch(self) -> UserPatch:
        return UserPatch(**self.model_dump(exclude_unset=True))


class UserResponse(CamelModel):
    id: UUID
    name: str
    email: str
    phone: Optional[str] = None
    role: UserRole
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=str(user.email),
            phone=user.phone,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class LoginResponse(CamelModel):
    message: str = "Login successful"
    token: str
    user: UserResponse
