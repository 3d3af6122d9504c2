"""
User Domain Entity
Immutable user business object
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, TYPE_CHECKING
from uuid import UUID

from ..enums import UserRole
from ..value_objects import Email

if TYPE_CHECKING:
    from .application import Application
    from .company import Company
    from .resume import Resume


@dataclass(frozen=True)
class User:
    """User domain entity - immutable"""

    id: UUID
    email: Email
    password_hash: str = field(repr=False)
    name: str
    phone: Optional[str] = None
    role: UserRole = UserRole.JOB_SEEKER

    # Related rows, populated only by profile queries
    companies: Optional[List["Company"]] = None
    applications: Optional[List["Application"]] = None
    resumes: Optional[List["Resume"]] = None

    # Timestamps
    created_at: datetime = None
    updated_at: datetime = None

    def __post_init__(self):
        """Validate user data"""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Name cannot be empty")

    def is_employer(self) -> bool:
        return self.role == UserRole.EMPLOYER

    def __str__(self) -> str:
        return f"User({self.email}, {self.name})"
