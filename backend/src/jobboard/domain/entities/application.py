"""
Application Domain Entity
Immutable job application business object
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID

from ..enums import ApplicationStatus

if TYPE_CHECKING:
    from .user import User
    from .vacancy import Vacancy


@dataclass(frozen=True)
class Application:
    """Job application domain entity - immutable"""

    id: UUID
    user_id: UUID
    vacancy_id: UUID

    status: ApplicationStatus = ApplicationStatus.PENDING
    cover_letter: Optional[str] = None

    # Expansions
    user: Optional["User"] = None
    vacancy: Optional["Vacancy"] = None

    # Timestamps
    created_at: datetime = None
    updated_at: datetime = None

    def __str__(self) -> str:
        return f"Application({self.id}, status={self.status.value})"
