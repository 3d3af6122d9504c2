"""
Company Domain Entity
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, List, TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from .user import User
    from .vacancy import Vacancy


@dataclass(frozen=True)
class Company:
    """Company owned by an employer"""

    id: UUID
    name: str
    employer_id: UUID
    description: Optional[str] = None
    location: Optional[str] = None

    # Expansions
    employer: Optional["User"] = None
    vacancies: Optional[List["Vacancy"]] = None

    created_at: datetime = None
    updated_at: datetime = None

    def __post_init__(self):
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Company name cannot be empty")

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.employer_id == user_id

    def __str__(self) -> str:
        return f"Company({self.name})"
