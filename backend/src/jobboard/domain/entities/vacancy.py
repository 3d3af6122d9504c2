"""
Vacancy Domain Entity
Immutable job posting business object
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, TYPE_CHECKING
from uuid import UUID

from ..value_objects import SalaryRange

if TYPE_CHECKING:
    from .application import Application
    from .company import Company


def unique_skills(skills) -> List[str]:
    """Drop blanks and case-insensitive duplicates, keeping first-seen order"""
    seen = set()
    result = []
    for skill in skills or []:
        cleaned = skill.strip()
        key = cleaned.lower()
        if cleaned and key not in seen:
            seen.add(key)
            result.append(cleaned)
    return result


@dataclass(frozen=True)
class Vacancy:
    """Vacancy domain entity - immutable"""

    id: UUID
    company_id: UUID
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    salary: SalaryRange = field(default_factory=SalaryRange)
    skills: List[str] = field(default_factory=list)

    # Employment modes (not mutually exclusive)
    fulltime: bool = False
    parttime: bool = False
    remote: bool = False

    # Expansions
    company: Optional["Company"] = None
    applications: Optional[List["Application"]] = None

    created_at: datetime = None
    updated_at: datetime = None

    def __post_init__(self):
        """Validate vacancy data"""
        if not self.title or len(self.title.strip()) == 0:
            raise ValueError("Vacancy title cannot be empty")

    def __str__(self) -> str:
        return f"Vacancy({self.title})"
