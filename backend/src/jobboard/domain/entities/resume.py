"""
Resume Domain Entity
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List
from uuid import UUID


@dataclass(frozen=True)
class Resume:
    """Resume owned by a user; skills keep the owner's ordering"""

    id: UUID
    user_id: UUID
    title: str
    description: Optional[str] = None
    skills: List[str] = field(default_factory=list)

    created_at: datetime = None
    updated_at: datetime = None

    def __post_init__(self):
        if not self.title or len(self.title.strip()) == 0:
            raise ValueError("Resume title cannot be empty")

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.user_id == user_id
