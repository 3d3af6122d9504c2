"""
Resume Request/Response Schemas
"""
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from jobboard.domain.entities import Resume
from jobboard.domain.patches import ResumePatch
from .base import CamelModel


class ResumeCreateRequest(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    skills: List[str] = []


class ResumeUpdateRequest(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    skills: Optional[List[str]] = None

    def to_patch(self) -> ResumePatch:
        return ResumePatch(**self.model_dump(exclude_unset=True))


class ResumeResponse(CamelModel):
    id: UUID
    user_id: UUID
    title: str
    description: Optional[str] = None
    skills: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, resume: Resume) -> "ResumeResponse":
        return cls(
            id=resume.id,
            user_id=resume.user_id,
            title=resume.title,
            description=resume.description,
            skills=list(resume.skills),
            created_at=resume.created_at,
            updated_at=resume.updated_at,
        )
