"""
Company Request/Response Schemas
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from jobboard.domain.entities import Company
from jobboard.domain.patches import CompanyPatch
from .base import CamelModel
from .user import UserResponse


class CompanyCreateRequest(CamelModel):
    """The owner is always the authenticated caller"""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)


class CompanyUpdateRequest(CamelModel):
    """null clears description or location"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    employer_id: Optional[UUID] = None

    def to_patch(self) -> CompanyPatch:
        return CompanyPatch(**self.model_dump(exclude_unset=True))


class CompanyResponse(CamelModel):
    id: UUID
    name: str
    description: Optional[str] = None
    location: Optional[str] = None
    employer_id: UUID
    employer: Optional[UserResponse] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, company: Company) -> "CompanyResponse":
        return cls(
            id=company.id,
            name=company.name,
            description=company.description,
            location=company.location,
            employer_id=company.employer_id,
            employer=UserResponse.from_entity(company.employer) if company.employer else None,
            created_at=company.created_at,
            updated_at=company.updated_at,
        )
