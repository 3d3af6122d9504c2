"""
Application Request/Response Schemas
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from jobboard.domain.entities import Application
from jobboard.domain.enums import ApplicationStatus
from .base import CamelModel
from .user import UserResponse
from .vacancy import VacancyResponse


class ApplicationCreateRequest(CamelModel):
    """The applicant is the authenticated caller"""

    vacancy_id: UUID
    cover_letter: Optional[str] = Field(None, max_length=10000)


class ApplicationStatusRequest(CamelModel):
    status: ApplicationStatus


class ApplicationResponse(CamelModel):
    id: UUID
    user_id: UUID
    vacancy_id: UUID
    status: ApplicationStatus
    cover_letter: Optional[str] = None
    user: Optional[UserResponse] = None
    vacancy: Optional[VacancyResponse] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, application: Application) -> "ApplicationResponse":
        return cls(
            id=application.id,
            user_id=application.user_id,
            vacancy_id=application.vacancy_id,
            status=application.status,
            cover_letter=application.cover_letter,
            user=UserResponse.from_entity(application.user) if application.user else None,
            vacancy=(
                VacancyResponse.from_entity(application.vacancy)
                if application.vacancy else None
            ),
            created_at=application.created_at,
            updated_at=application.updated_at,
        )
