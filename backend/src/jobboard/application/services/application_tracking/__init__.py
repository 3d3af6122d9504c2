"""
Application Tracking Service Interface
Submitting applications and moving them through their lifecycle
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from jobboard.domain.entities import Application
from jobboard.domain.enums import ApplicationStatus


class IApplicationTrackingService(ABC):
    """Application tracking service interface"""

    @abstractmethod
    async def submit_application(
        self,
        applicant_id: UUID,
        vacancy_id: UUID,
        cover_letter: Optional[str] = None
    ) -> Application:
        """
        Apply to a vacancy; the new application is PENDING

        Args:
            applicant_id: Caller identity from the access token
            vacancy_id: Vacancy applied to
            cover_letter: Optional text

        Raises:
            VacancyNotFoundException: unknown vacancy
            DuplicateResourceException: caller already applied
        """
        pass

    @abstractmethod
    async def set_status(
        self,
        application_id: UUID,
        caller_id: UUID,
        status: ApplicationStatus
    ) -> Application:
        """
        Move an application to a new status (owning employer only)

        Raises:
            ResourceNotFoundException: unknown application
            AuthorizationException: caller does not own the vacancy
            InvalidStatusTransitionException: transition not allowed
        """
        pass

    @abstractmethod
    async def get_applications_for_user(
        self,
        user_id: UUID,
        caller_id: UUID
    ) -> List[Application]:
        pass

    @abstractmethod
    async def get_applications_for_vacancy(
        self,
        vacancy_id: UUID,
        caller_id: UUID
    ) -> List[Application]:
        pass
