"""
ApplicationTrackingService Implementation
Submits applications and drives them through PENDING -> APPROVED | REJECTED
"""
from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from loguru import logger

from jobboard.application.repositories.interfaces import (
    IApplicationRepository,
    ICompanyRepository,
    IUserRepository,
    IVacancyRepository,
)
from jobboard.application.services.application_tracking import IApplicationTrackingService
from jobboard.core.exceptions import (
    AuthorizationException,
    DuplicateResourceException,
    ReferenceNotFoundException,
    ResourceNotFoundException,
    VacancyNotFoundException,
)
from jobboard.domain.entities import Application, Vacancy
from jobboard.domain.enums import ApplicationStatus
from jobboard.domain import lifecycle


class ApplicationTrackingService(IApplicationTrackingService):
    """Application tracking service"""

    def __init__(
        self,
        application_repository: IApplicationRepository,
        vacancy_repository: IVacancyRepository,
        company_repository: ICompanyRepository,
        user_repository: IUserRepository,
    ):
        """
        Initialize application tracking service

        Args:
            application_repository: Application repository
            vacancy_repository: Vacancy repository
            company_repository: Company repository, used for ownership checks
            user_repository: User repository
        """
        self.application_repo = application_repository
        self.vacancy_repo = vacancy_repository
        self.company_repo = company_repository
        self.user_repo = user_repository

    async def submit_application(
        self,
        applicant_id: UUID,
        vacancy_id: UUID,
        cover_letter: Optional[str] = None
    ) -> Application:
        vacancy = await self.vacancy_repo.get_by_id(vacancy_id)
        if not vacancy:
            raise VacancyNotFoundException(str(vacancy_id))

        if not await self.user_repo.get_by_id(applicant_id):
            raise ReferenceNotFoundException("User", str(applicant_id))

        existing = await self.application_repo.find_by_user_and_vacancy(applicant_id, vacancy_id)
        if existing:
            raise DuplicateResourceException("Application", "vacancy", str(vacancy_id))

        now = datetime.utcnow()
        application = await self.application_repo.create(
            Application(
                id=uuid4(),
                user_id=applicant_id,
                vacancy_id=vacancy_id,
                status=lifecycle.INITIAL_STATUS,
                cover_letter=cover_letter,
                created_at=now,
                updated_at=now,
            )
        )

        logger.info(f"User {applicant_id} applied to vacancy {vacancy_id}")
        return application

    async def set_status(
        self,
        application_id: UUID,
        caller_id: UUID,
        status: ApplicationStatus
    ) -> Application:
        application = await self.application_repo.get_by_id(application_id)
        if not application:
            raise ResourceNotFoundException("Application", str(application_id))

        vacancy = await self.vacancy_repo.get_by_id(application.vacancy_id)
        if not vacancy or not await self._owns(vacancy, caller_id):
            logger.warning(
                f"User {caller_id} tried to change status of application {application_id}"
            )
            raise AuthorizationException("Only the employer who posted the vacancy can do this")

        new_status = lifecycle.transition(application.status, status)
        if new_status == application.status:
            return application

        updated = await self.application_repo.update_status(application_id, new_status)
        logger.info(
            f"Application {application_id}: {application.status.value} -> {new_status.value}"
        )
        return updated

    async def get_applications_for_user(
        self,
        user_id: UUID,
        caller_id: UUID
    ) -> List[Application]:
        if user_id != caller_id:
            raise AuthorizationException("You can only view your own applications")

        applications = await self.application_repo.list_by_user(user_id)
        logger.info(f"Found {len(applications)} applications for user {user_id}")
        return applications

    async def get_applications_for_vacancy(
        self,
        vacancy_id: UUID,
        caller_id: UUID
    ) -> List[Application]:
        vacancy = await self.vacancy_repo.get_by_id(vacancy_id)
        if not vacancy:
            raise ResourceNotFoundException("Vacancy", str(vacancy_id))
        if not await self._owns(vacancy, caller_id):
            raise AuthorizationException("Only the employer who posted the vacancy can do this")

        return await self.application_repo.list_by_vacancy(vacancy_id)

    async def _owns(self, vacancy: Vacancy, caller_id: UUID) -> bool:
        company = await self.company_repo.get_by_id(vacancy.company_id)
        return company is not None and company.is_owned_by(caller_id)
