"""
Application Repository Implementation
SQLAlchemy-based repository for applications to vacancies
"""
from typing import Optional, List
from uuid import UUID

from sqlalchemy import select, and_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from loguru import logger

from jobboard.domain.entities import Application
from jobboard.domain.enums import ApplicationStatus
from jobboard.application.repositories.interfaces import IApplicationRepository
from jobboard.infrastructure.persistence.models import ApplicationModel, VacancyModel
from jobboard.core.exceptions import RepositoryException, DuplicateResourceException
from .mappers import application_to_entity


class SQLAlchemyApplicationRepository(IApplicationRepository):
    """SQLAlchemy implementation of application repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get_model(self, application_id: UUID) -> Optional[ApplicationModel]:
        result = await self.session.execute(
            select(ApplicationModel)
            .options(
                selectinload(ApplicationModel.vacancy).selectinload(VacancyModel.company)
            )
            .where(ApplicationModel.id == application_id)
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, application_id: UUID) -> Optional[Application]:
        """Get application with vacancy and the vacancy's company"""
        try:
            model = await self._get_model(application_id)
            if model:
                return application_to_entity(model, vacancy=True, vacancy_company=True)
            return None

        except Exception as e:
            logger.error(f"Failed to get application {application_id}: {str(e)}")
            raise RepositoryException(f"Failed to get application: {str(e)}")

    async def find_by_user_and_vacancy(
        self,
        user_id: UUID,
        vacancy_id: UUID
    ) -> Optional[Application]:
        try:
            result = await self.session.execute(
                select(ApplicationModel).where(
                    and_(
                        ApplicationModel.user_id == user_id,
                        ApplicationModel.vacancy_id == vacancy_id,
                    )
                )
            )
            model = result.scalar_one_or_none()
            return application_to_entity(model) if model else None

        except Exception as e:
            logger.error(f"Failed to look up application of {user_id} to {vacancy_id}: {str(e)}")
            raise RepositoryException(f"Failed to get application: {str(e)}")

    async def list_by_user(self, user_id: UUID) -> List[Application]:
        try:
            result = await self.session.execute(
                select(ApplicationModel)
                .options(selectinload(ApplicationModel.vacancy))
                .where(ApplicationModel.user_id == user_id)
                .order_by(ApplicationModel.created_at)
            )
            return [
                application_to_entity(m, vacancy=True)
                for m in result.scalars().all()
            ]

        except Exception as e:
            logger.error(f"Failed to list applications of user {user_id}: {str(e)}")
            raise RepositoryException(f"Failed to list applications: {str(e)}")

    async def list_by_vacancy(self, vacancy_id: UUID) -> List[Application]:
        try:
            result = await self.session.execute(
                select(ApplicationModel)
                .options(selectinload(ApplicationModel.user))
                .where(ApplicationModel.vacancy_id == vacancy_id)
                .order_by(ApplicationModel.created_at)
            )
            return [
                application_to_entity(m, user=True)
                for m in result.scalars().all()
            ]

        except Exception as e:
            logger.error(f"Failed to list applications to vacancy {vacancy_id}: {str(e)}")
            raise RepositoryException(f"Failed to list applications: {str(e)}")

    async def create(self, application: Application) -> Application:
        try:
            model = ApplicationModel(
                id=application.id,
                user_id=application.user_id,
                vacancy_id=application.vacancy_id,
                status=application.status.value,
                cover_letter=application.cover_letter,
            )
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)

            return application_to_entity(model)

        except IntegrityError:
            raise DuplicateResourceException(
                "Application", "vacancy_id", str(application.vacancy_id)
            )
        except Exception as e:
            logger.error(f"Failed to create application {application.id}: {str(e)}")
            raise RepositoryException(f"Failed to create application: {str(e)}")

    async def update_status(
        self,
        application_id: UUID,
        status: ApplicationStatus
    ) -> Application:
        try:
            model = await self._get_model(application_id)

            if not model:
                raise RepositoryException(f"Application not found: {application_id}")

            model.status = status.value
            await self.session.flush()
            await self.session.refresh(model, ["status", "updated_at"])

            return application_to_entity(model, vacancy=True, vacancy_company=True)

        except RepositoryException:
            raise
        except Exception as e:
            logger.error(f"Failed to update application {application_id}: {str(e)}")
            raise RepositoryException(f"Failed to update application status: {str(e)}")
