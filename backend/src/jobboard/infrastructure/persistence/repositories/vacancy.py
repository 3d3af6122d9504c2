"""
Vacancy Repository Implementation
SQLAlchemy-based vacancy repository with search
"""
from typing import Optional, List
from uuid import UUID

from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from loguru import logger

from jobboard.domain.entities import Vacancy
from jobboard.application.repositories.interfaces import IVacancyRepository
from jobboard.infrastructure.persistence.models import VacancyModel, CompanyModel
from jobboard.core.exceptions import RepositoryException
from .mappers import vacancy_to_entity, apply_vacancy_to_model


def _like_pattern(query: str) -> str:
    """Substring pattern with LIKE wildcards in the query escaped"""
    escaped = (
        query.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )
    return f"%{escaped}%"


class SQLAlchemyVacancyRepository(IVacancyRepository):
    """SQLAlchemy implementation of vacancy repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _with_company(self):
        return select(VacancyModel).options(selectinload(VacancyModel.company))

    async def _list(self, query, description: str) -> List[Vacancy]:
        try:
            result = await self.session.execute(query.order_by(VacancyModel.created_at))
            return [vacancy_to_entity(m, company=True) for m in result.scalars().all()]

        except Exception as e:
            logger.error(f"Failed to {description}: {str(e)}")
            raise RepositoryException(f"Failed to {description}: {str(e)}")

    async def get_by_id(self, vacancy_id: UUID) -> Optional[Vacancy]:
        try:
            result = await self.session.execute(
                self._with_company().where(VacancyModel.id == vacancy_id)
            )
            model = result.scalar_one_or_none()
            return vacancy_to_entity(model, company=True) if model else None

        except Exception as e:
            logger.error(f"Failed to get vacancy {vacancy_id}: {str(e)}")
            raise RepositoryException(f"Failed to get vacancy: {str(e)}")

    async def get_with_relations(self, vacancy_id: UUID) -> Optional[Vacancy]:
        try:
            result = await self.session.execute(
                select(VacancyModel)
                .options(
                    selectinload(VacancyModel.company),
                    selectinload(VacancyModel.applications),
                )
                .where(VacancyModel.id == vacancy_id)
            )
            model = result.scalar_one_or_none()
            if model:
                return vacancy_to_entity(model, company=True, applications=True)
            return None

        except Exception as e:
            logger.error(f"Failed to get vacancy {vacancy_id}: {str(e)}")
            raise RepositoryException(f"Failed to get vacancy: {str(e)}")

    async def list_all(self) -> List[Vacancy]:
        return await self._list(self._with_company(), "list vacancies")

    async def search(self, query: str) -> List[Vacancy]:
        pattern = _like_pattern(query)
        return await self._list(
            self._with_company().where(
                or_(
                    VacancyModel.title.ilike(pattern, escape="\\"),
                    VacancyModel.description.ilike(pattern, escape="\\"),
                )
            ),
            "search vacancies",
        )

    async def list_by_employer(self, user_id: UUID) -> List[Vacancy]:
        return await self._list(
            self._with_company()
            .join(CompanyModel, VacancyModel.company_id == CompanyModel.id)
            .where(CompanyModel.employer_id == user_id),
            f"list vacancies of employer {user_id}",
        )

    async def create(self, vacancy: Vacancy) -> Vacancy:
        try:
            model = apply_vacancy_to_model(vacancy, VacancyModel(id=vacancy.id))
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)
            await self.session.refresh(model, ["company"])

            return vacancy_to_entity(model, company=True)

        except Exception as e:
            logger.error(f"Failed to create vacancy {vacancy.title}: {str(e)}")
            raise RepositoryException(f"Failed to create vacancy: {str(e)}")

    async def update(self, vacancy: Vacancy) -> Vacancy:
        try:
            result = await self.session.execute(
                select(VacancyModel).where(VacancyModel.id == vacancy.id)
            )
            model = result.scalar_one_or_none()

            if not model:
                raise RepositoryException(f"Vacancy not found: {vacancy.id}")

            apply_vacancy_to_model(vacancy, model)
            await self.session.flush()
            await self.session.refresh(model)
            await self.session.refresh(model, ["company"])

            return vacancy_to_entity(model, company=True)

        except RepositoryException:
            raise
        except Exception as e:
            logger.error(f"Failed to update vacancy {vacancy.id}: {str(e)}")
            raise RepositoryException(f"Failed to update vacancy: {str(e)}")

    async def delete(self, vacancy_id: UUID) -> bool:
        try:
            result = await self.session.execute(
                select(VacancyModel).where(VacancyModel.id == vacancy_id)
            )
            model = result.scalar_one_or_none()

            if model:
                await self.session.delete(model)
                await self.session.flush()
                return True
            return False

        except Exception as e:
            logger.error(f"Failed to delete vacancy {vacancy_id}: {str(e)}")
            raise RepositoryException(f"Failed to delete vacancy: {str(e)}")
