"""
Company Repository Implementation
"""
from typing import Optional, List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from loguru import logger

from jobboard.domain.entities import Company
from jobboard.application.repositories.interfaces import ICompanyRepository
from jobboard.infrastructure.persistence.models import CompanyModel
from jobboard.core.exceptions import RepositoryException
from .mappers import company_to_entity, company_to_model


class SQLAlchemyCompanyRepository(ICompanyRepository):
    """SQLAlchemy implementation of company repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, company_id: UUID) -> Optional[Company]:
        try:
            result = await self.session.execute(
                select(CompanyModel).where(CompanyModel.id == company_id)
            )
            model = result.scalar_one_or_none()
            return company_to_entity(model) if model else None

        except Exception as e:
            logger.error(f"Failed to get company {company_id}: {str(e)}")
            raise RepositoryException(f"Failed to get company: {str(e)}")

    async def get_with_relations(self, company_id: UUID) -> Optional[Company]:
        try:
            result = await self.session.execute(
                select(CompanyModel)
                .options(
                    selectinload(CompanyModel.employer),
                    selectinload(CompanyModel.vacancies),
                )
                .where(CompanyModel.id == company_id)
            )
            model = result.scalar_one_or_none()
            if model:
                return company_to_entity(model, employer=True, vacancies=True)
            return None

        except Exception as e:
            logger.error(f"Failed to get company {company_id}: {str(e)}")
            raise RepositoryException(f"Failed to get company: {str(e)}")

    async def list_all(self) -> List[Company]:
        try:
            result = await self.session.execute(
                select(CompanyModel).order_by(CompanyModel.created_at)
            )
            return [company_to_entity(m) for m in result.scalars().all()]

        except Exception as e:
            logger.error(f"Failed to list companies: {str(e)}")
            raise RepositoryException(f"Failed to list companies: {str(e)}")

    async def create(self, company: Company) -> Company:
        try:
            model = company_to_model(company)
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)

            return company_to_entity(model)

        except Exception as e:
            logger.error(f"Failed to create company {company.name}: {str(e)}")
            raise RepositoryException(f"Failed to create company: {str(e)}")

    async def update(self, company: Company) -> Company:
        try:
            result = await self.session.execute(
                select(CompanyModel).where(CompanyModel.id == company.id)
            )
            model = result.scalar_one_or_none()

            if not model:
                raise RepositoryException(f"Company not found: {company.id}")

            model.name = company.name
            model.description = company.description
            model.location = company.location
            model.employer_id = company.employer_id

            await self.session.flush()
            await self.session.refresh(model)

            return company_to_entity(model)

        except RepositoryException:
            raise
        except Exception as e:
            logger.error(f"Failed to update company {company.id}: {str(e)}")
            raise RepositoryException(f"Failed to update company: {str(e)}")

    async def delete(self, company_id: UUID) -> bool:
        try:
            result = await self.session.execute(
                select(CompanyModel).where(CompanyModel.id == company_id)
            )
            model = result.scalar_one_or_none()

            if model:
                # vacancies and applications go with it via ON DELETE CASCADE
                await self.session.delete(model)
                await self.session.flush()
                return True
            return False

        except Exception as e:
            logger.error(f"Failed to delete company {company_id}: {str(e)}")
            raise RepositoryException(f"Failed to delete company: {str(e)}")
