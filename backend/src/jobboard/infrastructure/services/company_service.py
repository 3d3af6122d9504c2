"""
CompanyService Implementation
Companies are owned by exactly one employer; creating or receiving a company
promotes the owner to the EMPLOYER role.
"""
from dataclasses import replace
from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from loguru import logger

from jobboard.application.repositories.interfaces import ICompanyRepository, IUserRepository
from jobboard.application.services.company import ICompanyService
from jobboard.core.exceptions import (
    AuthorizationException,
    EmployerNotFoundException,
    ResourceNotFoundException,
    ValidationException,
)
from jobboard.domain.entities import Company
from jobboard.domain.enums import UserRole
from jobboard.domain.patches import CompanyPatch


class CompanyService(ICompanyService):
    """Company service enforcing employer ownership"""

    def __init__(
        self,
        company_repository: ICompanyRepository,
        user_repository: IUserRepository,
    ):
        self.company_repo = company_repository
        self.user_repo = user_repository

    async def list_companies(self) -> List[Company]:
        return await self.company_repo.list_all()

    async def get_company(self, company_id: UUID) -> Company:
        company = await self.company_repo.get_with_relations(company_id)
        if not company:
            raise ResourceNotFoundException("Company", str(company_id))
        return company

    async def create_company(
        self,
        employer_id: UUID,
        name: str,
        description: Optional[str] = None,
        location: Optional[str] = None
    ) -> Company:
        if not name or not name.strip():
            raise ValidationException("name", "cannot be empty")

        await self._promote(employer_id)

        now = datetime.utcnow()
        company = await self.company_repo.create(
            Company(
                id=uuid4(),
                name=name.strip(),
                employer_id=employer_id,
                description=description,
                location=location,
                created_at=now,
                updated_at=now,
            )
        )

        logger.info(f"Company {company.id} created by employer {employer_id}")
        return company

    async def update_company(
        self,
        company_id: UUID,
        caller_id: UUID,
        patch: CompanyPatch
    ) -> Company:
        company = await self._get_owned(company_id, caller_id)
        if patch.is_empty():
            return company

        changes = patch.changes()
        if "name" in changes:
            if not changes["name"].strip():
                raise ValidationException("name", "cannot be empty")
            changes["name"] = changes["name"].strip()

        if "employer_id" in changes and changes["employer_id"] != company.employer_id:
            await self._promote(changes["employer_id"])
            logger.info(
                f"Company {company_id} handed over from {company.employer_id} "
                f"to {changes['employer_id']}"
            )

        return await self.company_repo.update(
            replace(company, updated_at=datetime.utcnow(), **changes)
        )

    async def delete_company(self, company_id: UUID, caller_id: UUID) -> None:
        await self._get_owned(company_id, caller_id)
        await self.company_repo.delete(company_id)
        logger.info(f"Company {company_id} deleted with its vacancies")

    async def _get_owned(self, company_id: UUID, caller_id: UUID) -> Company:
        company = await self.company_repo.get_by_id(company_id)
        if not company:
            raise ResourceNotFoundException("Company", str(company_id))
        if not company.is_owned_by(caller_id):
            logger.warning(f"User {caller_id} denied access to company {company_id}")
            raise AuthorizationException("You do not own this company")
        return company

    async def _promote(self, employer_id: UUID) -> None:
        """Ensure the employer exists and holds the EMPLOYER role"""
        employer = await self.user_repo.get_by_id(employer_id)
        if not employer:
            raise EmployerNotFoundException(str(employer_id))
        if not employer.is_employer():
            await self.user_repo.set_role(employer_id, UserRole.EMPLOYER)
            logger.info(f"User {employer_id} promoted to employer")
