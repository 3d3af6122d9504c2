"""
VacancyService Implementation
"""
from dataclasses import replace
from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from loguru import logger

from jobboard.application.repositories.interfaces import ICompanyRepository, IVacancyRepository
from jobboard.application.services.vacancy import IVacancyService
from jobboard.core.exceptions import (
    AuthorizationException,
    CompanyNotFoundException,
    ResourceNotFoundException,
    ValidationException,
)
from jobboard.domain.entities import Vacancy
from jobboard.domain.entities.vacancy import unique_skills
from jobboard.domain.patches import VacancyPatch
from jobboard.domain.value_objects import SalaryRange


def _salary(min_salary: Optional[int], max_salary: Optional[int]) -> SalaryRange:
    try:
        return SalaryRange(min_salary=min_salary, max_salary=max_salary)
    except ValueError as e:
        raise ValidationException("salary", str(e))


class VacancyService(IVacancyService):
    """Vacancy service; only the owning employer may post or edit"""

    def __init__(
        self,
        vacancy_repository: IVacancyRepository,
        company_repository: ICompanyRepository,
    ):
        self.vacancy_repo = vacancy_repository
        self.company_repo = company_repository

    async def list_vacancies(self) -> List[Vacancy]:
        return await self.vacancy_repo.list_all()

    async def search_vacancies(self, query: str) -> List[Vacancy]:
        if not query or not query.strip():
            raise ValidationException("query", "search query cannot be empty")

        results = await self.vacancy_repo.search(query.strip())
        logger.info(f"Vacancy search '{query.strip()}' matched {len(results)}")
        return results

    async def list_by_employer(self, user_id: UUID) -> List[Vacancy]:
        return await self.vacancy_repo.list_by_employer(user_id)

    async def get_vacancy(self, vacancy_id: UUID) -> Vacancy:
        vacancy = await self.vacancy_repo.get_with_relations(vacancy_id)
        if not vacancy:
            raise ResourceNotFoundException("Vacancy", str(vacancy_id))
        return vacancy

    async def create_vacancy(
        self,
        caller_id: UUID,
        company_id: UUID,
        title: str,
        description: Optional[str] = None,
        location: Optional[str] = None,
        salary: Optional[SalaryRange] = None,
        skills: Optional[List[str]] = None,
        fulltime: bool = False,
        parttime: bool = False,
        remote: bool = False
    ) -> Vacancy:
        company = await self.company_repo.get_by_id(company_id)
        if not company:
            raise CompanyNotFoundException(str(company_id))
        if not company.is_owned_by(caller_id):
            logger.warning(f"User {caller_id} tried to post a vacancy for company {company_id}")
            raise AuthorizationException("You do not own this company")

        if not title or not title.strip():
            raise ValidationException("title", "cannot be empty")

        now = datetime.utcnow()
        vacancy = await self.vacancy_repo.create(
            Vacancy(
                id=uuid4(),
                company_id=company_id,
                title=title.strip(),
                description=description,
                location=location,
                salary=salary or SalaryRange(),
                skills=unique_skills(skills),
                fulltime=fulltime,
                parttime=parttime,
                remote=remote,
                created_at=now,
                updated_at=now,
            )
        )

        logger.info(f"Vacancy {vacancy.id} posted for company {company_id}")
        return vacancy

    async def update_vacancy(
        self,
        vacancy_id: UUID,
        caller_id: UUID,
        patch: VacancyPatch
    ) -> Vacancy:
        vacancy = await self._get_owned(vacancy_id, caller_id)

        if patch.is_empty():
            return vacancy

        changes = patch.changes()

        if "title" in changes:
            if not changes["title"].strip():
                raise ValidationException("title", "cannot be empty")
            changes["title"] = changes["title"].strip()

        if "salary_min" in changes or "salary_max" in changes:
            changes["salary"] = _salary(
                changes.pop("salary_min", vacancy.salary.min_salary),
                changes.pop("salary_max", vacancy.salary.max_salary),
            )

        if "skills" in changes:
            changes["skills"] = unique_skills(changes["skills"])

        return await self.vacancy_repo.update(
            replace(vacancy, updated_at=datetime.utcnow(), **changes)
        )

    async def delete_vacancy(self, vacancy_id: UUID, caller_id: UUID) -> None:
        await self._get_owned(vacancy_id, caller_id)
        await self.vacancy_repo.delete(vacancy_id)
        logger.info(f"Vacancy {vacancy_id} deleted")

    async def _get_owned(self, vacancy_id: UUID, caller_id: UUID) -> Vacancy:
        vacancy = await self.vacancy_repo.get_by_id(vacancy_id)
        if not vacancy:
            raise ResourceNotFoundException("Vacancy", str(vacancy_id))

        company = await self.company_repo.get_by_id(vacancy.company_id)
        if not company or not company.is_owned_by(caller_id):
            logger.warning(f"User {caller_id} denied access to vacancy {vacancy_id}")
            raise AuthorizationException("You do not own this vacancy")
        return vacancy
