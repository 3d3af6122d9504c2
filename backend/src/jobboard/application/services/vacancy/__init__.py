"""
Vacancy Service Interface
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from jobboard.domain.entities import Vacancy
from jobboard.domain.patches import VacancyPatch
from jobboard.domain.value_objects import SalaryRange


class IVacancyService(ABC):
    """Vacancy service interface"""

    @abstractmethod
    async def list_vacancies(self) -> List[Vacancy]:
        pass

    @abstractmethod
    async def search_vacancies(self, query: str) -> List[Vacancy]:
        """Case-insensitive match over title or description"""
        pass

    @abstractmethod
    async def list_by_employer(self, user_id: UUID) -> List[Vacancy]:
        pass

    @abstractmethod
    async def get_vacancy(self, vacancy_id: UUID) -> Vacancy:
        """Vacancy with company and applications"""
        pass

    @abstractmethod
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
        """
        Raises:
            CompanyNotFoundException: company_id does not resolve
            AuthorizationException: caller does not own the company
        """
        pass

    @abstractmethod
    async def update_vacancy(
        self,
        vacancy_id: UUID,
        caller_id: UUID,
        patch: VacancyPatch
    ) -> Vacancy:
        pass

    @abstractmethod
    async def delete_vacancy(self, vacancy_id: UUID, caller_id: UUID) -> None:
        pass
