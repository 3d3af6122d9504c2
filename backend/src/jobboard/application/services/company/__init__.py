"""
Company Service Interface
Company ownership and employer promotion
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from jobboard.domain.entities import Company
from jobboard.domain.patches import CompanyPatch


class ICompanyService(ABC):
    """Company service interface"""

    @abstractmethod
    async def list_companies(self) -> List[Company]:
        pass

    @abstractmethod
    async def get_company(self, company_id: UUID) -> Company:
        """
        Get company with its employer and vacancies

        Raises:
            ResourceNotFoundException: unknown company
        """
        pass

    @abstractmethod
    async def create_company(
        self,
        employer_id: UUID,
        name: str,
        description: Optional[str] = None,
        location: Optional[str] = None
    ) -> Company:
        """
        Create a company and promote its employer to EMPLOYER

        Raises:
            EmployerNotFoundException: employer_id does not resolve to a user
        """
        pass

    @abstractmethod
    async def update_company(
        self,
        company_id: UUID,
        caller_id: UUID,
        patch: CompanyPatch
    ) -> Company:
        pass

    @abstractmethod
    async def delete_company(self, company_id: UUID, caller_id: UUID) -> None:
        """Delete a company with its vacancies and their applications"""
        pass
