"""
Repository Interfaces (Abstract Base Classes)
Define contracts for data access without implementation details
"""
from abc import ABC, abstractmethod
from typing import Optional, List
from uuid import UUID

from jobboard.domain.entities import User, Company, Vacancy, Application, Resume
from jobboard.domain.enums import UserRole, ApplicationStatus


class IUserRepository(ABC):
    """User repository interface"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        pass

    @abstractmethod
    async def get_profile(self, user_id: UUID) -> Optional[User]:
        """Get user with companies, applications and resumes loaded"""
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        """List all users"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def set_role(self, user_id: UUID, role: UserRole) -> User:
        """Change a user's role"""
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check if user exists by email"""
        pass


class ICompanyRepository(ABC):
    """Company repository interface"""

    @abstractmethod
    async def get_by_id(self, company_id: UUID) -> Optional[Company]:
        pass

    @abstractmethod
    async def get_with_relations(self, company_id: UUID) -> Optional[Company]:
        """Get company with employer and vacancies loaded"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Company]:
        pass

    @abstractmethod
    async def create(self, company: Company) -> Company:
        pass

    @abstractmethod
    async def update(self, company: Company) -> Company:
        pass

    @abstractmethod
    async def delete(self, company_id: UUID) -> bool:
        """Delete company together with its vacancies and their applications"""
        pass


class IVacancyRepository(ABC):
    """Vacancy repository interface"""

    @abstractmethod
    async def get_by_id(self, vacancy_id: UUID) -> Optional[Vacancy]:
        """Get vacancy with its company loaded"""
        pass

    @abstractmethod
    async def get_with_relations(self, vacancy_id: UUID) -> Optional[Vacancy]:
        """Get vacancy with company and applications loaded"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Vacancy]:
        pass

    @abstractmethod
    async def search(self, query: str) -> List[Vacancy]:
        """Case-insensitive substring match over title or description"""
        pass

    @abstractmethod
    async def list_by_employer(self, user_id: UUID) -> List[Vacancy]:
        """Vacancies of every company the user owns"""
        pass

    @abstractmethod
    async def create(self, vacancy: Vacancy) -> Vacancy:
        pass

    @abstractmethod
    async def update(self, vacancy: Vacancy) -> Vacancy:
        pass

    @abstractmethod
    async def delete(self, vacancy_id: UUID) -> bool:
        pass


class IApplicationRepository(ABC):
    """Application repository interface"""

    @abstractmethod
    async def get_by_id(self, application_id: UUID) -> Optional[Application]:
        """Get application with its vacancy (and the vacancy's company) loaded"""
        pass

    @abstractmethod
    async def find_by_user_and_vacancy(
        self,
        user_id: UUID,
        vacancy_id: UUID
    ) -> Optional[Application]:
        pass

    @abstractmethod
    async def list_by_user(self, user_id: UUID) -> List[Application]:
        """Applications of a user, each with its vacancy"""
        pass

    @abstractmethod
    async def list_by_vacancy(self, vacancy_id: UUID) -> List[Application]:
        """Applications to a vacancy, each with its applicant"""
        pass

    @abstractmethod
    async def create(self, application: Application) -> Application:
        pass

    @abstractmethod
    async def update_status(
        self,
        application_id: UUID,
        status: ApplicationStatus
    ) -> Application:
        pass


class IResumeRepository(ABC):
    """Resume repository interface"""

    @abstractmethod
    async def get_by_id(self, resume_id: UUID) -> Optional[Resume]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Resume]:
        pass

    @abstractmethod
    async def create(self, resume: Resume) -> Resume:
        pass

    @abstractmethod
    async def update(self, resume: Resume) -> Resume:
        pass

    @abstractmethod
    async def delete(self, resume_id: UUID) -> bool:
        pass
