"""
Shared fixtures

JWT_SECRET_KEY must be in the environment before jobboard.core.config is imported.
"""
import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-pytest")
os.environ.setdefault("ENVIRONMENT", "test")

from dataclasses import replace
from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID, uuid4

import pytest

from jobboard.application.repositories.interfaces import (
    IApplicationRepository,
    ICompanyRepository,
    IResumeRepository,
    IUserRepository,
    IVacancyRepository,
)
from jobboard.core.exceptions import DuplicateResourceException
from jobboard.domain.entities import Application, Company, Resume, User, Vacancy
from jobboard.domain.enums import ApplicationStatus, UserRole
from jobboard.domain.value_objects import Email
from jobboard.infrastructure.security.jwt_service import JwtService
from jobboard.infrastructure.security.password_hasher import BcryptPasswordHasher


TEST_SECRET = os.environ["JWT_SECRET_KEY"]


def make_user(name="Alice", email="alice@example.com", role=UserRole.JOB_SEEKER, **kwargs) -> User:
    now = datetime.utcnow()
    return User(
        id=kwargs.pop("id", uuid4()),
        email=Email(email),
        password_hash=kwargs.pop("password_hash", "hash"),
        name=name,
        role=role,
        created_at=now,
        updated_at=now,
        **kwargs
    )


def make_company(employer_id: UUID, name="Acme", **kwargs) -> Company:
    now = datetime.utcnow()
    return Company(
        id=kwargs.pop("id", uuid4()),
        name=name,
        employer_id=employer_id,
        created_at=now,
        updated_at=now,
        **kwargs
    )


def make_vacancy(company_id: UUID, title="Backend Developer", **kwargs) -> Vacancy:
    now = datetime.utcnow()
    return Vacancy(
        id=kwargs.pop("id", uuid4()),
        company_id=company_id,
        title=title,
        created_at=now,
        updated_at=now,
        **kwargs
    )


def make_application(user_id: UUID, vacancy_id: UUID, **kwargs) -> Application:
    now = datetime.utcnow()
    return Application(
        id=kwargs.pop("id", uuid4()),
        user_id=user_id,
        vacancy_id=vacancy_id,
        created_at=now,
        updated_at=now,
        **kwargs
    )


class InMemoryStore:
    """Rows shared by the in-memory repositories, keyed by id"""

    def __init__(self):
        self.users: Dict[UUID, User] = {}
        self.companies: Dict[UUID, Company] = {}
        self.vacancies: Dict[UUID, Vacancy] = {}
        self.applications: Dict[UUID, Application] = {}
        self.resumes: Dict[UUID, Resume] = {}

    def vacancy_with_company(self, vacancy: Vacancy) -> Vacancy:
        return replace(vacancy, company=self.companies.get(vacancy.company_id))


class InMemoryUserRepository(IUserRepository):

    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        return self.store.users.get(user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        for user in self.store.users.values():
            if str(user.email) == email.lower():
                return user
        return None

    async def get_profile(self, user_id: UUID) -> Optional[User]:
        user = self.store.users.get(user_id)
        if not user:
            return None
        return replace(
            user,
            companies=[c for c in self.store.companies.values() if c.employer_id == user_id],
            applications=[
                replace(a, vacancy=self.store.vacancies.get(a.vacancy_id))
                for a in self.store.applications.values() if a.user_id == user_id
            ],
            resumes=[r for r in self.store.resumes.values() if r.user_id == user_id],
        )

    async def list_all(self) -> List[User]:
        return list(self.store.users.values())

    async def create(self, user: User) -> User:
        if await self.exists_by_email(str(user.email)):
            raise DuplicateResourceException("User", "email", str(user.email))
        self.store.users[user.id] = user
        return user

    async def update(self, user: User) -> User:
        self.store.users[user.id] = user
        return user

    async def set_role(self, user_id: UUID, role: UserRole) -> User:
        user = replace(self.store.users[user_id], role=role)
        self.store.users[user_id] = user
        return user

    async def exists_by_email(self, email: str) -> bool:
        return await self.get_by_email(email) is not None


class InMemoryCompanyRepository(ICompanyRepository):

    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_id(self, company_id: UUID) -> Optional[Company]:
        return self.store.companies.get(company_id)

    async def get_with_relations(self, company_id: UUID) -> Optional[Company]:
        company = self.store.companies.get(company_id)
        if not company:
            return None
        return replace(
            company,
            employer=self.store.users.get(company.employer_id),
            vacancies=[v for v in self.store.vacancies.values() if v.company_id == company_id],
        )

    async def list_all(self) -> List[Company]:
        return list(self.store.companies.values())

    async def create(self, company: Company) -> Company:
        self.store.companies[company.id] = company
        return company

    async def update(self, company: Company) -> Company:
        self.store.companies[company.id] = company
        return company

    async def delete(self, company_id: UUID) -> bool:
        if company_id not in self.store.companies:
            return False
        del self.store.companies[company_id]
        doomed = [v.id for v in self.store.vacancies.values() if v.company_id == company_id]
        for vacancy_id in doomed:
            del self.store.vacancies[vacancy_id]
        self.store.applications = {
            k: a for k, a in self.store.applications.items() if a.vacancy_id not in doomed
        }
        return True


class InMemoryVacancyRepository(IVacancyRepository):

    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_id(self, vacancy_id: UUID) -> Optional[Vacancy]:
        vacancy = self.store.vacancies.get(vacancy_id)
        return self.store.vacancy_with_company(vacancy) if vacancy else None

    async def get_with_relations(self, vacancy_id: UUID) -> Optional[Vacancy]:
        vacancy = await self.get_by_id(vacancy_id)
        if not vacancy:
            return None
        return replace(
            vacancy,
            applications=[
                a for a in self.store.applications.values() if a.vacancy_id == vacancy_id
            ],
        )

    async def list_all(self) -> List[Vacancy]:
        return [self.store.vacancy_with_company(v) for v in self.store.vacancies.values()]

    async def search(self, query: str) -> List[Vacancy]:
        needle = query.lower()
        return [
            self.store.vacancy_with_company(v)
            for v in self.store.vacancies.values()
            if needle in v.title.lower() or needle in (v.description or "").lower()
        ]

    async def list_by_employer(self, user_id: UUID) -> List[Vacancy]:
        owned = {c.id for c in self.store.companies.values() if c.employer_id == user_id}
        return [
            self.store.vacancy_with_company(v)
            for v in self.store.vacancies.values()
            if v.company_id in owned
        ]

    async def create(self, vacancy: Vacancy) -> Vacancy:
        self.store.vacancies[vacancy.id] = vacancy
        return self.store.vacancy_with_company(vacancy)

    async def update(self, vacancy: Vacancy) -> Vacancy:
        self.store.vacancies[vacancy.id] = replace(vacancy, company=None)
        return self.store.vacancy_with_company(vacancy)

    async def delete(self, vacancy_id: UUID) -> bool:
        if self.store.vacancies.pop(vacancy_id, None) is None:
            return False
        self.store.applications = {
            k: a for k, a in self.store.applications.items() if a.vacancy_id != vacancy_id
        }
        return True


class InMemoryApplicationRepository(IApplicationRepository):

    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_id(self, application_id: UUID) -> Optional[Application]:
        application = self.store.applications.get(application_id)
        if not application:
            return None
        vacancy = self.store.vacancies.get(application.vacancy_id)
        return replace(
            application,
            vacancy=self.store.vacancy_with_company(vacancy) if vacancy else None,
        )

    async def find_by_user_and_vacancy(
        self,
        user_id: UUID,
        vacancy_id: UUID
    ) -> Optional[Application]:
        for application in self.store.applications.values():
            if application.user_id == user_id and application.vacancy_id == vacancy_id:
                return application
        return None

    async def list_by_user(self, user_id: UUID) -> List[Application]:
        return [
            replace(a, vacancy=self.store.vacancies.get(a.vacancy_id))
            for a in self.store.applications.values() if a.user_id == user_id
        ]

    async def list_by_vacancy(self, vacancy_id: UUID) -> List[Application]:
        return [
            replace(a, user=self.store.users.get(a.user_id))
            for a in self.store.applications.values() if a.vacancy_id == vacancy_id
        ]

    async def create(self, application: Application) -> Application:
        self.store.applications[application.id] = application
        return application

    async def update_status(
        self,
        application_id: UUID,
        status: ApplicationStatus
    ) -> Application:
        application = replace(
            self.store.applications[application_id],
            status=status,
            updated_at=datetime.utcnow(),
        )
        self.store.applications[application_id] = application
        return application


class InMemoryResumeRepository(IResumeRepository):

    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_id(self, resume_id: UUID) -> Optional[Resume]:
        return self.store.resumes.get(resume_id)

    async def list_all(self) -> List[Resume]:
        return list(self.store.resumes.values())

    async def create(self, resume: Resume) -> Resume:
        self.store.resumes[resume.id] = resume
        return resume

    async def update(self, resume: Resume) -> Resume:
        self.store.resumes[resume.id] = resume
        return resume

    async def delete(self, resume_id: UUID) -> bool:
        return self.store.resumes.pop(resume_id, None) is not None


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def password_hasher():
    # Minimum cost keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def jwt_service():
    return JwtService(secret_key=TEST_SECRET)
