"""
Dependency Injection Container
Manages service and repository instances
"""
from typing import AsyncGenerator, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.core.config import settings
from jobboard.application.repositories.interfaces import (
    IApplicationRepository,
    ICompanyRepository,
    IResumeRepository,
    IUserRepository,
    IVacancyRepository,
)
from jobboard.application.services.auth.interfaces import IAuthService, IJwtService, IPasswordHasher
from jobboard.application.services.application_tracking import IApplicationTrackingService
from jobboard.application.services.company import ICompanyService
from jobboard.application.services.resume import IResumeService
from jobboard.application.services.vacancy import IVacancyService
from jobboard.infrastructure.persistence.repositories import (
    SQLAlchemyApplicationRepository,
    SQLAlchemyCompanyRepository,
    SQLAlchemyResumeRepository,
    SQLAlchemyUserRepository,
    SQLAlchemyVacancyRepository,
)
from jobboard.infrastructure.security.password_hasher import BcryptPasswordHasher
from jobboard.infrastructure.security.jwt_service import JwtService


# Singleton instances
_password_hasher: Optional[IPasswordHasher] = None
_jwt_service: Optional[IJwtService] = None


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """One transactional session per request, from the lifespan-owned Database"""
    async with request.app.state.db.session() as session:
        yield session


def get_password_hasher() -> IPasswordHasher:
    """Get password hasher instance (singleton)"""
    global _password_hasher
    if _password_hasher is None:
        _password_hasher = BcryptPasswordHasher(rounds=settings.BCRYPT_ROUNDS)
    return _password_hasher


def get_jwt_service() -> IJwtService:
    """Get JWT service instance (singleton)"""
    global _jwt_service
    if _jwt_service is None:
        _jwt_service = JwtService(
            secret_key=settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
            expire_minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES,
        )
    return _jwt_service


# Repositories (per-request)

def get_user_repository(session: AsyncSession = Depends(get_db)) -> IUserRepository:
    return SQLAlchemyUserRepository(session)


def get_company_repository(session: AsyncSession = Depends(get_db)) -> ICompanyRepository:
    return SQLAlchemyCompanyRepository(session)


def get_vacancy_repository(session: AsyncSession = Depends(get_db)) -> IVacancyRepository:
    return SQLAlchemyVacancyRepository(session)


def get_application_repository(
    session: AsyncSession = Depends(get_db)
) -> IApplicationRepository:
    return SQLAlchemyApplicationRepository(session)


def get_resume_repository(session: AsyncSession = Depends(get_db)) -> IResumeRepository:
    return SQLAlchemyResumeRepository(session)


# Services (per-request)

def get_auth_service(
    user_repo: IUserRepository = Depends(get_user_repository),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    jwt_service: IJwtService = Depends(get_jwt_service)
) -> IAuthService:
    """Get auth service instance (per-request)"""
    from jobboard.application.services.auth.impl import AuthService
    return AuthService(user_repo, password_hasher, jwt_service)


def get_company_service(
    company_repo: ICompanyRepository = Depends(get_company_repository),
    user_repo: IUserRepository = Depends(get_user_repository)
) -> ICompanyService:
    from jobboard.infrastructure.services.company_service import CompanyService
    return CompanyService(company_repo, user_repo)


def get_vacancy_service(
    vacancy_repo: IVacancyRepository = Depends(get_vacancy_repository),
    company_repo: ICompanyRepository = Depends(get_company_repository)
) -> IVacancyService:
    from jobboard.infrastructure.services.vacancy_service import VacancyService
    return VacancyService(vacancy_repo, company_repo)


def get_application_tracking_service(
    application_repo: IApplicationRepository = Depends(get_application_repository),
    vacancy_repo: IVacancyRepository = Depends(get_vacancy_repository),
    company_repo: ICompanyRepository = Depends(get_company_repository),
    user_repo: IUserRepository = Depends(get_user_repository)
) -> IApplicationTrackingService:
    from jobboard.infrastructure.services.application_tracking_service import (
        ApplicationTrackingService,
    )
    return ApplicationTrackingService(application_repo, vacancy_repo, company_repo, user_repo)


def get_resume_service(
    resume_repo: IResumeRepository = Depends(get_resume_repository),
    user_repo: IUserRepository = Depends(get_user_repository)
) -> IResumeService:
    from jobboard.infrastructure.services.resume_service import ResumeService
    return ResumeService(resume_repo, user_repo)
