"""SQLAlchemy repository implementations"""

from .application import SQLAlchemyApplicationRepository
from .company import SQLAlchemyCompanyRepository
from .resume import SQLAlchemyResumeRepository
from .user import SQLAlchemyUserRepository
from .vacancy import SQLAlchemyVacancyRepository

__all__ = [
    "SQLAlchemyApplicationRepository",
    "SQLAlchemyCompanyRepository",
    "SQLAlchemyResumeRepository",
    "SQLAlchemyUserRepository",
    "SQLAlchemyVacancyRepository",
]
