"""
Seed Data Script
Populates the database with demo users, companies, vacancies and applications
for local development. Existing rows are removed first.

    python scripts/seed_data.py
"""
import asyncio

from sqlalchemy import delete
from loguru import logger

from jobboard.core.config import settings
from jobboard.core.database import Database
from jobboard.core.logging_config import configure_logging
from jobboard.application.services.auth.impl import AuthService
from jobboard.domain.value_objects import SalaryRange
from jobboard.infrastructure.persistence.models import (
    ApplicationModel,
    CompanyModel,
    ResumeModel,
    UserModel,
    VacancyModel,
)
from jobboard.infrastructure.persistence.repositories import (
    SQLAlchemyApplicationRepository,
    SQLAlchemyCompanyRepository,
    SQLAlchemyUserRepository,
    SQLAlchemyVacancyRepository,
)
from jobboard.infrastructure.security.jwt_service import JwtService
from jobboard.infrastructure.security.password_hasher import BcryptPasswordHasher
from jobboard.infrastructure.services.application_tracking_service import (
    ApplicationTrackingService,
)
from jobboard.infrastructure.services.company_service import CompanyService
from jobboard.infrastructure.services.vacancy_service import VacancyService


DEMO_PASSWORD = "password123"

USERS = [
    "Alice", "Bob", "Charlie", "David", "Eve",
    "Frank", "Grace", "Hannah", "Ivy", "Jack",
]

COMPANIES = [
    ("TechCorp", "A leading tech company", "New York"),
    ("InnovateX", "Innovative solutions for the future", "San Francisco"),
    ("WebWorks", "Web development and design agency", "Los Angeles"),
    ("DataPro", "Big data solutions for businesses", "Chicago"),
    ("SoftWareHouse", "Custom software development", "Austin"),
]

VACANCIES = [
    ("Frontend Developer", "Join our dynamic frontend team", 70000, ["JavaScript", "React"]),
    ("Backend Developer", "Looking for a skilled backend developer", 80000, ["Python", "SQL"]),
    ("UI/UX Designer", "Design beautiful user interfaces", 75000, ["Figma"]),
    ("Data Scientist", "Analyze data to drive business decisions", 90000, ["Python", "Pandas"]),
    ("Software Engineer", "Develop high-quality software applications", 85000, ["Go", "Docker"]),
]


async def seed_database():
    """Seed database with demo data"""

    db = Database.from_settings(settings)
    await db.create_all()

    async with db.session() as session:
        for model in (ApplicationModel, VacancyModel, CompanyModel, ResumeModel, UserModel):
            await session.execute(delete(model))

        user_repo = SQLAlchemyUserRepository(session)
        company_repo = SQLAlchemyCompanyRepository(session)
        vacancy_repo = SQLAlchemyVacancyRepository(session)

        auth_service = AuthService(
            user_repo,
            BcryptPasswordHasher(rounds=settings.BCRYPT_ROUNDS),
            JwtService(settings.JWT_SECRET_KEY, settings.JWT_ALGORITHM),
        )
        company_service = CompanyService(company_repo, user_repo)
        vacancy_service = VacancyService(vacancy_repo, company_repo)
        tracking_service = ApplicationTrackingService(
            SQLAlchemyApplicationRepository(session), vacancy_repo, company_repo, user_repo
        )

        # 1. Ten users
        users = [
            await auth_service.register(name, f"{name.lower()}@example.com", DEMO_PASSWORD)
            for name in USERS
        ]

        # 2. Five companies, one per employer, each posting one vacancy
        vacancies = []
        for employer, (name, description, location), (title, text, salary, skills) in zip(
            users, COMPANIES, VACANCIES
        ):
            company = await company_service.create_company(
                employer.id, name, description=description, location=location
            )
            vacancies.append(
                await vacancy_service.create_vacancy(
                    employer.id,
                    company.id,
                    title,
                    description=text,
                    location=location,
                    salary=SalaryRange.single(salary),
                    skills=skills,
                    fulltime=True,
                )
            )

        # 3. The remaining users apply to every vacancy
        applicants = users[len(COMPANIES):]
        for applicant in applicants:
            for vacancy in vacancies:
                await tracking_service.submit_application(
                    applicant.id,
                    vacancy.id,
                    cover_letter=f"{applicant.name} would like to join as {vacancy.title}",
                )

    await db.dispose()

    logger.info(
        f"Seeded {len(users)} users, {len(COMPANIES)} companies, {len(vacancies)} vacancies "
        f"and {len(applicants) * len(vacancies)} applications"
    )
    logger.info(f"Every demo account uses the password '{DEMO_PASSWORD}'")


if __name__ == "__main__":
    configure_logging(settings)
    asyncio.run(seed_database())
