"""
ORM <-> Domain Mappers
Relations are mapped only when the caller says they were eagerly loaded;
touching an unloaded relationship on an AsyncSession raises.
"""
from jobboard.domain.entities import User, Company, Vacancy, Application, Resume
from jobboard.domain.enums import UserRole, ApplicationStatus
from jobboard.domain.value_objects import Email, SalaryRange
from jobboard.infrastructure.persistence.models import (
    UserModel,
    CompanyModel,
    VacancyModel,
    ApplicationModel,
    ResumeModel,
)


def user_to_entity(model: UserModel, profile: bool = False) -> User:
    return User(
        id=model.id,
        email=Email(model.email),
        password_hash=model.password_hash,
        name=model.name,
        phone=model.phone,
        role=UserRole(model.role),
        companies=[company_to_entity(c) for c in model.companies] if profile else None,
        applications=[
            application_to_entity(a, vacancy=True) for a in model.applications
        ] if profile else None,
        resumes=[resume_to_entity(r) for r in model.resumes] if profile else None,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def user_to_model(user: User) -> UserModel:
    return UserModel(
        id=user.id,
        email=str(user.email),
        password_hash=user.password_hash,
        name=user.name,
        phone=user.phone,
        role=user.role.value,
    )


def company_to_entity(
    model: CompanyModel,
    employer: bool = False,
    vacancies: bool = False
) -> Company:
    return Company(
        id=model.id,
        name=model.name,
        employer_id=model.employer_id,
        description=model.description,
        location=model.location,
        employer=user_to_entity(model.employer) if employer else None,
        vacancies=[vacancy_to_entity(v) for v in model.vacancies] if vacancies else None,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def company_to_model(company: Company) -> CompanyModel:
    return CompanyModel(
        id=company.id,
        name=company.name,
        description=company.description,
        location=company.location,
        employer_id=company.employer_id,
    )


def vacancy_to_entity(
    model: VacancyModel,
    company: bool = False,
    applications: bool = False
) -> Vacancy:
    return Vacancy(
        id=model.id,
        company_id=model.company_id,
        title=model.title,
        description=model.description,
        location=model.location,
        salary=SalaryRange(min_salary=model.salary_min, max_salary=model.salary_max),
        skills=list(model.skills or []),
        fulltime=bool(model.fulltime),
        parttime=bool(model.parttime),
        remote=bool(model.remote),
        company=company_to_entity(model.company) if company else None,
        applications=[
            application_to_entity(a) for a in model.applications
        ] if applications else None,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def apply_vacancy_to_model(vacancy: Vacancy, model: VacancyModel) -> VacancyModel:
    model.company_id = vacancy.company_id
    model.title = vacancy.title
    model.description = vacancy.description
    model.location = vacancy.location
    model.salary_min = vacancy.salary.min_salary
    model.salary_max = vacancy.salary.max_salary
    model.skills = list(vacancy.skills)
    model.fulltime = vacancy.fulltime
    model.parttime = vacancy.parttime
    model.remote = vacancy.remote
    return model


def application_to_entity(
    model: ApplicationModel,
    user: bool = False,
    vacancy: bool = False,
    vacancy_company: bool = False
) -> Application:
    return Application(
        id=model.id,
        user_id=model.user_id,
        vacancy_id=model.vacancy_id,
        status=ApplicationStatus(model.status),
        cover_letter=model.cover_letter,
        user=user_to_entity(model.user) if user else None,
        vacancy=vacancy_to_entity(model.vacancy, company=vacancy_company) if vacancy else None,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def resume_to_entity(model: ResumeModel) -> Resume:
    return Resume(
        id=model.id,
        user_id=model.user_id,
        title=model.title,
        description=model.description,
        skills=list(model.skills or []),
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
