"""
Expanded responses that embed related collections
"""
from typing import List

from jobboard.domain.entities import Company, User, Vacancy
from .application import ApplicationResponse
from .company import CompanyResponse
from .resume import ResumeResponse
from .user import UserResponse
from .vacancy import VacancyResponse


class CompanyDetailResponse(CompanyResponse):
    vacancies: List[VacancyResponse] = []

    @classmethod
    def from_entity(cls, company: Company) -> "CompanyDetailResponse":
        return cls(
            **CompanyResponse.from_entity(company).model_dump(),
            vacancies=[VacancyResponse.from_entity(v) for v in company.vacancies or []],
        )


class VacancyDetailResponse(VacancyResponse):
    applications: List[ApplicationResponse] = []

    @classmethod
    def from_entity(cls, vacancy: Vacancy) -> "VacancyDetailResponse":
        return cls(
            **VacancyResponse.from_entity(vacancy).model_dump(),
            applications=[ApplicationResponse.from_entity(a) for a in vacancy.applications or []],
        )


class ProfileResponse(UserResponse):
    """Current user with owned companies, applications and resumes"""

    companies: List[CompanyResponse] = []
    applications: List[ApplicationResponse] = []
    resumes: List[ResumeResponse] = []

    @classmethod
    def from_entity(cls, user: User) -> "ProfileResponse":
        return cls(
            **UserResponse.from_entity(user).model_dump(),
            companies=[CompanyResponse.from_entity(c) for c in user.companies or []],
            applications=[ApplicationResponse.from_entity(a) for a in user.applications or []],
            resumes=[ResumeResponse.from_entity(r) for r in user.resumes or []],
        )
