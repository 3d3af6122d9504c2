"""
Vacancy Request/Response Schemas
"""
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, model_validator

from jobboard.domain.entities import Vacancy
from jobboard.domain.patches import VacancyPatch
from jobboard.domain.value_objects import SalaryRange
from .base import CamelModel
from .company import CompanyResponse


class SalaryFields(CamelModel):
    """
    A single `salary` is shorthand for salaryMin == salaryMax
    """

    salary: Optional[int] = Field(None, ge=0)
    salary_min: Optional[int] = Field(None, ge=0)
    salary_max: Optional[int] = Field(None, ge=0)

    @model_validator(mode="after")
    def check_salary(self) -> "SalaryFields":
        if self.salary is not None and (self.salary_min is not None or self.salary_max is not None):
            raise ValueError("Provide either salary or salaryMin/salaryMax, not both")
        if (
            self.salary_min is not None
            and self.salary_max is not None
            and self.salary_max < self.salary_min
        ):
            raise ValueError("salaryMax must be greater than or equal to salaryMin")
        return self


class VacancyCreateRequest(SalaryFields):
    company_id: UUID
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    skills: List[str] = []
    fulltime: bool = False
    parttime: bool = False
    remote: bool = False

    def salary_range(self) -> SalaryRange:
        if self.salary is not None:
            return SalaryRange.single(self.salary)
        return SalaryRange(min_salary=self.salary_min, max_salary=self.salary_max)


class VacancyUpdateRequest(SalaryFields):
    """Partial update; null clears description, location and the salary bounds"""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)
    skills: Optional[List[str]] = None
    fulltime: Optional[bool] = None
    parttime: Optional[bool] = None
    remote: Optional[bool] = None

    def to_patch(self) -> VacancyPatch:
        data = self.model_dump(exclude_unset=True)
        salary = data.pop("salary", None)
        if salary is not None:
            data["salary_min"] = salary
            data["salary_max"] = salary
        return VacancyPatch(**data)


class VacancyResponse(CamelModel):
    id: UUID
    company_id: UUID
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    skills: List[str] = []
    fulltime: bool = False
    parttime: bool = False
    remote: bool = False
    company: Optional[CompanyResponse] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, vacancy: Vacancy) -> "VacancyResponse":
        return cls(
            id=vacancy.id,
            company_id=vacancy.company_id,
            title=vacancy.title,
            description=vacancy.description,
            location=vacancy.location,
            salary_min=vacancy.salary.min_salary,
            salary_max=vacancy.salary.max_salary,
            skills=list(vacancy.skills),
            fulltime=vacancy.fulltime,
            parttime=vacancy.parttime,
            remote=vacancy.remote,
            company=CompanyResponse.from_entity(vacancy.company) if vacancy.company else None,
            created_at=vacancy.created_at,
            updated_at=vacancy.updated_at,
        )
