"""
Vacancy Endpoints
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from jobboard.application.services.auth.interfaces import TokenIdentity
from jobboard.application.services.vacancy import IVacancyService
from jobboard.presentation.api.v1.container import get_vacancy_service
from jobboard.presentation.api.v1.dependencies import get_current_identity
from jobboard.presentation.api.v1.schemas.common import MessageResponse
from jobboard.presentation.api.v1.schemas.details import VacancyDetailResponse
from jobboard.presentation.api.v1.schemas.vacancy import (
    VacancyCreateRequest,
    VacancyResponse,
    VacancyUpdateRequest,
)


router = APIRouter()


@router.get("", response_model=List[VacancyResponse])
async def list_vacancies(vacancy_service: IVacancyService = Depends(get_vacancy_service)):
    vacancies = await vacancy_service.list_vacancies()
    return [VacancyResponse.from_entity(v) for v in vacancies]


# Static paths go before /{vacancy_id}

@router.get("/search", response_model=List[VacancyResponse])
async def search_vacancies(
    query: str = Query("", description="Matched against title or description"),
    vacancy_service: IVacancyService = Depends(get_vacancy_service)
):
    vacancies = await vacancy_service.search_vacancies(query)
    return [VacancyResponse.from_entity(v) for v in vacancies]


@router.get("/user/{user_id}", response_model=List[VacancyResponse])
async def list_vacancies_by_employer(
    user_id: UUID,
    vacancy_service: IVacancyService = Depends(get_vacancy_service)
):
    """Vacancies of every company the user owns"""
    vacancies = await vacancy_service.list_by_employer(user_id)
    return [VacancyResponse.from_entity(v) for v in vacancies]


@router.get("/{vacancy_id}", response_model=VacancyDetailResponse)
async def get_vacancy(
    vacancy_id: UUID,
    vacancy_service: IVacancyService = Depends(get_vacancy_service)
):
    vacancy = await vacancy_service.get_vacancy(vacancy_id)
    return VacancyDetailResponse.from_entity(vacancy)


@router.post("", response_model=VacancyResponse, status_code=status.HTTP_201_CREATED)
async def create_vacancy(
    request: VacancyCreateRequest,
    identity: TokenIdentity = Depends(get_current_identity),
    vacancy_service: IVacancyService = Depends(get_vacancy_service)
):
    vacancy = await vacancy_service.create_vacancy(
        caller_id=identity.user_id,
        company_id=request.company_id,
        title=request.title,
        description=request.description,
        location=request.location,
        salary=request.salary_range(),
        skills=request.skills,
        fulltime=request.fulltime,
        parttime=request.parttime,
        remote=request.remote,
    )
    return VacancyResponse.from_entity(vacancy)


@router.put("/{vacancy_id}", response_model=VacancyResponse)
async def update_vacancy(
    vacancy_id: UUID,
    request: VacancyUpdateRequest,
    identity: TokenIdentity = Depends(get_current_identity),
    vacancy_service: IVacancyService = Depends(get_vacancy_service)
):
    vacancy = await vacancy_service.update_vacancy(
        vacancy_id, identity.user_id, request.to_patch()
    )
    return VacancyResponse.from_entity(vacancy)


@router.delete("/{vacancy_id}", response_model=MessageResponse)
async def delete_vacancy(
    vacancy_id: UUID,
    identity: TokenIdentity = Depends(get_current_identity),
    vacancy_service: IVacancyService = Depends(get_vacancy_service)
):
    await vacancy_service.delete_vacancy(vacancy_id, identity.user_id)
    return MessageResponse(message="Vacancy deleted successfully")
