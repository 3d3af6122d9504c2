"""
Company Endpoints
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from jobboard.application.services.auth.interfaces import TokenIdentity
from jobboard.application.services.company import ICompanyService
from jobboard.presentation.api.v1.container import get_company_service
from jobboard.presentation.api.v1.dependencies import get_current_identity
from jobboard.presentation.api.v1.schemas.company import (
    CompanyCreateRequest,
    CompanyResponse,
    CompanyUpdateRequest,
)
from jobboard.presentation.api.v1.schemas.details import CompanyDetailResponse
from jobboard.presentation.api.v1.schemas.common import MessageResponse


router = APIRouter()


@router.get("", response_model=List[CompanyResponse])
async def list_companies(company_service: ICompanyService = Depends(get_company_service)):
    companies = await company_service.list_companies()
    return [CompanyResponse.from_entity(c) for c in companies]


@router.get("/{company_id}", response_model=CompanyDetailResponse)
async def get_company(
    company_id: UUID,
    company_service: ICompanyService = Depends(get_company_service)
):
    """Company with its employer and vacancies"""
    company = await company_service.get_company(company_id)
    return CompanyDetailResponse.from_entity(company)


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
async def create_company(
    request: CompanyCreateRequest,
    identity: TokenIdentity = Depends(get_current_identity),
    company_service: ICompanyService = Depends(get_company_service)
):
    """Create a company owned by the caller; the caller becomes an employer"""
    company = await company_service.create_company(
        employer_id=identity.user_id,
        name=request.name,
        description=request.description,
        location=request.location,
    )
    return CompanyResponse.from_entity(company)


@router.put("/{company_id}", response_model=CompanyResponse)
async def update_company(
    company_id: UUID,
    request: CompanyUpdateRequest,
    identity: TokenIdentity = Depends(get_current_identity),
    company_service: ICompanyService = Depends(get_company_service)
):
    company = await company_service.update_company(
        company_id, identity.user_id, request.to_patch()
    )
    return CompanyResponse.from_entity(company)


@router.delete("/{company_id}", response_model=MessageResponse)
async def delete_company(
    company_id: UUID,
    identity: TokenIdentity = Depends(get_current_identity),
    company_service: ICompanyService = Depends(get_company_service)
):
    await company_service.delete_company(company_id, identity.user_id)
    return MessageResponse(message="Company deleted successfully")
