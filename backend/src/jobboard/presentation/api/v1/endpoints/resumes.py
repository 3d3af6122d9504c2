"""
Resume Endpoints
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from jobboard.application.services.auth.interfaces import TokenIdentity
from jobboard.application.services.resume import IResumeService
from jobboard.presentation.api.v1.container import get_resume_service
from jobboard.presentation.api.v1.dependencies import get_current_identity
from jobboard.presentation.api.v1.schemas.common import MessageResponse
from jobboard.presentation.api.v1.schemas.resume import (
    ResumeCreateRequest,
    ResumeResponse,
    ResumeUpdateRequest,
)


router = APIRouter()


@router.get("", response_model=List[ResumeResponse])
async def list_resumes(resume_service: IResumeService = Depends(get_resume_service)):
    resumes = await resume_service.list_resumes()
    return [ResumeResponse.from_entity(r) for r in resumes]


@router.get("/{resume_id}", response_model=ResumeResponse)
async def get_resume(
    resume_id: UUID,
    resume_service: IResumeService = Depends(get_resume_service)
):
    resume = await resume_service.get_resume(resume_id)
    return ResumeResponse.from_entity(resume)


@router.post("", response_model=ResumeResponse, status_code=status.HTTP_201_CREATED)
async def create_resume(
    request: ResumeCreateRequest,
    identity: TokenIdentity = Depends(get_current_identity),
    resume_service: IResumeService = Depends(get_resume_service)
):
    resume = await resume_service.create_resume(
        owner_id=identity.user_id,
        title=request.title,
        description=request.description,
        skills=request.skills,
    )
    return ResumeResponse.from_entity(resume)


@router.put("/{resume_id}", response_model=ResumeResponse)
async def update_resume(
    resume_id: UUID,
    request: ResumeUpdateRequest,
    identity: TokenIdentity = Depends(get_current_identity),
    resume_service: IResumeService = Depends(get_resume_service)
):
    resume = await resume_service.update_resume(resume_id, identity.user_id, request.to_patch())
    return ResumeResponse.from_entity(resume)


@router.delete("/{resume_id}", response_model=MessageResponse)
async def delete_resume(
    resume_id: UUID,
    identity: TokenIdentity = Depends(get_current_identity),
    resume_service: IResumeService = Depends(get_resume_service)
):
    await resume_service.delete_resume(resume_id, identity.user_id)
    return MessageResponse(message="Resume deleted successfully")
