"""
Application Endpoints
Submission and status tracking
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from jobboard.application.services.auth.interfaces import TokenIdentity
from jobboard.application.services.application_tracking import IApplicationTrackingService
from jobboard.presentation.api.v1.container import get_application_tracking_service
from jobboard.presentation.api.v1.dependencies import get_current_identity
from jobboard.presentation.api.v1.schemas.application import (
    ApplicationCreateRequest,
    ApplicationResponse,
    ApplicationStatusRequest,
)


router = APIRouter()


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def submit_application(
    request: ApplicationCreateRequest,
    identity: TokenIdentity = Depends(get_current_identity),
    tracking_service: IApplicationTrackingService = Depends(get_application_tracking_service)
):
    """Apply to a vacancy as the authenticated user"""
    application = await tracking_service.submit_application(
        applicant_id=identity.user_id,
        vacancy_id=request.vacancy_id,
        cover_letter=request.cover_letter,
    )
    return ApplicationResponse.from_entity(application)


@router.patch("/{application_id}", response_model=ApplicationResponse)
async def update_application_status(
    application_id: UUID,
    request: ApplicationStatusRequest,
    identity: TokenIdentity = Depends(get_current_identity),
    tracking_service: IApplicationTrackingService = Depends(get_application_tracking_service)
):
    """
    Approve or reject an application

    Only the employer owning the vacancy's company may do this, and only
    while the application is PENDING.
    """
    application = await tracking_service.set_status(
        application_id, identity.user_id, request.status
    )
    return ApplicationResponse.from_entity(application)


@router.get("/user/{user_id}", response_model=List[ApplicationResponse])
async def list_user_applications(
    user_id: UUID,
    identity: TokenIdentity = Depends(get_current_identity),
    tracking_service: IApplicationTrackingService = Depends(get_application_tracking_service)
):
    applications = await tracking_service.get_applications_for_user(user_id, identity.user_id)
    return [ApplicationResponse.from_entity(a) for a in applications]


@router.get("/vacancy/{vacancy_id}", response_model=List[ApplicationResponse])
async def list_vacancy_applications(
    vacancy_id: UUID,
    identity: TokenIdentity = Depends(get_current_identity),
    tracking_service: IApplicationTrackingService = Depends(get_application_tracking_service)
):
    applications = await tracking_service.get_applications_for_vacancy(
        vacancy_id, identity.user_id
    )
    return [ApplicationResponse.from_entity(a) for a in applications]
