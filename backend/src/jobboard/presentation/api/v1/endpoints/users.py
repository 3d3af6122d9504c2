"""
User Endpoints
/users/* routes: registration, login, profile
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from jobboard.application.services.auth.interfaces import IAuthService, TokenIdentity
from jobboard.presentation.api.v1.container import get_auth_service
from jobboard.presentation.api.v1.dependencies import get_current_identity
from jobboard.presentation.api.v1.schemas.details import ProfileResponse
from jobboard.presentation.api.v1.schemas.user import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserResponse,
    UserUpdateRequest,
)


router = APIRouter()


@router.get("", response_model=List[UserResponse])
async def list_users(auth_service: IAuthService = Depends(get_auth_service)):
    users = await auth_service.list_users()
    return [UserResponse.from_entity(u) for u in users]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    auth_service: IAuthService = Depends(get_auth_service)
):
    """Register a new job seeker account"""
    user = await auth_service.register(
        name=request.name,
        email=request.email,
        password=request.password,
        phone=request.phone,
    )
    return UserResponse.from_entity(user)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    auth_service: IAuthService = Depends(get_auth_service)
):
    """
    Exchange email and password for a bearer token

    Unknown email and wrong password are reported separately with 400.
    """
    user, token = await auth_service.login(request.email, request.password)
    return LoginResponse(token=token, user=UserResponse.from_entity(user))


@router.get("/me", response_model=ProfileResponse)
async def get_me(
    identity: TokenIdentity = Depends(get_current_identity),
    auth_service: IAuthService = Depends(get_auth_service)
):
    user = await auth_service.get_profile(identity.user_id)
    return ProfileResponse.from_entity(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: UUID,
    request: UserUpdateRequest,
    identity: TokenIdentity = Depends(get_current_identity),
    auth_service: IAuthService = Depends(get_auth_service)
):
    user = await auth_service.update_user(user_id, identity.user_id, request.to_patch())
    return UserResponse.from_entity(user)
