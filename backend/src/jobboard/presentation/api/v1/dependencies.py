"""
FastAPI Dependencies
Bearer token authentication
"""
from typing import Optional

from fastapi import Depends, Header

from jobboard.application.services.auth.interfaces import IJwtService, TokenIdentity
from jobboard.core.exceptions import InvalidTokenException, MissingTokenException
from .container import get_jwt_service


async def get_current_identity(
    authorization: Optional[str] = Header(None),
    jwt_service: IJwtService = Depends(get_jwt_service)
) -> TokenIdentity:
    """
    Resolve the caller from the Authorization header

    Usage:
        @router.post("/protected")
        async def protected_route(identity: TokenIdentity = Depends(get_current_identity)):
            ...

    Raises:
        MissingTokenException: no header
        InvalidTokenException: not a "Bearer <token>" header or a bad signature
        ExpiredTokenException: token past its expiry
    """
    if not authorization:
        raise MissingTokenException()

    # Extract token from "Bearer <token>"
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise InvalidTokenException("Invalid authorization header format")

    return jwt_service.verify_token(parts[1])
