"""
Auth Controller
===============

Login endpoint issuing bearer tokens.
"""
from fastapi import APIRouter, Depends

from contact_management.api.v1.dependencies import get_auth_service
from contact_management.application.dto.auth_dto import LoginRequest, TokenResponse
from contact_management.application.services.auth_service import AuthService

router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Exchange credentials for a bearer token",
    description="The token carries the username and expires after the configured lifetime (1 hour by default)."
)
def login(
    request: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    return TokenResponse(token=service.login(request.username, request.password))
