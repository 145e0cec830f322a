from typing import Annotated
from fastapi import APIRouter, Depends, status
from tokengate.services.auth_service import AuthService
from tokengate.api.deps import claims_dependency, get_auth_service, token_service_dependency
from tokengate.schemas.token import (
    MessageResponse,
    ProtectedResponse,
    TokenRefreshRequest,
    TokenResponse,
    TokenRevokeRequest,
)
from tokengate.schemas.user import LoginRequest, RegisterRequest, RegisterResponse

router = APIRouter()

auth_service = Annotated[AuthService, Depends(get_auth_service)]


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(body: RegisterRequest, service: auth_service) -> RegisterResponse:
    return await service.register(body)

@router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest, service: auth_service) -> TokenResponse:
    return await service.login(body)

@router.post("/refresh", response_model=TokenResponse)
def refresh_token(body: TokenRefreshRequest, token_service: token_service_dependency) -> TokenResponse:
    return token_service.rotate_refresh_token(body.refresh_token)


@router.post("/logout", response_model=MessageResponse)
def logout(body: TokenRevokeRequest, token_service: token_service_dependency) -> MessageResponse:
    token_service.revoke(body.refresh_token)
    return MessageResponse(message="Logged out")


@router.get("/protected", response_model=ProtectedResponse)
async def protected(claims: claims_dependency) -> ProtectedResponse:
    return ProtectedResponse(message="Welcome to the protected endpoint!", user=claims)
