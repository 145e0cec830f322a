from typing import Annotated
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession
from tokengate.core.config import Settings, get_settings
from tokengate.core.database import get_db
from tokengate.core.exceptions import UnauthorizedException
from tokengate.models.user import User
from tokengate.repositories.resource_repo import AdvantageRepository, ContactRepository, ProjectRepository
from tokengate.repositories.token_repo import TokenRepository
from tokengate.repositories.user_repo import UserRepository
from tokengate.schemas.resources import AdvantageResponse, ContactResponse, ProjectResponse
from tokengate.schemas.token import TokenPayload
from tokengate.services.auth_service import AuthService
from tokengate.services.resource_service import ResourceService
from tokengate.services.token_service import TokenService

db_dependency = Annotated[AsyncSession, Depends(get_db)]
settings_dependency = Annotated[Settings, Depends(get_settings)]
bearer_scheme = HTTPBearer(auto_error=False)


def get_token_repo(request: Request) -> TokenRepository:
    return request.app.state.token_repo

token_repo_dependency = Annotated[TokenRepository, Depends(get_token_repo)]

def get_token_service(settings: settings_dependency, token_repo: token_repo_dependency) -> TokenService:
    return TokenService(settings, token_repo)

token_service_dependency = Annotated[TokenService, Depends(get_token_service)]


async def get_user_repo(db: db_dependency) -> UserRepository:
    return UserRepository(db)

user_dependency = Annotated[UserRepository, Depends(get_user_repo)]

async def get_auth_service(user_repo: user_dependency, token_service: token_service_dependency) -> AuthService:
    return AuthService(user_repo, token_service)


def get_current_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    token_service: token_service_dependency,
) -> TokenPayload:
    token = credentials.credentials if credentials else None
    return token_service.validate_access_token(token)

claims_dependency = Annotated[TokenPayload, Depends(get_current_claims)]


async def get_current_user(claims: claims_dependency, user_repo: user_dependency) -> User:
    user = await user_repo.get_by_id(claims.id)
    if not user:
        raise UnauthorizedException(detail="Unauthorized User")
    return user


async def get_contact_service(db: db_dependency) -> ResourceService[ContactResponse]:
    return ResourceService(ContactRepository(db), ContactResponse)

async def get_advantage_service(db: db_dependency) -> ResourceService[AdvantageResponse]:
    return ResourceService(AdvantageRepository(db), AdvantageResponse)

async def get_project_service(db: db_dependency) -> ResourceService[ProjectResponse]:
    return ResourceService(ProjectRepository(db), ProjectResponse)
