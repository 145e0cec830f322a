from tokengate.core.exceptions import BadRequestException, UnauthorizedException
from tokengate.models.user import User
from tokengate.repositories.user_repo import UserRepository
from tokengate.schemas.token import TokenResponse
from tokengate.schemas.user import LoginRequest, RegisterRequest, RegisterResponse
from tokengate.services.token_service import TokenService
from sqlalchemy.exc import IntegrityError
import logging

logger = logging.getLogger(__name__)



class AuthService:
    def __init__(self, user_repo: UserRepository, token_service: TokenService):
        self.user_repo = user_repo
        self.token_service = token_service


    async def register(self, user_in: RegisterRequest) -> RegisterResponse:
        if not (user_in.username and user_in.password and user_in.phone):
            raise BadRequestException(detail="Username, password and phone are required")

        if await self.user_repo.get_by_username(user_in.username):
            logger.warning("Attempt to register existing username: %s", user_in.username)
            raise BadRequestException(detail="User already exists")

        user_model = User(username=user_in.username, password=user_in.password, phone=user_in.phone)
        try:
            user = await self.user_repo.create(user_model)
        except IntegrityError:
            logger.error("IntegrityError during registration for username=%s", user_in.username)
            raise BadRequestException(detail="User already exists")
        logger.info("User registered: user_id=%s", user.id)

        tokens = self.token_service.issue_tokens(user)
        return RegisterResponse(message="Registration successful", **tokens.model_dump())


    async def login(self, credentials: LoginRequest) -> TokenResponse:
        if not (credentials.username and credentials.password and credentials.phone):
            raise BadRequestException(detail="Username, password and phone are required")

        user = await self.user_repo.lookup_by_credentials(
            credentials.username, credentials.password, credentials.phone
        )
        if not user:
            logger.warning("Login failed for username=%s", credentials.username)
            raise UnauthorizedException(detail="Incorrect username, password or phone")
        logger.info("User logged in successfully: user_id=%s", user.id)
        return self.token_service.issue_tokens(user)
