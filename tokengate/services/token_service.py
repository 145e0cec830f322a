from datetime import datetime, timedelta
from typing import Callable, Protocol

from jose import JWTError

from tokengate.core.config import Settings
from tokengate.core.exceptions import (
    BadRequestException,
    ForbiddenException,
    InvalidTokenException,
    UnauthorizedException,
)
from tokengate.core.security import decode_token, encode_token, token_expiry, utcnow
from tokengate.repositories.token_repo import TokenRepository
from tokengate.schemas.token import TokenPayload, TokenResponse
import logging

logger = logging.getLogger(__name__)


class Identity(Protocol):
    id: int
    username: str


class TokenService:
    """
    Issues, verifies, rotates and revokes access/refresh token pairs.

    Access tokens are stateless. Refresh tokens are additionally tracked in
    ``token_repo``; a refresh token is accepted only while it is still in that
    set, and rotation removes it so each one can be redeemed at most once.
    """

    def __init__(self, settings: Settings, token_repo: TokenRepository, clock: Callable[[], datetime] = utcnow):
        self.settings = settings
        self.token_repo = token_repo
        self.clock = clock

    def issue_access_token(self, identity: Identity) -> str:
        expire = token_expiry(self.clock(), timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES))
        return encode_token(
            {"id": identity.id, "username": identity.username},
            self.settings.ACCESS_SECRET_KEY,
            self.settings.ALGORITHM,
            expire,
        )

    def issue_refresh_token(self, identity: Identity) -> str:
        expire = token_expiry(self.clock(), timedelta(days=self.settings.REFRESH_TOKEN_EXPIRE_DAYS))
        token = encode_token(
            {"id": identity.id, "username": identity.username},
            self.settings.REFRESH_SECRET_KEY,
            self.settings.ALGORITHM,
            expire,
            with_jti=True,
        )
        self.token_repo.add(token, expire)
        return token

    def issue_tokens(self, identity: Identity) -> TokenResponse:
        response = TokenResponse(
            access_token=self.issue_access_token(identity),
            refresh_token=self.issue_refresh_token(identity),
        )
        logger.info("Tokens issued for user_id=%s", identity.id)
        return response

    def validate_access_token(self, token: str | None) -> TokenPayload:
        if not token:
            raise UnauthorizedException(detail="Not authenticated")
        try:
            payload = decode_token(token, self.settings.ACCESS_SECRET_KEY, self.settings.ALGORITHM)
            return TokenPayload(**payload)
        except (JWTError, ValueError):
            logger.warning("Access token rejected")
            raise InvalidTokenException(detail="Could not validate credentials")

    def rotate_refresh_token(self, token: str | None) -> TokenResponse:
        if not token:
            raise UnauthorizedException(detail="Refresh token required")
        if not self.token_repo.contains(token):
            logger.warning("Refresh token not active")
            raise ForbiddenException(detail="Refresh token revoked or unknown")
        try:
            payload = TokenPayload(**decode_token(token, self.settings.REFRESH_SECRET_KEY, self.settings.ALGORITHM))
        except (JWTError, ValueError):
            logger.warning("Refresh token failed verification")
            raise ForbiddenException(detail="Invalid refresh token")

        # Only the caller that actually removes the token may issue a new pair.
        if not self.token_repo.discard(token):
            logger.warning("Refresh token already redeemed for user_id=%s", payload.id)
            raise ForbiddenException(detail="Refresh token revoked or unknown")

        logger.info("Refresh token rotated for user_id=%s", payload.id)
        return self.issue_tokens(payload)

    def revoke(self, token: str | None) -> None:
        if not token:
            raise BadRequestException(detail="Refresh token required")
        if self.token_repo.discard(token):
            logger.info("Refresh token revoked")
        else:
            logger.info("Revoke requested for inactive refresh token")
