from pydantic import BaseModel

class TokenResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class TokenPayload(BaseModel):
    id: int
    username: str
    exp: int
    jti: str | None = None

class TokenRefreshRequest(BaseModel):
    refresh_token: str | None = None

class TokenRevokeRequest(BaseModel):
    refresh_token: str | None = None

class ProtectedResponse(BaseModel):
    message: str
    user: TokenPayload

class MessageResponse(BaseModel):
    message: str
