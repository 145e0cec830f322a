from pydantic import BaseModel, ConfigDict

from tokengate.schemas.token import TokenResponse

# Fields are optional at the schema level so a missing value is reported
# as 400 by the service rather than as a 422 validation error.
class RegisterRequest(BaseModel):
    username: str | None = None
    password: str | None = None
    phone: str | None = None


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None
    phone: str | None = None


class RegisterResponse(TokenResponse):
    message: str


class UserResponse(BaseModel):
    id: int
    username: str
    phone: str

    model_config= ConfigDict(from_attributes=True)
