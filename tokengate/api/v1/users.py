from typing import Annotated
from fastapi import APIRouter, Depends
from tokengate.api.deps import get_current_user
from tokengate.schemas.user import UserResponse
from tokengate.models.user import User

router = APIRouter()


@router.get("/me", response_model=UserResponse)
async def details(current_user: Annotated[User, Depends(get_current_user)]):
    return current_user
