"""Endpoints for the authenticated user."""
from fastapi import APIRouter, Depends

from api.dependencies import get_current_user
from models.user import User
from schemas.user import UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_user)) -> UserResponse:
    """Get the user the bearer token belongs to."""
    return UserResponse.model_validate(current_user)
