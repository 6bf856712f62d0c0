"""Signup and signin endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session
from schemas.auth import AuthRequest, TokenResponse
from services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=TokenResponse, status_code=201)
async def signup(
    data: AuthRequest,
    db: AsyncSession = Depends(get_async_session),
) -> TokenResponse:
    """Register a new account and return an access token."""
    return await auth_service.signup(db, data.email, data.password)


@router.post("/signin", response_model=TokenResponse)
async def signin(
    data: AuthRequest,
    db: AsyncSession = Depends(get_async_session),
) -> TokenResponse:
    """Exchange email and password for an access token."""
    return await auth_service.signin(db, data.email, data.password)
