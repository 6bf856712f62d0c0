"""Pydantic schemas for signup/signin endpoints."""
from pydantic import BaseModel, EmailStr, Field


class AuthRequest(BaseModel):
    """Credentials accepted by both signup and signin."""

    email: EmailStr
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    """Schema for an issued bearer token."""

    access_token: str
