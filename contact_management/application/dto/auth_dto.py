"""
Auth DTO
========

Pydantic models for the login endpoint.
"""
from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """DTO for a login attempt."""
    username: Optional[str] = Field(None, description="User name")
    password: Optional[str] = Field(None, description="Password")


class TokenResponse(BaseModel):
    """DTO carrying an issued bearer token."""
    token: str
