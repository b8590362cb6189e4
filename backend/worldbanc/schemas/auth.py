"""Auth schemas for the shared token login."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    token: str | None = None


class TokenResponse(BaseModel):
    token: str
