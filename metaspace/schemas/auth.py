"""Request/response schemas for signup, signin and the authenticated caller."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from metaspace.schemas.common import CamelModel

Role = Literal["admin", "user"]

# Alternate wire names accepted for a role.
ROLE_ALIASES = {"regular": "user"}


class SignupRequest(BaseModel):
    """New account. Emptiness and length are checked by the identity service."""

    username: str = Field(..., description="Unique, case-sensitive username")
    password: str = Field(..., description="Plain-text password (hashed before storage)")
    type: Role = Field(
        default="user",
        description="Account role: admin, or user (also accepted as 'regular')",
    )

    @field_validator("type", mode="before")
    @classmethod
    def normalize_role(cls, v: object) -> object:
        if isinstance(v, str):
            return ROLE_ALIASES.get(v, v)
        return v


class SignupResponse(CamelModel):
    user_id: str = Field(..., description="Identifier of the created user")


class SigninRequest(BaseModel):
    """Credentials for signin."""

    username: str = Field(..., description="Username")
    password: str = Field(..., description="Password")


class TokenResponse(BaseModel):
    """JWT bearer token returned after successful signin."""

    token: str = Field(..., description="JWT access token")


class CurrentUser(BaseModel):
    """Authenticated caller (id and role from the verified token) for dependency injection."""

    id: str
    role: Role
