"""Pydantic request/response schemas."""

from metaspace.schemas.auth import (
    CurrentUser,
    Role,
    SigninRequest,
    SignupRequest,
    SignupResponse,
    TokenResponse,
)
from metaspace.schemas.catalog import (
    AvatarCreateRequest,
    AvatarCreateResponse,
    AvatarItem,
    AvatarsListResponse,
    CreatedResponse,
    ElementCreateRequest,
    MapCreateRequest,
    MapElementPlacement,
    UserAvatarItem,
    UserAvatarsResponse,
    UserMetadataRequest,
    UserMetadataResponse,
)
from metaspace.schemas.health import HealthResponse

__all__ = [
    "AvatarCreateRequest",
    "AvatarCreateResponse",
    "AvatarItem",
    "AvatarsListResponse",
    "CreatedResponse",
    "CurrentUser",
    "ElementCreateRequest",
    "HealthResponse",
    "MapCreateRequest",
    "MapElementPlacement",
    "Role",
    "SigninRequest",
    "SignupRequest",
    "SignupResponse",
    "TokenResponse",
    "UserAvatarItem",
    "UserAvatarsResponse",
    "UserMetadataRequest",
    "UserMetadataResponse",
]
