"""Request/response schemas for avatars, elements, maps and user metadata."""

from pydantic import Field

from metaspace.schemas.common import CamelModel


class AvatarCreateRequest(CamelModel):
    image_url: str = Field(..., min_length=1, max_length=2048)
    name: str | None = Field(default=None, max_length=255)


class AvatarCreateResponse(CamelModel):
    avatar_id: str


class AvatarItem(CamelModel):
    id: str
    name: str | None = None
    image_url: str


class AvatarsListResponse(CamelModel):
    """Response for GET /avatars."""

    avatars: list[AvatarItem]


class UserMetadataRequest(CamelModel):
    avatar_id: str = Field(..., min_length=1, max_length=36)


class UserMetadataResponse(CamelModel):
    avatar_id: str


class UserAvatarItem(CamelModel):
    """One entry of the bulk metadata lookup; image_url is None when no avatar is set."""

    user_id: str
    avatar_id: str | None = None
    image_url: str | None = None


class UserAvatarsResponse(CamelModel):
    """Response for GET /user/metadata/bulk."""

    avatars: list[UserAvatarItem]


class ElementCreateRequest(CamelModel):
    image_url: str = Field(..., min_length=1, max_length=2048)
    width: int = Field(..., ge=1, le=1000)
    height: int = Field(..., ge=1, le=1000)
    static: bool = Field(..., description="Static elements block movement")


class MapElementPlacement(CamelModel):
    element_id: str = Field(..., min_length=1, max_length=36)
    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)


class MapCreateRequest(CamelModel):
    thumbnail: str = Field(..., min_length=1, max_length=2048)
    dimensions: str = Field(..., description="Grid size as '<width>x<height>', e.g. '100x200'")
    name: str | None = Field(default=None, max_length=255)
    default_elements: list[MapElementPlacement] = Field(default_factory=list, max_length=10_000)


class CreatedResponse(CamelModel):
    """Identifier of a newly created element or map."""

    id: str
