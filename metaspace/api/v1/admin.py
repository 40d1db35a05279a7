"""Admin-only creation of avatars, elements and maps."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from metaspace.api.v1.auth import require_admin
from metaspace.core.database import get_db
from metaspace.schemas.auth import CurrentUser
from metaspace.schemas.catalog import (
    AvatarCreateRequest,
    AvatarCreateResponse,
    CreatedResponse,
    ElementCreateRequest,
    MapCreateRequest,
)
from metaspace.services import catalog

router = APIRouter()


@router.post("/avatar", response_model=AvatarCreateResponse)
def create_avatar(
    body: AvatarCreateRequest,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> AvatarCreateResponse:
    avatar = catalog.create_avatar(db, body.image_url, name=body.name)
    return AvatarCreateResponse(avatar_id=avatar.id)


@router.post("/element", response_model=CreatedResponse)
def create_element(
    body: ElementCreateRequest,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> CreatedResponse:
    element = catalog.create_element(
        db,
        body.image_url,
        width=body.width,
        height=body.height,
        static=body.static,
    )
    return CreatedResponse(id=element.id)


@router.post("/map", response_model=CreatedResponse)
def create_map(
    body: MapCreateRequest,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> CreatedResponse:
    """
    Create a map template from a thumbnail, '<width>x<height>' dimensions and
    default element placements. Unknown element ids or out-of-bounds placements are a 400.
    """
    game_map = catalog.create_map(
        db,
        body.thumbnail,
        body.dimensions,
        body.default_elements,
        name=body.name,
    )
    return CreatedResponse(id=game_map.id)
