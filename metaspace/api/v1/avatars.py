"""Public avatar listing."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from metaspace.core.database import get_db
from metaspace.schemas.catalog import AvatarItem, AvatarsListResponse
from metaspace.services import catalog

router = APIRouter()


@router.get("", response_model=AvatarsListResponse)
def list_avatars(db: Annotated[Session, Depends(get_db)]) -> AvatarsListResponse:
    """All avatars a user can pick from."""
    avatars = catalog.list_avatars(db)
    return AvatarsListResponse(avatars=[AvatarItem.model_validate(a) for a in avatars])
