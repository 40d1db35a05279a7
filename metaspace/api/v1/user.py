"""User metadata: set own avatar, bulk avatar lookup."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from metaspace.api.v1.auth import get_current_user
from metaspace.core.config import get_settings
from metaspace.core.database import get_db
from metaspace.schemas.auth import CurrentUser
from metaspace.schemas.catalog import (
    UserAvatarsResponse,
    UserMetadataRequest,
    UserMetadataResponse,
)
from metaspace.services import catalog

router = APIRouter()


@router.post("/metadata", response_model=UserMetadataResponse)
def update_metadata(
    body: UserMetadataRequest,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> UserMetadataResponse:
    """Set the caller's avatar. Unknown avatarId is a 400."""
    user = catalog.update_user_avatar(db, current_user.id, body.avatar_id)
    return UserMetadataResponse(avatar_id=user.avatar_id)


@router.get("/metadata/bulk", response_model=UserAvatarsResponse)
def bulk_metadata(
    db: Annotated[Session, Depends(get_db)],
    ids: Annotated[list[str], Query(description="User ids as [a,b,c], a,b,c or repeated")] = [],
) -> UserAvatarsResponse:
    """
    Avatar info for many users at once, e.g. ?ids=[id1,id2].
    Unknown ids are omitted from the result.
    """
    user_ids = catalog.parse_id_list(ids)
    items = catalog.bulk_user_avatars(db, user_ids, max_ids=get_settings().MAX_BULK_IDS)
    return UserAvatarsResponse(avatars=items)
