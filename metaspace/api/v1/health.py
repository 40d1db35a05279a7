"""Health check endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from metaspace.core.config import get_settings
from metaspace.core.database import check_db_connected, get_db
from metaspace.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
) -> HealthResponse:
    """Always 200 while the process is up; `database` reports whether SELECT 1 succeeds."""
    return HealthResponse(
        version=request.app.version,
        environment=get_settings().APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
    )
