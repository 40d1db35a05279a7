"""Signup/signin routes and auth dependencies (get_current_user, require_admin)."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from metaspace.core.database import get_db
from metaspace.schemas.auth import (
    CurrentUser,
    SigninRequest,
    SignupRequest,
    SignupResponse,
    TokenResponse,
)
from metaspace.services import identity

router = APIRouter()
# auto_error=False so a missing header surfaces as MissingCredentialError (403).
security = HTTPBearer(auto_error=False)


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def signup(
    body: SignupRequest,
    db: Annotated[Session, Depends(get_db)],
) -> SignupResponse:
    """Create an account. Returns 400 for an empty username/password or a taken username."""
    user = identity.signup(db, body.username, body.password, role=body.type)
    return SignupResponse(user_id=user.id)


@router.post("/signin", response_model=TokenResponse)
def signin(
    body: SigninRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenResponse:
    """
    Authenticate with username and password; returns a JWT.
    Include the token in the Authorization header as: Bearer <token>
    """
    token = identity.signin(db, body.username, body.password)
    return TokenResponse(token=token)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> CurrentUser:
    """Dependency: require a valid Bearer JWT and return the caller. Raises 403 if missing or invalid."""
    token = credentials.credentials if credentials is not None else None
    return identity.verify_token(token)


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require authenticated user with role 'admin'. Raises 403 for non-admin."""
    return identity.require_role(current_user, "admin")
