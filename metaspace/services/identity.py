"""Identity and access: signup, signin, token verification and role checks."""

import logging
from functools import lru_cache

import jwt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from metaspace.core.errors import (
    ConflictError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingCredentialError,
    ValidationError,
)
from metaspace.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from metaspace.models import User
from metaspace.schemas.auth import ROLE_ALIASES, CurrentUser

logger = logging.getLogger(__name__)

ROLES = frozenset({"admin", "user"})


@lru_cache(maxsize=1)
def _dummy_password_hash() -> str:
    # Checked against when the username is unknown so signin timing does not reveal it.
    return hash_password("metaspace-dummy-password")


def _validate_username(username: str | None) -> str:
    if username is None or not username.strip():
        raise ValidationError("Username is required.")
    if not (USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN):
        raise ValidationError("Invalid username length.")
    return username


def _validate_password(password: str | None) -> str:
    if not password:
        raise ValidationError("Password is required.")
    if not (PASSWORD_MIN_LEN <= len(password) <= PASSWORD_MAX_LEN):
        raise ValidationError("Invalid password length.")
    return password


def signup(db: Session, username: str | None, password: str | None, role: str = "user") -> User:
    """
    Create a user with a bcrypt-hashed password and return it.

    Raises ValidationError for missing/empty fields or an unknown role and
    ConflictError when the username is taken. The unique index on username is
    the final arbiter when two signups race for the same name.
    """
    username = _validate_username(username)
    password = _validate_password(password)
    role = ROLE_ALIASES.get(role, role)
    if role not in ROLES:
        raise ValidationError(f"Invalid role {role!r}; expected 'admin' or 'user'.")

    existing = db.query(User.id).filter(User.username == username).first()
    if existing is not None:
        raise ConflictError("Username already exists.")

    user = User(username=username, password_hash=hash_password(password), role=role)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("Username already exists.") from e
    db.refresh(user)
    logger.info("User signed up", extra={"user_id": user.id, "role": user.role})
    return user


def authenticate(db: Session, username: str, password: str) -> User:
    """Return the user whose credentials match; raise InvalidCredentialsError otherwise."""
    user = None
    if username and password:
        user = db.query(User).filter(User.username == username).first()
    if user is None:
        verify_password(password or "", _dummy_password_hash())
        raise InvalidCredentialsError()
    if not verify_password(password, user.password_hash):
        raise InvalidCredentialsError()
    return user


def signin(db: Session, username: str, password: str) -> str:
    """Verify credentials and mint a bearer token bound to the user's id and role."""
    try:
        user = authenticate(db, username, password)
    except InvalidCredentialsError:
        logger.info("Signin rejected", extra={"reason": "invalid_credentials"})
        raise
    token = create_access_token(sub=user.id, role=user.role)
    logger.info("User signed in", extra={"user_id": user.id})
    return token


def verify_token(token: str | None) -> CurrentUser:
    """
    Validate a raw bearer token and return the identity it carries.

    Stateless: signature, expiry and claims are checked; the user table is not read.
    """
    if not token:
        raise MissingCredentialError()
    try:
        payload = decode_access_token(token)
    except jwt.ExpiredSignatureError as e:
        raise InvalidTokenError("Token expired") from e
    except jwt.PyJWTError as e:
        raise InvalidTokenError() from e

    sub = payload.get("sub")
    role = payload.get("role")
    if not sub or not isinstance(sub, str):
        raise InvalidTokenError("Invalid token payload")
    if role not in ROLES:
        raise InvalidTokenError("Invalid token payload")
    return CurrentUser(id=sub, role=role)


def require_role(user: CurrentUser, role: str) -> CurrentUser:
    """Return user when it holds role; raise ForbiddenError otherwise."""
    if user.role != role:
        logger.warning(
            "Role check failed",
            extra={"user_id": user.id, "required_role": role},
        )
        raise ForbiddenError(f"{role.capitalize()} access required")
    return user
