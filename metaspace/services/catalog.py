"""Avatar, element and map catalogs plus per-user avatar metadata."""

import logging
import re
from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from metaspace.core.errors import InvalidTokenError, ValidationError
from metaspace.models import Avatar, Element, Map, MapElement, User
from metaspace.schemas.catalog import MapElementPlacement, UserAvatarItem

logger = logging.getLogger(__name__)

DIMENSIONS_PATTERN = re.compile(r"^\s*(\d+)\s*x\s*(\d+)\s*$", re.IGNORECASE)
MAX_MAP_SIDE = 10_000


def create_avatar(db: Session, image_url: str, name: str | None = None) -> Avatar:
    if not image_url or not image_url.strip():
        raise ValidationError("imageUrl is required.")
    avatar = Avatar(image_url=image_url.strip(), name=name)
    db.add(avatar)
    db.commit()
    db.refresh(avatar)
    logger.info("Avatar created", extra={"avatar_id": avatar.id})
    return avatar


def list_avatars(db: Session) -> list[Avatar]:
    return db.query(Avatar).order_by(Avatar.name, Avatar.id).all()


def update_user_avatar(db: Session, user_id: str, avatar_id: str) -> User:
    """Point the user's metadata at an existing avatar; unknown avatars are a ValidationError."""
    avatar = db.get(Avatar, avatar_id)
    if avatar is None:
        raise ValidationError(f"Avatar {avatar_id!r} does not exist.")
    user = db.get(User, user_id)
    if user is None:
        # Token outlived its user.
        raise InvalidTokenError("User not found")
    user.avatar_id = avatar.id
    db.commit()
    db.refresh(user)
    logger.info("User avatar updated", extra={"user_id": user.id, "avatar_id": avatar.id})
    return user


def parse_id_list(raw_values: Iterable[str]) -> list[str]:
    """
    Flatten ids from query values such as '[a,b]', 'a,b' or repeated parameters.

    Surrounding quotes and whitespace are stripped; order is preserved and duplicates dropped.
    """
    ids: list[str] = []
    seen: set[str] = set()
    for raw in raw_values:
        value = raw.strip()
        if value.startswith("[") and value.endswith("]"):
            value = value[1:-1]
        for part in value.split(","):
            item = part.strip().strip("\"'").strip()
            if item and item not in seen:
                seen.add(item)
                ids.append(item)
    return ids


def bulk_user_avatars(db: Session, user_ids: Sequence[str], max_ids: int) -> list[UserAvatarItem]:
    """Return one entry per existing user in user_ids, in request order. Unknown ids are skipped."""
    if len(user_ids) > max_ids:
        raise ValidationError(f"At most {max_ids} ids are allowed per request.")
    if not user_ids:
        return []
    users = db.query(User).filter(User.id.in_(list(user_ids))).all()
    by_id = {u.id: u for u in users}
    items: list[UserAvatarItem] = []
    for user_id in user_ids:
        user = by_id.get(user_id)
        if user is None:
            continue
        items.append(
            UserAvatarItem(
                user_id=user.id,
                avatar_id=user.avatar_id,
                image_url=user.avatar.image_url if user.avatar is not None else None,
            )
        )
    return items


def create_element(
    db: Session,
    image_url: str,
    width: int,
    height: int,
    static: bool,
) -> Element:
    if not image_url or not image_url.strip():
        raise ValidationError("imageUrl is required.")
    if width < 1 or height < 1:
        raise ValidationError("Element width and height must be at least 1.")
    element = Element(image_url=image_url.strip(), width=width, height=height, is_static=static)
    db.add(element)
    db.commit()
    db.refresh(element)
    logger.info("Element created", extra={"element_id": element.id})
    return element


def parse_dimensions(dimensions: str) -> tuple[int, int]:
    """Parse '<width>x<height>' (e.g. '100x200') into positive integers."""
    match = DIMENSIONS_PATTERN.match(dimensions or "")
    if match is None:
        raise ValidationError("dimensions must look like '<width>x<height>', e.g. '100x200'.")
    width, height = int(match.group(1)), int(match.group(2))
    if not (1 <= width <= MAX_MAP_SIDE and 1 <= height <= MAX_MAP_SIDE):
        raise ValidationError(f"Map width and height must be between 1 and {MAX_MAP_SIDE}.")
    return width, height


def create_map(
    db: Session,
    thumbnail: str,
    dimensions: str,
    default_elements: Sequence[MapElementPlacement],
    name: str | None = None,
) -> Map:
    """
    Create a map with its default element placements.

    Every placement must reference an existing element and lie inside the grid.
    Nothing is written when any placement is rejected.
    """
    if not thumbnail or not thumbnail.strip():
        raise ValidationError("thumbnail is required.")
    width, height = parse_dimensions(dimensions)

    element_ids = {p.element_id for p in default_elements}
    if element_ids:
        found = {
            row.id
            for row in db.query(Element.id).filter(Element.id.in_(sorted(element_ids))).all()
        }
        missing = sorted(element_ids - found)
        if missing:
            raise ValidationError(f"Unknown element ids: {', '.join(missing)}")

    for i, placement in enumerate(default_elements):
        if not (0 <= placement.x < width and 0 <= placement.y < height):
            raise ValidationError(
                f"Element at index {i} is placed outside the {width}x{height} map."
            )

    game_map = Map(name=name, thumbnail=thumbnail.strip(), width=width, height=height)
    game_map.elements = [
        MapElement(element_id=p.element_id, x=p.x, y=p.y, position=i)
        for i, p in enumerate(default_elements)
    ]
    db.add(game_map)
    db.commit()
    db.refresh(game_map)
    logger.info(
        "Map created",
        extra={"map_id": game_map.id, "element_count": len(default_elements)},
    )
    return game_map
