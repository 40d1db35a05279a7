"""ORM models for the avatar, element and map catalogs."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from metaspace.models.base import Base, new_id


class Avatar(Base):
    __tablename__ = "avatars"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=True)
    image_url = Column(String(2048), nullable=False)


class Element(Base):
    """Placeable object; static elements block movement on the map."""

    __tablename__ = "elements"

    id = Column(String(36), primary_key=True, default=new_id)
    image_url = Column(String(2048), nullable=False)
    width = Column(Integer, nullable=False)
    height = Column(Integer, nullable=False)
    is_static = Column(Boolean, nullable=False, default=False)


class Map(Base):
    """
    Map template that spaces are created from.

    Holds its grid size and the default element placements, in the order submitted.
    """

    __tablename__ = "maps"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=True)
    thumbnail = Column(String(2048), nullable=False)
    width = Column(Integer, nullable=False)
    height = Column(Integer, nullable=False)

    elements = relationship(
        "MapElement",
        back_populates="map",
        cascade="all, delete-orphan",
        order_by="MapElement.position",
    )


class MapElement(Base):
    __tablename__ = "map_elements"

    id = Column(String(36), primary_key=True, default=new_id)
    map_id = Column(
        String(36),
        ForeignKey("maps.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    element_id = Column(
        String(36),
        ForeignKey("elements.id"),
        nullable=False,
    )
    x = Column(Integer, nullable=False)
    y = Column(Integer, nullable=False)
    position = Column(Integer, nullable=False, default=0)

    map = relationship("Map", back_populates="elements")
    element = relationship("Element")
