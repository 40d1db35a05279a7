"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import Column, DateTime, ForeignKey, String, func
from sqlalchemy.orm import relationship

from metaspace.models.base import Base, new_id


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'admin' or 'user'. avatar_id is the user's chosen avatar (metadata).
    """

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="user")
    avatar_id = Column(
        String(36),
        ForeignKey("avatars.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    avatar = relationship("Avatar", lazy="joined")
