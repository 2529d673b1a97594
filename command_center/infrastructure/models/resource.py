"""SQLAlchemy models for shared resources and their responses."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.sql import expression
from sqlalchemy.orm import relationship

from command_center.infrastructure.database import Base
from command_center.utils import now_in_app_naive_datetime

from ._ids import new_id


class ResourceModel(Base):
    """Database representation of an offer or request."""

    __tablename__ = "resources"

    id = Column(String(36), primary_key=True, default=new_id)
    community_id = Column(String(36), ForeignKey("communities.id"), nullable=False, index=True)
    owner_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    type = Column(String(20), nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    is_urgent = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    respond_by = Column(DateTime(), nullable=True)
    is_active = Column(
        Boolean,
        nullable=False,
        default=True,
        server_default=expression.true(),
    )
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    owner = relationship("ProfileModel", lazy="joined")


class ResourceResponseModel(Base):
    """A member's response to a resource published by someone else."""

    __tablename__ = "resource_responses"
    __table_args__ = (UniqueConstraint("resource_id", "user_id"),)

    id = Column(String(36), primary_key=True, default=new_id)
    resource_id = Column(
        String(36),
        ForeignKey("resources.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    status = Column(String(20), nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True, onupdate=now_in_app_naive_datetime)

    resource = relationship("ResourceModel", lazy="joined")
    user = relationship("ProfileModel", lazy="joined")


__all__ = ["ResourceModel", "ResourceResponseModel"]
