"""SQLAlchemy models for gatherings and attendance responses."""

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


class GatheringModel(Base):
    """Database representation of a community gathering."""

    __tablename__ = "gatherings"

    id = Column(String(36), primary_key=True, default=new_id)
    community_id = Column(String(36), ForeignKey("communities.id"), nullable=False, index=True)
    organizer_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    location = Column(String(255), nullable=True)
    start_date_time = Column(DateTime(), nullable=False)
    end_date_time = Column(DateTime(), nullable=True)
    is_active = Column(
        Boolean,
        nullable=False,
        default=True,
        server_default=expression.true(),
    )
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    organizer = relationship("ProfileModel", lazy="joined")


class GatheringResponseModel(Base):
    """A member's attendance response to a gathering."""

    __tablename__ = "gathering_responses"
    __table_args__ = (UniqueConstraint("gathering_id", "user_id"),)

    id = Column(String(36), primary_key=True, default=new_id)
    gathering_id = Column(
        String(36),
        ForeignKey("gatherings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    status = Column(String(20), nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    gathering = relationship("GatheringModel", lazy="joined")


__all__ = ["GatheringModel", "GatheringResponseModel"]
