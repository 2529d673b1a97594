"""SQLAlchemy model for shoutouts."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from command_center.infrastructure.database import Base
from command_center.utils import now_in_app_naive_datetime

from ._ids import new_id


class ShoutoutModel(Base):
    """Database representation of a thank-you between two members."""

    __tablename__ = "shoutouts"

    id = Column(String(36), primary_key=True, default=new_id)
    from_user_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    to_user_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    resource_id = Column(String(36), ForeignKey("resources.id"), nullable=True, index=True)
    community_id = Column(String(36), ForeignKey("communities.id"), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    sender = relationship("ProfileModel", foreign_keys=[from_user_id], lazy="joined")
    resource = relationship("ResourceModel", lazy="joined")


__all__ = ["ShoutoutModel"]
