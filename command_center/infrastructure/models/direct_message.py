"""SQLAlchemy model for direct messages."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from command_center.infrastructure.database import Base
from command_center.utils import now_in_app_naive_datetime

from ._ids import new_id


class DirectMessageModel(Base):
    """Database representation of a private message."""

    __tablename__ = "direct_messages"

    id = Column(String(36), primary_key=True, default=new_id)
    conversation_id = Column(String(36), nullable=False, index=True)
    from_user_id = Column(String(36), ForeignKey("profiles.id"), nullable=False)
    to_user_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    read_at = Column(DateTime(), nullable=True)
    deleted_at = Column(DateTime(), nullable=True)

    sender = relationship("ProfileModel", foreign_keys=[from_user_id], lazy="joined")


__all__ = ["DirectMessageModel"]
