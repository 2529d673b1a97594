"""SQLAlchemy models for communities and member profiles."""

from sqlalchemy import Column, DateTime, String

from command_center.infrastructure.database import Base
from command_center.utils import now_in_app_naive_datetime

from ._ids import new_id


class CommunityModel(Base):
    """Database representation of a community."""

    __tablename__ = "communities"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(120), nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


class ProfileModel(Base):
    """Database representation of a member profile."""

    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(120), nullable=False)
    email = Column(String(120), nullable=True, index=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["CommunityModel", "ProfileModel"]
