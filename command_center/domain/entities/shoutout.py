"""Domain entity representing public gratitude between members."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .profile import Profile


@dataclass
class Shoutout:
    """A thank-you one member sends another, usually after an exchange."""

    id: str
    from_user_id: str
    to_user_id: str
    community_id: str
    message: str
    created_at: datetime
    resource_id: str | None = None
    resource_title: str | None = None
    sender: Profile | None = None


__all__ = ["Shoutout"]
