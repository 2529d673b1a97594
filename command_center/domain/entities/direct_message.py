"""Domain entity representing a direct message between two members."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .profile import Profile


@dataclass
class DirectMessage:
    """A private message delivered inside a conversation."""

    id: str
    conversation_id: str
    from_user_id: str
    to_user_id: str
    content: str
    created_at: datetime
    read_at: datetime | None = None
    sender: Profile | None = None


__all__ = ["DirectMessage"]
