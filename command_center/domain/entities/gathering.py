"""Domain entities for community gatherings and attendance responses."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .profile import Profile

GATHERING_RESPONSE_ATTENDING = "attending"
GATHERING_RESPONSE_MAYBE = "maybe"
GATHERING_RESPONSE_NOT_ATTENDING = "not_attending"


@dataclass
class Gathering:
    """A scheduled meetup organised inside a community."""

    id: str
    community_id: str
    organizer_id: str
    title: str
    description: str
    location: str | None
    start_date_time: datetime
    end_date_time: datetime | None
    is_active: bool
    created_at: datetime
    organizer: Profile | None = None


@dataclass
class GatheringResponse:
    """A member's RSVP to a gathering."""

    gathering: Gathering
    user_id: str
    status: str
    created_at: datetime


__all__ = [
    "Gathering",
    "GatheringResponse",
    "GATHERING_RESPONSE_ATTENDING",
    "GATHERING_RESPONSE_MAYBE",
    "GATHERING_RESPONSE_NOT_ATTENDING",
]
