"""Domain entities describing the unified activity feed."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class ActivityType(str, Enum):
    """Kinds of commitments surfaced in the feed."""

    EVENT_UPCOMING = "event_upcoming"
    RESOURCE_PENDING = "resource_pending"
    RESOURCE_ACCEPTED = "resource_accepted"
    MESSAGE_UNREAD = "message_unread"
    SHOUTOUT_RECEIVED = "shoutout_received"
    SHOUTOUT_PENDING = "shoutout_pending"


class UrgencyLevel(str, Enum):
    """Severity ranking used to order the feed."""

    URGENT = "urgent"
    SOON = "soon"
    NORMAL = "normal"

    @property
    def rank(self) -> int:
        """Sort rank, lower is more urgent."""

        return _URGENCY_RANKS[self]


_URGENCY_RANKS = {
    UrgencyLevel.URGENT: 0,
    UrgencyLevel.SOON: 1,
    UrgencyLevel.NORMAL: 2,
}


class Section(str, Enum):
    """Buckets of the command center used for badge counts and scoped queries."""

    NEEDS_ATTENTION = "needs_attention"
    IN_PROGRESS = "in_progress"
    UPCOMING = "upcoming"
    RECENT = "recent"


RESPONSE_STATUS_PENDING = "pending"
RESPONSE_STATUS_ACCEPTED = "accepted"
RESPONSE_STATUS_COMPLETED = "completed"
RESPONSE_STATUS_DECLINED = "declined"


@dataclass(frozen=True)
class ActivityScope:
    """Subset of a filter forwarded to every collector."""

    user_id: str
    community_id: str | None = None
    since: datetime | None = None


@dataclass(frozen=True)
class ActivityFilter:
    """Parameters accepted by the feed query."""

    user_id: str
    community_id: str | None = None
    section: Section | None = None
    types: tuple[ActivityType, ...] | None = None
    since: datetime | None = None
    page: int = 1
    page_size: int | None = None

    def to_scope(self) -> ActivityScope:
        return ActivityScope(
            user_id=self.user_id, community_id=self.community_id, since=self.since
        )


@dataclass
class RawActivity:
    """Normalized record emitted by a collector before classification.

    ``urgency_hint`` carries a source-side flag (for instance a resource its
    owner marked as urgent); the final urgency is always decided by the
    classifier.
    """

    type: ActivityType | str
    entity_id: str
    community_id: str
    title: str
    description: str
    created_at: datetime
    due_date: datetime | None = None
    status: str | None = None
    urgency_hint: UrgencyLevel | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def activity_id(self) -> str:
        type_value = self.type.value if isinstance(self.type, ActivityType) else self.type
        return f"{type_value}_{self.entity_id}"


@dataclass
class ActivitySummary:
    """Classified feed item returned to callers."""

    id: str
    type: ActivityType
    title: str
    description: str
    urgency_level: UrgencyLevel
    entity_id: str
    community_id: str
    created_at: datetime
    due_date: datetime | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class ActivityCounts:
    """Badge counts for every section plus the unread message tally."""

    needs_attention: int = 0
    in_progress: int = 0
    upcoming: int = 0
    recent: int = 0
    unread_messages: int = 0

    def for_section(self, section: Section) -> int:
        return getattr(self, section.value)


__all__ = [
    "ActivityType",
    "UrgencyLevel",
    "Section",
    "ActivityScope",
    "ActivityFilter",
    "RawActivity",
    "ActivitySummary",
    "ActivityCounts",
    "RESPONSE_STATUS_PENDING",
    "RESPONSE_STATUS_ACCEPTED",
    "RESPONSE_STATUS_COMPLETED",
    "RESPONSE_STATUS_DECLINED",
]
