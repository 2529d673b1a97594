"""Variant-specific metadata payloads attached to feed items."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Union


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True)
class EventMetadata:
    """Details of a gathering the user plans to attend."""

    event_start_time: datetime
    status: str
    event_end_time: datetime | None = None
    location: str | None = None
    organizer_id: str | None = None
    organizer_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "eventStartTime": _iso(self.event_start_time),
            "eventEndTime": _iso(self.event_end_time),
            "location": self.location,
            "organizerId": self.organizer_id,
            "organizerName": self.organizer_name,
            "status": self.status,
        }


@dataclass(frozen=True)
class ResourceMetadata:
    """Details of a resource exchange the user takes part in."""

    resource_owner_id: str
    status: str
    resource_type: str
    resource_owner_name: str | None = None
    requester_id: str | None = None
    pending_count: int | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "resourceOwnerId": self.resource_owner_id,
            "resourceOwnerName": self.resource_owner_name,
            "resourceType": self.resource_type,
            "status": self.status,
        }
        if self.requester_id is not None:
            payload["requesterId"] = self.requester_id
        if self.pending_count is not None:
            payload["pendingCount"] = self.pending_count
        return payload


@dataclass(frozen=True)
class MessageMetadata:
    """Sender and conversation of an unread direct message."""

    sender_id: str
    conversation_id: str
    sender_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "senderId": self.sender_id,
            "senderName": self.sender_name,
            "conversationId": self.conversation_id,
        }


@dataclass(frozen=True)
class ShoutoutMetadata:
    """Counterpart and resource of a shoutout, received or still owed."""

    counterpart_id: str
    resource_id: str | None = None
    resource_title: str | None = None
    counterpart_name: str | None = None
    message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "counterpartId": self.counterpart_id,
            "counterpartName": self.counterpart_name,
            "resourceId": self.resource_id,
            "resourceTitle": self.resource_title,
            "message": self.message,
        }


ActivityMetadata = Union[EventMetadata, ResourceMetadata, MessageMetadata, ShoutoutMetadata]


__all__ = [
    "ActivityMetadata",
    "EventMetadata",
    "MessageMetadata",
    "ResourceMetadata",
    "ShoutoutMetadata",
]
