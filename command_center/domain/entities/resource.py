"""Domain entities for shared resources and the responses they receive."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .profile import Profile

RESOURCE_TYPE_OFFER = "offer"
RESOURCE_TYPE_REQUEST = "request"


@dataclass
class Resource:
    """An offer or request published by a member."""

    id: str
    community_id: str
    owner_id: str
    type: str
    title: str
    description: str
    is_urgent: bool
    respond_by: datetime | None
    is_active: bool
    created_at: datetime
    owner: Profile | None = None


@dataclass
class ResourceResponse:
    """A member's response to someone else's resource."""

    id: str
    resource: Resource
    user_id: str
    status: str
    created_at: datetime
    updated_at: datetime | None = None
    user: Profile | None = None


__all__ = [
    "Resource",
    "ResourceResponse",
    "RESOURCE_TYPE_OFFER",
    "RESOURCE_TYPE_REQUEST",
]
