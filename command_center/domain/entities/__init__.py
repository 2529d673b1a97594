"""Domain entities exposed by the application."""

from .activity import (
    RESPONSE_STATUS_ACCEPTED,
    RESPONSE_STATUS_COMPLETED,
    RESPONSE_STATUS_DECLINED,
    RESPONSE_STATUS_PENDING,
    ActivityCounts,
    ActivityFilter,
    ActivityScope,
    ActivitySummary,
    ActivityType,
    RawActivity,
    Section,
    UrgencyLevel,
)
from .activity_metadata import (
    ActivityMetadata,
    EventMetadata,
    MessageMetadata,
    ResourceMetadata,
    ShoutoutMetadata,
)
from .direct_message import DirectMessage
from .gathering import (
    GATHERING_RESPONSE_ATTENDING,
    GATHERING_RESPONSE_MAYBE,
    GATHERING_RESPONSE_NOT_ATTENDING,
    Gathering,
    GatheringResponse,
)
from .profile import Profile
from .resource import RESOURCE_TYPE_OFFER, RESOURCE_TYPE_REQUEST, Resource, ResourceResponse
from .shoutout import Shoutout

__all__ = [
    "ActivityCounts",
    "ActivityFilter",
    "ActivityScope",
    "ActivitySummary",
    "ActivityType",
    "RawActivity",
    "Section",
    "UrgencyLevel",
    "RESPONSE_STATUS_PENDING",
    "RESPONSE_STATUS_ACCEPTED",
    "RESPONSE_STATUS_COMPLETED",
    "RESPONSE_STATUS_DECLINED",
    "ActivityMetadata",
    "EventMetadata",
    "MessageMetadata",
    "ResourceMetadata",
    "ShoutoutMetadata",
    "DirectMessage",
    "Gathering",
    "GatheringResponse",
    "GATHERING_RESPONSE_ATTENDING",
    "GATHERING_RESPONSE_MAYBE",
    "GATHERING_RESPONSE_NOT_ATTENDING",
    "Profile",
    "Resource",
    "ResourceResponse",
    "RESOURCE_TYPE_OFFER",
    "RESOURCE_TYPE_REQUEST",
    "Shoutout",
]
