"""Repository implementations for infrastructure layer."""

from .direct_message_repository import DirectMessageRepository
from .gathering_repository import GatheringRepository
from .resource_repository import ResourceRepository
from .shoutout_repository import ShoutoutRepository

__all__ = [
    "DirectMessageRepository",
    "GatheringRepository",
    "ResourceRepository",
    "ShoutoutRepository",
]
