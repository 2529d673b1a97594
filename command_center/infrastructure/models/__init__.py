"""ORM models for the source tables read by the collectors."""

from .direct_message import DirectMessageModel
from .gathering import GatheringModel, GatheringResponseModel
from .profile import CommunityModel, ProfileModel
from .resource import ResourceModel, ResourceResponseModel
from .shoutout import ShoutoutModel

__all__ = [
    "CommunityModel",
    "DirectMessageModel",
    "GatheringModel",
    "GatheringResponseModel",
    "ProfileModel",
    "ResourceModel",
    "ResourceResponseModel",
    "ShoutoutModel",
]
