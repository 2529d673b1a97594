"""Pydantic schemas for activity feed endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from command_center.domain.entities import ActivityType, UrgencyLevel


class ActivitySummaryRead(BaseModel):
    id: str = Field(..., description="Stable feed identifier built from type and entity")
    type: ActivityType = Field(..., description="Kind of commitment")
    title: str = Field(..., description="Short human readable title")
    description: str = Field(..., description="One line summary of the activity")
    urgency_level: UrgencyLevel = Field(..., description="Urgency used to rank the feed")
    due_date: datetime | None = Field(
        default=None, description="Start time or response deadline, when time-bound"
    )
    entity_id: str = Field(..., description="Identifier of the source record")
    community_id: str = Field(
        ..., description="Community of the source record, empty for direct messages"
    )
    created_at: datetime = Field(..., description="Creation time of the source record")
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Variant specific details of the activity",
    )

    model_config = ConfigDict(from_attributes=True)


class ActivityCountsRead(BaseModel):
    needs_attention: int = Field(..., ge=0, description="Overdue or urgent items")
    in_progress: int = Field(..., ge=0, description="Accepted exchanges and events within a day")
    upcoming: int = Field(..., ge=0, description="Events further than a day away")
    recent: int = Field(..., ge=0, description="Items finished during the recent window")
    unread_messages: int = Field(..., ge=0, description="Unread direct messages")

    model_config = ConfigDict(from_attributes=True)


__all__ = ["ActivityCountsRead", "ActivitySummaryRead"]
