"""Collector turning gathering RSVPs into upcoming-event activities."""

from __future__ import annotations

from sqlalchemy.orm import Session

from command_center.domain.entities import (
    GATHERING_RESPONSE_ATTENDING,
    GATHERING_RESPONSE_MAYBE,
    ActivityScope,
    ActivityType,
    EventMetadata,
    GatheringResponse,
    RawActivity,
)
from command_center.infrastructure.repositories import GatheringRepository

from .base import SqlCollector, display_name


class GatheringCollector(SqlCollector):
    """Gatherings the member is attending or might attend."""

    source = "gatherings"
    statuses = (GATHERING_RESPONSE_ATTENDING, GATHERING_RESPONSE_MAYBE)

    def collect(self, session: Session, scope: ActivityScope) -> list[RawActivity]:
        responses = GatheringRepository(session).list_responses_for_user(
            scope.user_id,
            statuses=self.statuses,
            community_id=scope.community_id,
            since=scope.since,
        )
        return [self._to_activity(response) for response in responses]

    @staticmethod
    def _to_activity(response: GatheringResponse) -> RawActivity:
        gathering = response.gathering
        if gathering.location:
            description = f"Event at {gathering.location}"
        else:
            description = gathering.description
        metadata = EventMetadata(
            event_start_time=gathering.start_date_time,
            event_end_time=gathering.end_date_time,
            location=gathering.location,
            organizer_id=gathering.organizer_id,
            organizer_name=display_name(gathering.organizer, fallback=""),
            status=response.status,
        )
        return RawActivity(
            type=ActivityType.EVENT_UPCOMING,
            entity_id=gathering.id,
            community_id=gathering.community_id,
            title=gathering.title,
            description=description,
            created_at=response.created_at,
            due_date=gathering.start_date_time,
            status=response.status,
            metadata=metadata.to_dict(),
        )


__all__ = ["GatheringCollector"]
