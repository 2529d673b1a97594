"""Collector for shoutouts received and thank-yous the member still owes."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from command_center.domain.entities import (
    ActivityScope,
    ActivityType,
    RawActivity,
    ResourceResponse,
    Shoutout,
    ShoutoutMetadata,
)
from command_center.infrastructure.repositories import ShoutoutRepository
from command_center.utils import now_in_app_timezone

from .base import SessionFactory, SqlCollector, display_name, truncate


class ShoutoutCollector(SqlCollector):
    """Recent shoutouts addressed to the member plus completed exchanges to thank.

    Without ``scope.since`` only shoutouts received within ``recent_window``
    of ``clock()`` are considered relevant.
    """

    source = "shoutouts"

    def __init__(
        self,
        session_factory: SessionFactory,
        *,
        recent_window: timedelta = timedelta(days=7),
        clock: Callable[[], datetime] = now_in_app_timezone,
    ) -> None:
        super().__init__(session_factory)
        self._recent_window = recent_window
        self._clock = clock

    def collect(self, session: Session, scope: ActivityScope) -> list[RawActivity]:
        repository = ShoutoutRepository(session)
        since = scope.since or self._clock() - self._recent_window

        activities = [
            self._received(shoutout)
            for shoutout in repository.list_received(
                scope.user_id, since=since, community_id=scope.community_id
            )
        ]
        activities.extend(
            self._owed(response)
            for response in repository.list_owed(
                scope.user_id, community_id=scope.community_id, since=scope.since
            )
        )
        return activities

    @staticmethod
    def _received(shoutout: Shoutout) -> RawActivity:
        sender_name = display_name(shoutout.sender)
        metadata = ShoutoutMetadata(
            counterpart_id=shoutout.from_user_id,
            counterpart_name=sender_name,
            resource_id=shoutout.resource_id,
            resource_title=shoutout.resource_title,
            message=shoutout.message,
        )
        return RawActivity(
            type=ActivityType.SHOUTOUT_RECEIVED,
            entity_id=shoutout.id,
            community_id=shoutout.community_id,
            title=f"Shoutout from {sender_name}",
            description=truncate(shoutout.message),
            created_at=shoutout.created_at,
            metadata=metadata.to_dict(),
        )

    @staticmethod
    def _owed(response: ResourceResponse) -> RawActivity:
        resource = response.resource
        owner_name = display_name(resource.owner)
        metadata = ShoutoutMetadata(
            counterpart_id=resource.owner_id,
            counterpart_name=owner_name,
            resource_id=resource.id,
            resource_title=resource.title,
        )
        return RawActivity(
            type=ActivityType.SHOUTOUT_PENDING,
            entity_id=resource.id,
            community_id=resource.community_id,
            title=f"Say thanks for: {resource.title}",
            description=f"Let {owner_name} know how the exchange went",
            created_at=response.updated_at or response.created_at,
            status=response.status,
            metadata=metadata.to_dict(),
        )


__all__ = ["ShoutoutCollector"]
