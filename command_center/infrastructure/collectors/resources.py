"""Collector for resource exchanges the member requested, accepted or owns."""

from __future__ import annotations

from collections import OrderedDict

from sqlalchemy.orm import Session

from command_center.domain.entities import (
    RESOURCE_TYPE_REQUEST,
    RESPONSE_STATUS_ACCEPTED,
    RESPONSE_STATUS_COMPLETED,
    RESPONSE_STATUS_PENDING,
    ActivityScope,
    ActivityType,
    RawActivity,
    ResourceMetadata,
    ResourceResponse,
    UrgencyLevel,
)
from command_center.infrastructure.repositories import ResourceRepository

from .base import SqlCollector, display_name, truncate


class ResourceCollector(SqlCollector):
    """Resource responses seen from the responder's and the owner's side."""

    source = "resources"
    statuses = (RESPONSE_STATUS_PENDING, RESPONSE_STATUS_ACCEPTED, RESPONSE_STATUS_COMPLETED)

    def collect(self, session: Session, scope: ActivityScope) -> list[RawActivity]:
        repository = ResourceRepository(session)
        activities: list[RawActivity] = []

        for response in repository.list_responses_by_user(
            scope.user_id,
            statuses=self.statuses,
            community_id=scope.community_id,
            since=scope.since,
        ):
            if response.status == RESPONSE_STATUS_PENDING:
                if not response.resource.is_active:
                    continue
                activities.append(self._waiting_on_owner(response))
            else:
                activities.append(self._accepted(response))

        incoming = repository.list_pending_for_owner(
            scope.user_id, community_id=scope.community_id, since=scope.since
        )
        grouped: OrderedDict[str, list[ResourceResponse]] = OrderedDict()
        for response in incoming:
            grouped.setdefault(response.resource.id, []).append(response)
        for responses in grouped.values():
            activities.append(self._response_needed(responses))

        return activities

    @staticmethod
    def _waiting_on_owner(response: ResourceResponse) -> RawActivity:
        resource = response.resource
        metadata = ResourceMetadata(
            resource_owner_id=resource.owner_id,
            resource_owner_name=display_name(resource.owner, fallback=""),
            resource_type=resource.type,
            status=response.status,
        )
        return RawActivity(
            type=ActivityType.RESOURCE_PENDING,
            entity_id=resource.id,
            community_id=resource.community_id,
            title=f"Waiting on: {resource.title}",
            description=truncate(resource.description),
            created_at=response.created_at,
            due_date=resource.respond_by,
            status=response.status,
            urgency_hint=UrgencyLevel.URGENT if resource.is_urgent else None,
            metadata=metadata.to_dict(),
        )

    @staticmethod
    def _accepted(response: ResourceResponse) -> RawActivity:
        # respond_by only bounds the response itself; once accepted it no longer applies.
        resource = response.resource
        verb = "Helping with" if resource.type == RESOURCE_TYPE_REQUEST else "Picking up"
        metadata = ResourceMetadata(
            resource_owner_id=resource.owner_id,
            resource_owner_name=display_name(resource.owner, fallback=""),
            resource_type=resource.type,
            status=response.status,
        )
        hint = None
        if resource.is_urgent and response.status == RESPONSE_STATUS_ACCEPTED:
            hint = UrgencyLevel.URGENT
        return RawActivity(
            type=ActivityType.RESOURCE_ACCEPTED,
            entity_id=resource.id,
            community_id=resource.community_id,
            title=f"{verb}: {resource.title}",
            description=truncate(resource.description),
            created_at=response.created_at,
            status=response.status,
            urgency_hint=hint,
            metadata=metadata.to_dict(),
        )

    @staticmethod
    def _response_needed(responses: list[ResourceResponse]) -> RawActivity:
        first = responses[0]
        resource = first.resource
        pending_count = len(responses)
        if pending_count == 1:
            description = f"{display_name(first.user)} responded to your {resource.type}"
        else:
            description = f"{pending_count} members responded to your {resource.type}"
        metadata = ResourceMetadata(
            resource_owner_id=resource.owner_id,
            resource_owner_name=display_name(resource.owner, fallback=""),
            resource_type=resource.type,
            status=RESPONSE_STATUS_PENDING,
            requester_id=first.user_id if pending_count == 1 else None,
            pending_count=pending_count,
        )
        return RawActivity(
            type=ActivityType.RESOURCE_PENDING,
            entity_id=resource.id,
            community_id=resource.community_id,
            title=f"Response needed: {resource.title}",
            description=description,
            created_at=max(response.created_at for response in responses),
            due_date=resource.respond_by,
            status=RESPONSE_STATUS_PENDING,
            urgency_hint=UrgencyLevel.URGENT if resource.is_urgent else UrgencyLevel.SOON,
            metadata=metadata.to_dict(),
        )


__all__ = ["ResourceCollector"]
