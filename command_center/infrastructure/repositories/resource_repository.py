"""Read access to resource responses from both sides of an exchange."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from command_center.domain.entities import (
    RESPONSE_STATUS_PENDING,
    Resource,
    ResourceResponse,
)
from command_center.infrastructure.models import ResourceModel, ResourceResponseModel
from command_center.utils import ensure_app_naive_datetime, ensure_app_timezone

from ._profiles import profile_to_entity


class ResourceRepository:
    """Query resource responses a member gave or received."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_responses_by_user(
        self,
        user_id: str,
        *,
        statuses: Iterable[str],
        community_id: str | None = None,
        since: datetime | None = None,
    ) -> Sequence[ResourceResponse]:
        """Responses ``user_id`` made on resources owned by somebody else."""

        query = (
            self._base_query(community_id=community_id, since=since)
            .filter(ResourceResponseModel.user_id == user_id)
            .filter(ResourceModel.owner_id != user_id)
            .filter(ResourceResponseModel.status.in_(list(statuses)))
        )
        return [self.to_entity(model) for model in query.all()]

    def list_pending_for_owner(
        self,
        owner_id: str,
        *,
        community_id: str | None = None,
        since: datetime | None = None,
    ) -> Sequence[ResourceResponse]:
        """Pending responses other members left on ``owner_id``'s active resources."""

        query = (
            self._base_query(community_id=community_id, since=since)
            .filter(ResourceModel.owner_id == owner_id)
            .filter(ResourceModel.is_active.is_(True))
            .filter(ResourceResponseModel.user_id != owner_id)
            .filter(ResourceResponseModel.status == RESPONSE_STATUS_PENDING)
        )
        return [self.to_entity(model) for model in query.all()]

    def _base_query(
        self, *, community_id: str | None, since: datetime | None
    ) -> Query:
        query = self.session.query(ResourceResponseModel).join(
            ResourceModel, ResourceResponseModel.resource_id == ResourceModel.id
        )
        if community_id:
            query = query.filter(ResourceModel.community_id == community_id)
        if since is not None:
            lower_bound = ensure_app_naive_datetime(since)
            query = query.filter(
                or_(
                    ResourceResponseModel.created_at >= lower_bound,
                    ResourceModel.respond_by >= lower_bound,
                )
            )
        return query.order_by(
            ResourceResponseModel.created_at.asc(), ResourceResponseModel.id.asc()
        )

    @staticmethod
    def to_entity(model: ResourceResponseModel) -> ResourceResponse:
        resource = model.resource
        return ResourceResponse(
            id=model.id,
            resource=Resource(
                id=resource.id,
                community_id=resource.community_id,
                owner_id=resource.owner_id,
                type=resource.type,
                title=resource.title,
                description=resource.description or "",
                is_urgent=bool(resource.is_urgent),
                respond_by=ensure_app_timezone(resource.respond_by),
                is_active=resource.is_active,
                created_at=ensure_app_timezone(resource.created_at),
                owner=profile_to_entity(resource.owner),
            ),
            user_id=model.user_id,
            status=model.status,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            user=profile_to_entity(model.user),
        )


__all__ = ["ResourceRepository"]
