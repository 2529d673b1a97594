"""Read access to shoutouts received and shoutouts still owed."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import and_, exists, func
from sqlalchemy.orm import Session

from command_center.domain.entities import (
    RESPONSE_STATUS_COMPLETED,
    ResourceResponse,
    Shoutout,
)
from command_center.infrastructure.models import (
    ResourceModel,
    ResourceResponseModel,
    ShoutoutModel,
)
from command_center.utils import ensure_app_naive_datetime, ensure_app_timezone

from ._profiles import profile_to_entity
from .resource_repository import ResourceRepository


class ShoutoutRepository:
    """Query gratitude exchanged between members."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_received(
        self,
        user_id: str,
        *,
        since: datetime,
        community_id: str | None = None,
    ) -> Sequence[Shoutout]:
        query = (
            self.session.query(ShoutoutModel)
            .filter(ShoutoutModel.to_user_id == user_id)
            .filter(ShoutoutModel.created_at >= ensure_app_naive_datetime(since))
        )
        if community_id:
            query = query.filter(ShoutoutModel.community_id == community_id)
        query = query.order_by(ShoutoutModel.created_at.desc(), ShoutoutModel.id.desc())
        return [self._to_entity(model) for model in query.all()]

    def list_owed(
        self,
        user_id: str,
        *,
        community_id: str | None = None,
        since: datetime | None = None,
    ) -> Sequence[ResourceResponse]:
        """Completed exchanges on others' resources ``user_id`` has not thanked yet."""

        completed_at = func.coalesce(
            ResourceResponseModel.updated_at, ResourceResponseModel.created_at
        )
        already_thanked = exists().where(
            and_(
                ShoutoutModel.from_user_id == user_id,
                ShoutoutModel.resource_id == ResourceResponseModel.resource_id,
            )
        )
        query = (
            self.session.query(ResourceResponseModel)
            .join(ResourceModel, ResourceResponseModel.resource_id == ResourceModel.id)
            .filter(ResourceResponseModel.user_id == user_id)
            .filter(ResourceResponseModel.status == RESPONSE_STATUS_COMPLETED)
            .filter(ResourceModel.owner_id != user_id)
            .filter(~already_thanked)
        )
        if community_id:
            query = query.filter(ResourceModel.community_id == community_id)
        if since is not None:
            query = query.filter(completed_at >= ensure_app_naive_datetime(since))
        query = query.order_by(completed_at.asc(), ResourceResponseModel.id.asc())
        return [ResourceRepository.to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: ShoutoutModel) -> Shoutout:
        return Shoutout(
            id=model.id,
            from_user_id=model.from_user_id,
            to_user_id=model.to_user_id,
            community_id=model.community_id,
            message=model.message,
            created_at=ensure_app_timezone(model.created_at),
            resource_id=model.resource_id,
            resource_title=model.resource.title if model.resource is not None else None,
            sender=profile_to_entity(model.sender),
        )


__all__ = ["ShoutoutRepository"]
