"""Read access to direct messages."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from command_center.domain.entities import DirectMessage
from command_center.infrastructure.models import DirectMessageModel
from command_center.utils import ensure_app_naive_datetime, ensure_app_timezone

from ._profiles import profile_to_entity


class DirectMessageRepository:
    """Query the messages waiting in a member's inbox."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_unread_for_user(
        self,
        user_id: str,
        *,
        since: datetime | None = None,
    ) -> Sequence[DirectMessage]:
        query = (
            self.session.query(DirectMessageModel)
            .filter(DirectMessageModel.to_user_id == user_id)
            .filter(DirectMessageModel.read_at.is_(None))
            .filter(DirectMessageModel.deleted_at.is_(None))
        )
        if since is not None:
            query = query.filter(
                DirectMessageModel.created_at >= ensure_app_naive_datetime(since)
            )
        query = query.order_by(
            DirectMessageModel.created_at.desc(), DirectMessageModel.id.desc()
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: DirectMessageModel) -> DirectMessage:
        return DirectMessage(
            id=model.id,
            conversation_id=model.conversation_id,
            from_user_id=model.from_user_id,
            to_user_id=model.to_user_id,
            content=model.content,
            created_at=ensure_app_timezone(model.created_at),
            read_at=ensure_app_timezone(model.read_at),
            sender=profile_to_entity(model.sender),
        )


__all__ = ["DirectMessageRepository"]
