"""Collector for unread direct messages."""

from __future__ import annotations

from sqlalchemy.orm import Session

from command_center.domain.entities import (
    ActivityScope,
    ActivityType,
    DirectMessage,
    MessageMetadata,
    RawActivity,
)
from command_center.infrastructure.repositories import DirectMessageRepository

from .base import SqlCollector, display_name, truncate


class MessageCollector(SqlCollector):
    """Unread messages addressed to the member.

    Direct messages live outside any community, so ``scope.community_id`` does
    not narrow them.
    """

    source = "messages"

    def collect(self, session: Session, scope: ActivityScope) -> list[RawActivity]:
        messages = DirectMessageRepository(session).list_unread_for_user(
            scope.user_id, since=scope.since
        )
        return [self._to_activity(message) for message in messages]

    @staticmethod
    def _to_activity(message: DirectMessage) -> RawActivity:
        sender_name = display_name(message.sender)
        metadata = MessageMetadata(
            sender_id=message.from_user_id,
            sender_name=sender_name,
            conversation_id=message.conversation_id,
        )
        return RawActivity(
            type=ActivityType.MESSAGE_UNREAD,
            entity_id=message.id,
            community_id="",
            title=f"Message from {sender_name}",
            description=truncate(message.content),
            created_at=message.created_at,
            metadata=metadata.to_dict(),
        )


__all__ = ["MessageCollector"]
