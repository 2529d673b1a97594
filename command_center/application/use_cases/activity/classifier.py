"""Temporal and status rules assigning urgency and sections to feed items.

Every rule is a pure function of the item's type, due date, creation date,
status, source urgency hint and the reference time ``now``; classifying the
same record twice at the same ``now`` always yields the same result.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from command_center.domain.entities import (
    RESPONSE_STATUS_COMPLETED,
    ActivityType,
    RawActivity,
    Section,
    UrgencyLevel,
)
from command_center.domain.exceptions import ClassificationError
from command_center.utils import ensure_app_timezone

from .config import DEFAULT_ACTIVITY_CONFIG, ActivityConfig


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one record."""

    urgency_level: UrgencyLevel
    sections: frozenset[Section]
    unread_message: bool = False

    def in_section(self, section: Section) -> bool:
        return section in self.sections


@dataclass(frozen=True)
class _VariantRule:
    requires_due_date: bool = False
    required_metadata: tuple[str, ...] = ()


_VARIANT_RULES: dict[ActivityType, _VariantRule] = {
    ActivityType.EVENT_UPCOMING: _VariantRule(
        requires_due_date=True, required_metadata=("eventStartTime",)
    ),
    ActivityType.RESOURCE_PENDING: _VariantRule(required_metadata=("resourceOwnerId",)),
    ActivityType.RESOURCE_ACCEPTED: _VariantRule(
        required_metadata=("resourceOwnerId", "status")
    ),
    ActivityType.MESSAGE_UNREAD: _VariantRule(
        required_metadata=("senderId", "conversationId")
    ),
    ActivityType.SHOUTOUT_RECEIVED: _VariantRule(required_metadata=("counterpartId",)),
    ActivityType.SHOUTOUT_PENDING: _VariantRule(
        required_metadata=("counterpartId", "resourceId")
    ),
}


def supported_activity_types() -> frozenset[ActivityType]:
    """Return the activity types the classifier has rules for."""

    return frozenset(_VARIANT_RULES)


def resolve_activity_type(item: RawActivity) -> ActivityType:
    """Return ``item.type`` as an :class:`ActivityType` or fail loudly."""

    if isinstance(item.type, ActivityType):
        activity_type = item.type
    else:
        try:
            activity_type = ActivityType(item.type)
        except ValueError as exc:
            raise ClassificationError(
                item.activity_id, f"unknown activity type {item.type!r}"
            ) from exc
    if activity_type not in _VARIANT_RULES:
        raise ClassificationError(
            item.activity_id, f"no classification rule for {activity_type.value!r}"
        )
    return activity_type


def classify(
    item: RawActivity,
    now: datetime,
    config: ActivityConfig = DEFAULT_ACTIVITY_CONFIG,
) -> Classification:
    """Assign an urgency level and the sections ``item`` belongs to at ``now``."""

    activity_type = resolve_activity_type(item)
    _check_variant(item, activity_type)

    now = ensure_app_timezone(now)
    due_date = ensure_app_timezone(item.due_date)
    created_at = ensure_app_timezone(item.created_at)
    status = status_of(item)
    hint = _resolve_hint(item)

    sections: set[Section] = set()
    if _needs_attention(activity_type, due_date, hint, now, config):
        sections.add(Section.NEEDS_ATTENTION)
    if _in_progress(activity_type, due_date, status, now, config):
        sections.add(Section.IN_PROGRESS)
    if _upcoming(activity_type, due_date, now, config):
        sections.add(Section.UPCOMING)
    if _recent(activity_type, due_date, created_at, status, now, config):
        sections.add(Section.RECENT)

    if Section.NEEDS_ATTENTION in sections:
        urgency = UrgencyLevel.URGENT
    elif hint is UrgencyLevel.SOON or _due_within_window(due_date, now, config):
        urgency = UrgencyLevel.SOON
    else:
        urgency = UrgencyLevel.NORMAL

    return Classification(
        urgency_level=urgency,
        sections=frozenset(sections),
        unread_message=activity_type is ActivityType.MESSAGE_UNREAD,
    )


def status_of(item: RawActivity) -> str | None:
    """Return the record status, falling back to ``metadata['status']``."""

    if item.status is not None:
        return item.status
    status = item.metadata.get("status")
    return str(status) if status is not None else None


def _check_variant(item: RawActivity, activity_type: ActivityType) -> None:
    rule = _VARIANT_RULES[activity_type]
    if item.created_at is None:
        raise ClassificationError(item.activity_id, "missing created_at")
    if rule.requires_due_date and item.due_date is None:
        raise ClassificationError(
            item.activity_id, f"{activity_type.value} requires a due date"
        )
    missing = [key for key in rule.required_metadata if key not in item.metadata]
    if missing and not (missing == ["status"] and item.status is not None):
        raise ClassificationError(
            item.activity_id, f"metadata is missing {', '.join(missing)}"
        )


def _resolve_hint(item: RawActivity) -> UrgencyLevel | None:
    hint = item.urgency_hint
    if hint is None or isinstance(hint, UrgencyLevel):
        return hint
    try:
        return UrgencyLevel(hint)
    except ValueError as exc:
        raise ClassificationError(
            item.activity_id, f"unknown urgency hint {hint!r}"
        ) from exc


def _needs_attention(
    activity_type: ActivityType,
    due_date: datetime | None,
    hint: UrgencyLevel | None,
    now: datetime,
    config: ActivityConfig,
) -> bool:
    if hint is UrgencyLevel.URGENT:
        return True
    # Past gatherings belong to history, never to the overdue list.
    if activity_type is ActivityType.EVENT_UPCOMING or due_date is None:
        return False
    return due_date < now - config.overdue_threshold


def _in_progress(
    activity_type: ActivityType,
    due_date: datetime | None,
    status: str | None,
    now: datetime,
    config: ActivityConfig,
) -> bool:
    if activity_type is ActivityType.RESOURCE_ACCEPTED:
        return status != RESPONSE_STATUS_COMPLETED
    if activity_type is ActivityType.EVENT_UPCOMING:
        return _due_within_window(due_date, now, config)
    return False


def _upcoming(
    activity_type: ActivityType,
    due_date: datetime | None,
    now: datetime,
    config: ActivityConfig,
) -> bool:
    return (
        activity_type is ActivityType.EVENT_UPCOMING
        and due_date is not None
        and due_date > now + config.in_progress_window
    )


def _recent(
    activity_type: ActivityType,
    due_date: datetime | None,
    created_at: datetime,
    status: str | None,
    now: datetime,
    config: ActivityConfig,
) -> bool:
    if created_at < now - config.recent_window:
        return False
    if activity_type is ActivityType.EVENT_UPCOMING:
        return due_date is not None and due_date < now
    if activity_type is ActivityType.RESOURCE_ACCEPTED:
        return status == RESPONSE_STATUS_COMPLETED
    return False


def _due_within_window(
    due_date: datetime | None, now: datetime, config: ActivityConfig
) -> bool:
    return due_date is not None and now <= due_date <= now + config.in_progress_window


__all__ = [
    "Classification",
    "classify",
    "resolve_activity_type",
    "status_of",
    "supported_activity_types",
]
