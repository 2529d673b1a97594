"""Merge, classify, filter, sort and paginate the activity feed."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime

from command_center.domain.entities import (
    ActivityFilter,
    ActivityScope,
    ActivitySummary,
    RawActivity,
)
from command_center.domain.exceptions import InvalidFilterError
from command_center.utils import ensure_app_timezone, now_in_app_timezone

from .classifier import Classification, classify, resolve_activity_type
from .collectors import Collector, gather_raw_activities
from .config import DEFAULT_ACTIVITY_CONFIG, ActivityConfig


@dataclass(frozen=True)
class ClassifiedActivity:
    """A feed item together with the classification it was built from."""

    summary: ActivitySummary
    classification: Classification


def validate_user_id(user_id: str | None) -> str:
    """Return the stripped ``user_id`` or raise :class:`InvalidFilterError`."""

    if not isinstance(user_id, str) or not user_id.strip():
        raise InvalidFilterError("user_id is required")
    return user_id.strip()


def resolve_page_size(activity_filter: ActivityFilter, config: ActivityConfig) -> int:
    """Validate pagination fields and return the effective page size."""

    if activity_filter.page < 1:
        raise InvalidFilterError("page must be greater than or equal to 1")
    page_size = activity_filter.page_size
    if page_size is None:
        return config.default_page_size
    if page_size < 1:
        raise InvalidFilterError("page_size must be greater than or equal to 1")
    if config.max_page_size is not None and page_size > config.max_page_size:
        raise InvalidFilterError(f"page_size cannot exceed {config.max_page_size}")
    return page_size


def merge_and_classify(
    raw_activities: Iterable[RawActivity],
    now: datetime,
    config: ActivityConfig = DEFAULT_ACTIVITY_CONFIG,
) -> list[ClassifiedActivity]:
    """Deduplicate collector output by feed id and classify every record.

    When two records share an id the first one collected wins.
    """

    classified: list[ClassifiedActivity] = []
    seen: set[str] = set()
    for raw in raw_activities:
        activity_id = raw.activity_id
        if activity_id in seen:
            continue
        seen.add(activity_id)
        classification = classify(raw, now, config)
        classified.append(
            ClassifiedActivity(
                summary=_to_summary(raw, classification),
                classification=classification,
            )
        )
    return classified


async def collect_activities(
    collectors: Sequence[Collector],
    scope: ActivityScope,
    *,
    now: datetime,
    config: ActivityConfig = DEFAULT_ACTIVITY_CONFIG,
) -> list[ClassifiedActivity]:
    """Fan out to ``collectors`` and return the merged, classified universe."""

    raw_activities = await gather_raw_activities(
        collectors, scope, timeout=config.collector_timeout_seconds
    )
    return merge_and_classify(raw_activities, now, config)


def priority_key(summary: ActivitySummary) -> tuple:
    """Sort key: urgency, soonest due date, newest first, then stable ids."""

    due_date = summary.due_date
    return (
        summary.urgency_level.rank,
        due_date is None,
        due_date.timestamp() if due_date is not None else 0.0,
        -summary.created_at.timestamp(),
        summary.entity_id,
        summary.id,
    )


async def fetch_activities(
    collectors: Sequence[Collector],
    activity_filter: ActivityFilter,
    *,
    now: datetime | None = None,
    config: ActivityConfig = DEFAULT_ACTIVITY_CONFIG,
) -> list[ActivitySummary]:
    """Return one page of the user's urgency-ranked activity feed."""

    user_id = validate_user_id(activity_filter.user_id)
    page_size = resolve_page_size(activity_filter, config)
    reference = ensure_app_timezone(now) if now is not None else now_in_app_timezone()

    scope = ActivityScope(
        user_id=user_id,
        community_id=activity_filter.community_id,
        since=activity_filter.since,
    )
    classified = await collect_activities(
        collectors, scope, now=reference, config=config
    )

    selected = [
        item for item in classified if _matches_filter(item, activity_filter)
    ]
    summaries = sorted((item.summary for item in selected), key=priority_key)

    start = (activity_filter.page - 1) * page_size
    return summaries[start : start + page_size]


def _matches_filter(item: ClassifiedActivity, activity_filter: ActivityFilter) -> bool:
    summary = item.summary
    if activity_filter.types and summary.type not in activity_filter.types:
        return False
    if activity_filter.section is not None and not item.classification.in_section(
        activity_filter.section
    ):
        return False
    if activity_filter.since is not None:
        since = ensure_app_timezone(activity_filter.since)
        due_date = summary.due_date
        if summary.created_at < since and (due_date is None or due_date < since):
            return False
    return True


def _to_summary(raw: RawActivity, classification: Classification) -> ActivitySummary:
    return ActivitySummary(
        id=raw.activity_id,
        type=resolve_activity_type(raw),
        title=raw.title,
        description=raw.description,
        urgency_level=classification.urgency_level,
        entity_id=raw.entity_id,
        community_id=raw.community_id or "",
        created_at=ensure_app_timezone(raw.created_at),
        due_date=ensure_app_timezone(raw.due_date),
        metadata=dict(raw.metadata),
    )


__all__ = [
    "ClassifiedActivity",
    "collect_activities",
    "fetch_activities",
    "merge_and_classify",
    "priority_key",
    "resolve_page_size",
    "validate_user_id",
]
