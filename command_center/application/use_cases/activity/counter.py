"""Badge counts derived from the full, unpaginated activity universe."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from command_center.domain.entities import ActivityCounts, ActivityScope
from command_center.utils import ensure_app_timezone, now_in_app_timezone

from .aggregator import ClassifiedActivity, collect_activities, validate_user_id
from .collectors import Collector
from .config import DEFAULT_ACTIVITY_CONFIG, ActivityConfig


def tally(classified: Iterable[ClassifiedActivity]) -> ActivityCounts:
    """Count every section predicate independently across ``classified``."""

    counts = ActivityCounts()
    for item in classified:
        for section in item.classification.sections:
            setattr(counts, section.value, getattr(counts, section.value) + 1)
        if item.classification.unread_message:
            counts.unread_messages += 1
    return counts


async def count_activities(
    collectors: Sequence[Collector],
    scope: ActivityScope,
    *,
    now: datetime | None = None,
    config: ActivityConfig = DEFAULT_ACTIVITY_CONFIG,
) -> ActivityCounts:
    """Return the section counts for ``scope`` without filtering or paging."""

    user_id = validate_user_id(scope.user_id)
    reference = ensure_app_timezone(now) if now is not None else now_in_app_timezone()
    classified = await collect_activities(
        collectors,
        ActivityScope(user_id=user_id, community_id=scope.community_id, since=scope.since),
        now=reference,
        config=config,
    )
    return tally(classified)


async def fetch_activity_counts(
    collectors: Sequence[Collector],
    user_id: str,
    *,
    now: datetime | None = None,
    config: ActivityConfig = DEFAULT_ACTIVITY_CONFIG,
) -> ActivityCounts:
    """Return the global badge counts for ``user_id``."""

    return await count_activities(
        collectors, ActivityScope(user_id=user_id), now=now, config=config
    )


__all__ = ["count_activities", "fetch_activity_counts", "tally"]
