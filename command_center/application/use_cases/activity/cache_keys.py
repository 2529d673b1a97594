"""Cache keys the boundary layer uses to memoize feeds and counts."""

from __future__ import annotations

from command_center.domain.entities import ActivityFilter

ACTIVITY_NAMESPACE = "activities"


def feed_cache_key(activity_filter: ActivityFilter) -> tuple[str, ...]:
    """Key a feed by user, then by section and community when present."""

    key: list[str] = ["user", activity_filter.user_id, ACTIVITY_NAMESPACE]
    if activity_filter.section is not None:
        key.append(activity_filter.section.value)
    if activity_filter.community_id:
        key.extend(("community", activity_filter.community_id))
    return tuple(key)


def counts_cache_key(user_id: str) -> tuple[str, ...]:
    return ("user", user_id, ACTIVITY_NAMESPACE, "counts")


__all__ = ["ACTIVITY_NAMESPACE", "counts_cache_key", "feed_cache_key"]
