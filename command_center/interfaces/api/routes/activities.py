"""Endpoints exposing the activity command center."""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from command_center.application.use_cases.activity import (
    ActivityConfig,
    Collector,
    counts_cache_key,
    feed_cache_key,
    fetch_activities,
    fetch_activity_counts,
)
from command_center.domain.entities import (
    ActivityCounts,
    ActivityFilter,
    ActivitySummary,
    ActivityType,
    Section,
)
from command_center.domain.exceptions import (
    ActivityError,
    ClassificationError,
    CollectorError,
    InvalidFilterError,
)
from command_center.interfaces.api.dependencies import (
    get_activity_collectors,
    get_activity_config,
    get_current_user_id,
)
from command_center.interfaces.api.schemas import ActivityCountsRead, ActivitySummaryRead

router = APIRouter(prefix="/activities", tags=["activities"])

logger = logging.getLogger(__name__)

SECTION_ALIASES: dict[str, Section] = {
    "attention": Section.NEEDS_ATTENTION,
    "history": Section.RECENT,
    **{section.value: section for section in Section},
}


def _parse_section(value: str | None) -> Section | None:
    if value is None or not value.strip():
        return None
    section = SECTION_ALIASES.get(value.strip().lower())
    if section is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown section '{value}'",
        )
    return section


def _to_http_error(exc: ActivityError, *, user_id: str) -> HTTPException:
    if isinstance(exc, InvalidFilterError):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        )
    if isinstance(exc, CollectorError):
        logger.warning(
            "Activity source %s unavailable for user %s: %s", exc.source, user_id, exc
        )
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Activity source '{exc.source}' is unavailable",
        )
    if isinstance(exc, ClassificationError):
        logger.error("Unclassifiable activity for user %s: %s", user_id, exc)
    else:  # pragma: no cover - every ActivityError subclass is handled above
        logger.error("Activity aggregation failed for user %s: %s", user_id, exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="The activity feed could not be built",
    )


def _set_cache_headers(response: Response, key: tuple[str, ...], config: ActivityConfig) -> None:
    response.headers["Cache-Control"] = f"private, max-age={config.cache_ttl_seconds}"
    response.headers["X-Cache-Key"] = ":".join(key)


def _summary_to_schema(summary: ActivitySummary) -> ActivitySummaryRead:
    return ActivitySummaryRead(
        id=summary.id,
        type=summary.type,
        title=summary.title,
        description=summary.description,
        urgency_level=summary.urgency_level,
        due_date=summary.due_date,
        entity_id=summary.entity_id,
        community_id=summary.community_id,
        created_at=summary.created_at,
        metadata=summary.metadata,
    )


def _counts_to_schema(counts: ActivityCounts) -> ActivityCountsRead:
    return ActivityCountsRead.model_validate(counts)


@router.get("/", response_model=list[ActivitySummaryRead])
async def read_activities(
    response: Response,
    section: str | None = Query(None, description="Section to narrow the feed to"),
    community_id: str | None = Query(None, description="Community scope"),
    types: list[ActivityType] | None = Query(None, description="Activity types to keep"),
    since: datetime | None = Query(None, description="Ignore items older than this"),
    page: int = Query(1, description="1-based page number"),
    page_size: int | None = Query(None, description="Items per page"),
    user_id: str = Depends(get_current_user_id),
    collectors: list[Collector] = Depends(get_activity_collectors),
    config: ActivityConfig = Depends(get_activity_config),
) -> list[ActivitySummaryRead]:
    """Return the authenticated member's urgency-ranked activity feed."""

    activity_filter = ActivityFilter(
        user_id=user_id,
        community_id=community_id or None,
        section=_parse_section(section),
        types=tuple(types) if types else None,
        since=since,
        page=page,
        page_size=page_size,
    )
    try:
        activities = await fetch_activities(collectors, activity_filter, config=config)
    except ActivityError as exc:
        raise _to_http_error(exc, user_id=user_id) from exc

    _set_cache_headers(response, feed_cache_key(activity_filter), config)
    return [_summary_to_schema(activity) for activity in activities]


@router.get("/counts", response_model=ActivityCountsRead)
async def read_activity_counts(
    response: Response,
    user_id: str = Depends(get_current_user_id),
    collectors: list[Collector] = Depends(get_activity_collectors),
    config: ActivityConfig = Depends(get_activity_config),
) -> ActivityCountsRead:
    """Return the badge counts for every section of the command center."""

    try:
        counts = await fetch_activity_counts(collectors, user_id, config=config)
    except ActivityError as exc:
        raise _to_http_error(exc, user_id=user_id) from exc

    _set_cache_headers(response, counts_cache_key(user_id), config)
    return _counts_to_schema(counts)


__all__ = ["router"]
