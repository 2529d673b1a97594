"""Collectors reading the SQL source tables."""

from collections.abc import Callable
from datetime import datetime, timedelta

from command_center.utils import now_in_app_timezone

from .base import SessionFactory, SqlCollector
from .gatherings import GatheringCollector
from .messages import MessageCollector
from .resources import ResourceCollector
from .shoutouts import ShoutoutCollector


def build_sql_collectors(
    session_factory: SessionFactory,
    *,
    recent_window: timedelta = timedelta(days=7),
    clock: Callable[[], datetime] = now_in_app_timezone,
) -> list[SqlCollector]:
    """Return the four collectors in their canonical fan-out order."""

    return [
        GatheringCollector(session_factory),
        ResourceCollector(session_factory),
        MessageCollector(session_factory),
        ShoutoutCollector(session_factory, recent_window=recent_window, clock=clock),
    ]


__all__ = [
    "GatheringCollector",
    "MessageCollector",
    "ResourceCollector",
    "SessionFactory",
    "ShoutoutCollector",
    "SqlCollector",
    "build_sql_collectors",
]
