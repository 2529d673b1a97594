"""Shared plumbing for collectors backed by the SQL source tables."""

from __future__ import annotations

import logging
from collections.abc import Callable

from anyio import to_thread
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from command_center.domain.entities import ActivityScope, RawActivity
from command_center.domain.exceptions import CollectorError

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], Session]


class SqlCollector:
    """Run a synchronous query in a worker thread with its own session.

    Subclasses implement :meth:`collect`. Every fetch opens a fresh session so
    collectors running concurrently never share one.
    """

    source = "sql"

    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    async def fetch(self, scope: ActivityScope) -> list[RawActivity]:
        try:
            activities = await to_thread.run_sync(self._collect_in_session, scope)
        except SQLAlchemyError as exc:
            logger.warning(
                "Collector %s failed for user %s: %s", self.source, scope.user_id, exc
            )
            raise CollectorError(self.source, "database query failed") from exc
        logger.debug(
            "Collector %s returned %d activities for user %s",
            self.source,
            len(activities),
            scope.user_id,
        )
        return activities

    def _collect_in_session(self, scope: ActivityScope) -> list[RawActivity]:
        session = self._session_factory()
        try:
            return self.collect(session, scope)
        finally:
            session.close()

    def collect(self, session: Session, scope: ActivityScope) -> list[RawActivity]:
        raise NotImplementedError


def display_name(profile, fallback: str = "Someone") -> str:
    """Return a profile's name for titles, or ``fallback`` when unknown."""

    if profile is None or not profile.name:
        return fallback
    return profile.name


def truncate(text: str, limit: int = 120) -> str:
    text = " ".join(text.split())
    if len(text) <= limit:
        return text
    return text[: limit - 1].rstrip() + "…"


__all__ = ["SessionFactory", "SqlCollector", "display_name", "truncate"]
