"""Errors raised by the activity aggregation core."""

from __future__ import annotations


class ActivityError(Exception):
    """Base class for every failure surfaced by the activity core."""


class InvalidFilterError(ActivityError, ValueError):
    """The feed filter is malformed; raised before any collector runs."""


class CollectorError(ActivityError):
    """A collector failed; the whole aggregation fails with it."""

    def __init__(self, source: str, message: str | None = None) -> None:
        self.source = source
        detail = message or "collector failed"
        super().__init__(f"{source}: {detail}")


class ClassificationError(ActivityError):
    """A collected record cannot be classified."""

    def __init__(self, activity_id: str, message: str) -> None:
        self.activity_id = activity_id
        super().__init__(f"{activity_id}: {message}")


__all__ = [
    "ActivityError",
    "InvalidFilterError",
    "CollectorError",
    "ClassificationError",
]
