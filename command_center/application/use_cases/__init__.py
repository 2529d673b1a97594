"""Aggregate application use cases."""

from .activity import count_activities, fetch_activities, fetch_activity_counts

__all__ = ["count_activities", "fetch_activities", "fetch_activity_counts"]
