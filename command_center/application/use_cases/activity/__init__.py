"""Activity command center use cases."""

from .aggregator import (
    ClassifiedActivity,
    collect_activities,
    fetch_activities,
    merge_and_classify,
    priority_key,
)
from .cache_keys import counts_cache_key, feed_cache_key
from .classifier import Classification, classify, supported_activity_types
from .collectors import Collector, gather_raw_activities
from .config import DEFAULT_ACTIVITY_CONFIG, ActivityConfig
from .counter import count_activities, fetch_activity_counts, tally

__all__ = [
    "ActivityConfig",
    "DEFAULT_ACTIVITY_CONFIG",
    "Classification",
    "ClassifiedActivity",
    "Collector",
    "classify",
    "collect_activities",
    "count_activities",
    "counts_cache_key",
    "feed_cache_key",
    "fetch_activities",
    "fetch_activity_counts",
    "gather_raw_activities",
    "merge_and_classify",
    "priority_key",
    "supported_activity_types",
    "tally",
]
