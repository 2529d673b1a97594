from .activity import ActivityCountsRead, ActivitySummaryRead

__all__ = ["ActivityCountsRead", "ActivitySummaryRead"]
