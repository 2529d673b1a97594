"""Activity command center package.

Aggregates a user's gatherings, resource exchanges, direct messages and
shoutouts into a single urgency-ranked feed with per-section badge counts.
"""
