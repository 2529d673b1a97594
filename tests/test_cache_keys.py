"""Tests for the cache keys handed to the boundary layer."""

from command_center.application.use_cases.activity import counts_cache_key, feed_cache_key
from command_center.domain.entities import ActivityFilter, Section


def test_feed_key_is_scoped_by_user():
    assert feed_cache_key(ActivityFilter(user_id="u1")) == ("user", "u1", "activities")


def test_feed_key_includes_section_and_community():
    key = feed_cache_key(
        ActivityFilter(user_id="u1", section=Section.UPCOMING, community_id="c1")
    )

    assert key == ("user", "u1", "activities", "upcoming", "community", "c1")


def test_counts_key_never_collides_with_a_feed_key():
    counts = counts_cache_key("u1")

    assert counts == ("user", "u1", "activities", "counts")
    assert all(
        counts != feed_cache_key(ActivityFilter(user_id="u1", section=section))
        for section in Section
    )
