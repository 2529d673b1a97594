"""Integration tests for the collectors reading the SQL source tables."""

from __future__ import annotations

from datetime import timedelta

import pytest

from activity_factories import NOW
from command_center.application.use_cases.activity import (
    classify,
    fetch_activities,
    fetch_activity_counts,
)
from command_center.domain.entities import (
    ActivityCounts,
    ActivityFilter,
    ActivityScope,
    ActivityType,
    Section,
    UrgencyLevel,
)
from command_center.domain.exceptions import CollectorError
from command_center.infrastructure.collectors import (
    GatheringCollector,
    MessageCollector,
    ResourceCollector,
    ShoutoutCollector,
    build_sql_collectors,
)
from command_center.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)
from command_center.infrastructure.models import (
    CommunityModel,
    DirectMessageModel,
    GatheringModel,
    GatheringResponseModel,
    ProfileModel,
    ResourceModel,
    ResourceResponseModel,
    ShoutoutModel,
)

pytestmark = pytest.mark.anyio

LOCAL_NOW = NOW.replace(tzinfo=None)


def _at(delta: timedelta):
    return LOCAL_NOW + delta


@pytest.fixture
def session_factory(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'sources.db'}")
    initialize_database(bind=engine)
    factory = build_session_factory(engine)
    _seed(factory)
    yield factory
    engine.dispose()


def _seed(factory) -> None:
    session = factory()
    created = _at(-timedelta(days=2))
    session.add_all(
        [
            ProfileModel(id="me", name="Morgan", created_at=created),
            ProfileModel(id="alice", name="Alice", created_at=created),
            ProfileModel(id="bob", name="Bob", created_at=created),
            CommunityModel(id="c1", name="Riverside", created_at=created),
            CommunityModel(id="c2", name="Hillside", created_at=created),
        ]
    )
    session.flush()
    session.add_all(
        [
            GatheringModel(
                id="g1",
                community_id="c1",
                organizer_id="alice",
                title="Park cleanup",
                description="Bring gloves",
                location="Riverside park",
                start_date_time=_at(timedelta(hours=2)),
                created_at=created,
            ),
            GatheringModel(
                id="g2",
                community_id="c2",
                organizer_id="bob",
                title="Potluck",
                description="Bring a dish",
                start_date_time=_at(timedelta(days=3)),
                created_at=created,
            ),
            GatheringModel(
                id="g3",
                community_id="c1",
                organizer_id="bob",
                title="Book club",
                description="",
                start_date_time=_at(timedelta(days=1)),
                created_at=created,
            ),
            ResourceModel(
                id="r1",
                community_id="c1",
                owner_id="alice",
                type="request",
                title="Help moving a couch",
                description="Saturday morning",
                created_at=created,
            ),
            ResourceModel(
                id="r2",
                community_id="c1",
                owner_id="alice",
                type="offer",
                title="Spare ladder",
                description="Pick up before Friday",
                is_urgent=True,
                created_at=created,
            ),
            ResourceModel(
                id="r3",
                community_id="c1",
                owner_id="bob",
                type="offer",
                title="Sourdough starter",
                description="Fed daily",
                created_at=created,
            ),
            ResourceModel(
                id="r4",
                community_id="c1",
                owner_id="me",
                type="offer",
                title="Bike pump",
                description="Works with presta valves",
                respond_by=_at(timedelta(days=1)),
                created_at=created,
            ),
        ]
    )
    session.flush()
    session.add_all(
        [
            GatheringResponseModel(
                gathering_id="g1", user_id="me", status="attending", created_at=created
            ),
            GatheringResponseModel(
                gathering_id="g2", user_id="me", status="maybe", created_at=created
            ),
            GatheringResponseModel(
                gathering_id="g3", user_id="me", status="not_attending", created_at=created
            ),
            ResourceResponseModel(
                id="rr1", resource_id="r1", user_id="me", status="pending", created_at=created
            ),
            ResourceResponseModel(
                id="rr2", resource_id="r2", user_id="me", status="accepted", created_at=created
            ),
            ResourceResponseModel(
                id="rr3", resource_id="r3", user_id="me", status="completed", created_at=created
            ),
            ResourceResponseModel(
                id="rr4",
                resource_id="r4",
                user_id="alice",
                status="pending",
                created_at=_at(-timedelta(hours=5)),
            ),
            ResourceResponseModel(
                id="rr5",
                resource_id="r4",
                user_id="bob",
                status="pending",
                created_at=_at(-timedelta(hours=3)),
            ),
            DirectMessageModel(
                id="dm1",
                conversation_id="conv-1",
                from_user_id="alice",
                to_user_id="me",
                content="Are you still coming on Saturday?",
                created_at=_at(-timedelta(hours=1)),
            ),
            DirectMessageModel(
                id="dm2",
                conversation_id="conv-1",
                from_user_id="alice",
                to_user_id="me",
                content="Already read",
                created_at=_at(-timedelta(hours=4)),
                read_at=_at(-timedelta(hours=3)),
            ),
            DirectMessageModel(
                id="dm3",
                conversation_id="conv-2",
                from_user_id="bob",
                to_user_id="me",
                content="Deleted",
                created_at=_at(-timedelta(hours=4)),
                deleted_at=_at(-timedelta(hours=3)),
            ),
            ShoutoutModel(
                id="s1",
                from_user_id="bob",
                to_user_id="me",
                community_id="c1",
                resource_id="r4",
                message="Thanks for the pump!",
                created_at=_at(-timedelta(days=1)),
            ),
            ShoutoutModel(
                id="s2",
                from_user_id="alice",
                to_user_id="me",
                community_id="c1",
                message="Old news",
                created_at=_at(-timedelta(days=30)),
            ),
        ]
    )
    session.commit()
    session.close()


def _scope(**overrides) -> ActivityScope:
    return ActivityScope(**{"user_id": "me", **overrides})


async def test_gathering_collector_returns_attending_and_maybe(session_factory):
    activities = await GatheringCollector(session_factory).fetch(_scope())

    assert [activity.entity_id for activity in activities] == ["g1", "g2"]
    first = activities[0]
    assert first.type is ActivityType.EVENT_UPCOMING
    assert first.due_date == NOW + timedelta(hours=2)
    assert first.description == "Event at Riverside park"
    assert first.metadata["organizerName"] == "Alice"
    assert first.metadata["status"] == "attending"


async def test_resource_collector_covers_both_sides_of_an_exchange(session_factory):
    activities = await ResourceCollector(session_factory).fetch(_scope())
    by_id = {activity.activity_id: activity for activity in activities}

    assert set(by_id) == {
        "resource_pending_r1",
        "resource_accepted_r2",
        "resource_accepted_r3",
        "resource_pending_r4",
    }
    assert by_id["resource_pending_r1"].title == "Waiting on: Help moving a couch"
    assert by_id["resource_accepted_r2"].urgency_hint is UrgencyLevel.URGENT
    assert by_id["resource_accepted_r3"].metadata["status"] == "completed"

    incoming = by_id["resource_pending_r4"]
    assert incoming.title == "Response needed: Bike pump"
    assert incoming.urgency_hint is UrgencyLevel.SOON
    assert incoming.metadata["pendingCount"] == 2
    assert incoming.created_at == NOW - timedelta(hours=3)
    assert incoming.due_date == NOW + timedelta(days=1)



def _add(factory, *models) -> None:
    session = factory()
    session.add_all(models)
    session.commit()
    session.close()


async def test_respond_by_does_not_make_finished_exchanges_overdue(session_factory):
    _add(
        session_factory,
        ResourceModel(
            id="r5",
            community_id="c1",
            owner_id="bob",
            type="offer",
            title="Lawn mower",
            description="Needs petrol",
            respond_by=_at(-timedelta(days=2)),
            created_at=_at(-timedelta(days=4)),
        ),
        ResourceModel(
            id="r6",
            community_id="c1",
            owner_id="bob",
            type="request",
            title="Dog sitting",
            description="Two evenings",
            respond_by=_at(-timedelta(days=1)),
            created_at=_at(-timedelta(days=4)),
        ),
    )
    _add(
        session_factory,
        ResourceResponseModel(
            id="rr6",
            resource_id="r5",
            user_id="me",
            status="completed",
            created_at=_at(-timedelta(days=3)),
        ),
        ResourceResponseModel(
            id="rr7",
            resource_id="r6",
            user_id="me",
            status="accepted",
            created_at=_at(-timedelta(days=3)),
        ),
    )

    activities = await ResourceCollector(session_factory).fetch(_scope())
    by_id = {activity.activity_id: activity for activity in activities}

    completed = by_id["resource_accepted_r5"]
    assert completed.due_date is None
    classification = classify(completed, NOW)
    assert classification.sections == frozenset({Section.RECENT})
    assert classification.urgency_level is UrgencyLevel.NORMAL

    accepted = by_id["resource_accepted_r6"]
    assert accepted.due_date is None
    classification = classify(accepted, NOW)
    assert classification.sections == frozenset({Section.IN_PROGRESS})
    assert classification.urgency_level is UrgencyLevel.NORMAL


async def test_message_collector_skips_read_and_deleted_messages(session_factory):
    activities = await MessageCollector(session_factory).fetch(_scope(community_id="c2"))

    assert [activity.entity_id for activity in activities] == ["dm1"]
    assert activities[0].community_id == ""
    assert activities[0].title == "Message from Alice"


async def test_shoutout_collector_returns_recent_and_owed_shoutouts(session_factory):
    collector = ShoutoutCollector(session_factory, clock=lambda: NOW)

    activities = await collector.fetch(_scope())

    assert [activity.activity_id for activity in activities] == [
        "shoutout_received_s1",
        "shoutout_pending_r3",
    ]
    assert activities[1].metadata["counterpartId"] == "bob"


async def test_owed_shoutouts_honour_since_by_completion_time(session_factory):
    _add(
        session_factory,
        ResourceModel(
            id="r7",
            community_id="c1",
            owner_id="bob",
            type="offer",
            title="Canning jars",
            description="A dozen",
            created_at=_at(-timedelta(days=4)),
        ),
    )
    _add(
        session_factory,
        ResourceResponseModel(
            id="rr8",
            resource_id="r7",
            user_id="me",
            status="completed",
            created_at=_at(-timedelta(days=3)),
            updated_at=_at(-timedelta(minutes=30)),
        ),
    )
    collector = ShoutoutCollector(session_factory, clock=lambda: NOW)

    activities = await collector.fetch(_scope(since=NOW - timedelta(hours=1)))

    assert [activity.activity_id for activity in activities] == ["shoutout_pending_r7"]
    assert activities[0].created_at == NOW - timedelta(minutes=30)


async def test_community_scope_narrows_community_bound_sources(session_factory):
    collectors = build_sql_collectors(session_factory, clock=lambda: NOW)

    activities = await fetch_activities(
        collectors, ActivityFilter(user_id="me", community_id="c2"), now=NOW
    )

    assert {activity.id for activity in activities} == {
        "event_upcoming_g2",
        "message_unread_dm1",
    }


async def test_since_is_pushed_down_to_the_queries(session_factory):
    activities = await MessageCollector(session_factory).fetch(
        _scope(since=NOW - timedelta(minutes=30))
    )

    assert activities == []


async def test_end_to_end_feed_and_counts(session_factory):
    collectors = build_sql_collectors(session_factory, clock=lambda: NOW)

    in_progress = await fetch_activities(
        collectors, ActivityFilter(user_id="me", section=Section.IN_PROGRESS), now=NOW
    )
    counts = await fetch_activity_counts(collectors, "me", now=NOW)

    assert [activity.id for activity in in_progress] == [
        "resource_accepted_r2",
        "event_upcoming_g1",
    ]
    assert counts == ActivityCounts(
        needs_attention=1,
        in_progress=2,
        upcoming=1,
        recent=1,
        unread_messages=1,
    )


async def test_database_failures_are_wrapped_as_collector_errors(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'empty.db'}")
    factory = build_session_factory(engine)

    with pytest.raises(CollectorError) as exc_info:
        await GatheringCollector(factory).fetch(_scope())

    assert exc_info.value.source == "gatherings"
    engine.dispose()
