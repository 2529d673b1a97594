"""Read access to gatherings a member responded to."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from command_center.domain.entities import Gathering, GatheringResponse
from command_center.infrastructure.models import GatheringModel, GatheringResponseModel
from command_center.utils import ensure_app_naive_datetime, ensure_app_timezone

from ._profiles import profile_to_entity


class GatheringRepository:
    """Query gathering responses for a member."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_responses_for_user(
        self,
        user_id: str,
        *,
        statuses: Iterable[str],
        community_id: str | None = None,
        since: datetime | None = None,
    ) -> Sequence[GatheringResponse]:
        query = (
            self.session.query(GatheringResponseModel)
            .join(GatheringModel, GatheringResponseModel.gathering_id == GatheringModel.id)
            .filter(GatheringResponseModel.user_id == user_id)
            .filter(GatheringResponseModel.status.in_(list(statuses)))
            .filter(GatheringModel.is_active.is_(True))
        )
        if community_id:
            query = query.filter(GatheringModel.community_id == community_id)
        if since is not None:
            lower_bound = ensure_app_naive_datetime(since)
            query = query.filter(
                or_(
                    GatheringModel.start_date_time >= lower_bound,
                    GatheringResponseModel.created_at >= lower_bound,
                )
            )
        query = query.order_by(
            GatheringModel.start_date_time.asc(), GatheringResponseModel.id.asc()
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: GatheringResponseModel) -> GatheringResponse:
        gathering = model.gathering
        return GatheringResponse(
            gathering=Gathering(
                id=gathering.id,
                community_id=gathering.community_id,
                organizer_id=gathering.organizer_id,
                title=gathering.title,
                description=gathering.description or "",
                location=gathering.location,
                start_date_time=ensure_app_timezone(gathering.start_date_time),
                end_date_time=ensure_app_timezone(gathering.end_date_time),
                is_active=gathering.is_active,
                created_at=ensure_app_timezone(gathering.created_at),
                organizer=profile_to_entity(gathering.organizer),
            ),
            user_id=model.user_id,
            status=model.status,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["GatheringRepository"]
