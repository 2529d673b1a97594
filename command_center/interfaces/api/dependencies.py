"""FastAPI dependency utilities."""

from fastapi import Depends, Header, HTTPException, status

from command_center.application.use_cases.activity import ActivityConfig, Collector
from command_center.config import get_settings
from command_center.infrastructure.collectors import build_sql_collectors
from command_center.infrastructure.database import SessionLocal


def get_current_user_id(
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
) -> str:
    """Return the member id forwarded by the authenticating gateway."""

    user_id = (x_user_id or "").strip()
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authenticated user",
        )
    return user_id


def get_activity_config() -> ActivityConfig:
    """Return the thresholds configured for this process."""

    return ActivityConfig.from_settings(get_settings())


def get_activity_collectors(
    config: ActivityConfig = Depends(get_activity_config),
) -> list[Collector]:
    """Return the SQL collectors, each opening its own session per fetch."""

    return build_sql_collectors(SessionLocal, recent_window=config.recent_window)
