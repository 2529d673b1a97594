"""Mapping helpers shared by the repositories."""

from __future__ import annotations

from command_center.domain.entities import Profile
from command_center.infrastructure.models import ProfileModel


def profile_to_entity(model: ProfileModel | None) -> Profile | None:
    if model is None:
        return None
    return Profile(id=model.id, name=model.name, email=model.email)
