"""Domain entity representing a community member profile."""

from dataclasses import dataclass


@dataclass
class Profile:
    """Public details of a member referenced by feed items."""

    id: str
    name: str
    email: str | None = None


__all__ = ["Profile"]
