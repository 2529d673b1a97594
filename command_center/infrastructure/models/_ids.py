"""Identifier helpers shared by the ORM models."""

from uuid import uuid4


def new_id() -> str:
    """Return a random string identifier for a new row."""

    return str(uuid4())
