"""Identifier generation for stored entities."""

from uuid import uuid4


def new_id() -> str:
    """Return a fresh entity ID."""
    return uuid4().hex
