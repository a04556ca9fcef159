"""Identifier helpers."""

import uuid


def uuid7_or_4() -> uuid.UUID:
    """Return uuid7 when available, else uuid4."""
    return getattr(uuid, "uuid7", uuid.uuid4)()


def next_id() -> str:
    """Return a fresh opaque identifier used as the primary key of every record."""
    return uuid7_or_4().hex
