"""Account record and the session that points at it."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """An account. ``password`` holds a password hash, never the raw value."""
    id: str
    email: str
    password: str

    def __str__(self):
        return self.email


@dataclass(frozen=True)
class Session:
    """The currently signed-in user. Holds a reference, not a copy."""
    user: User
