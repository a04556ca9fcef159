"""Public profile shown next to a user's posts and comments."""

from dataclasses import dataclass

EDITABLE_FIELDS = ("username", "bio", "avatar_url")


@dataclass(frozen=True)
class Profile:
    """Profile sharing its id with the owning User."""
    id: str
    username: str
    bio: str = ""
    avatar_url: str = ""

    def __str__(self):
        return self.username
