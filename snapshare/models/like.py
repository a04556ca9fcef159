"""Model representing a user's like on a post."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Like:
    """User like on a post."""
    id: str
    post_id: str
    user_id: str

    def __str__(self):
        """Readable representation for debugging."""
        return f"{self.user_id} → {self.post_id}"
