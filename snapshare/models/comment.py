"""Records for user comments on posts."""

from dataclasses import dataclass, fields
from datetime import datetime

MAX_TEXT_LENGTH = 2000


@dataclass(frozen=True)
class Comment:
    """User-authored comment on a post."""
    id: str
    post_id: str
    user_id: str
    # text (1–2000)
    text: str
    created_at: datetime

    def __str__(self):
        return f"Comment by {self.user_id} on {self.post_id}"


@dataclass(frozen=True)
class CommentWithUsername(Comment):
    """Comment joined to its author's username."""
    username: str = ""

    @classmethod
    def from_comment(cls, comment: Comment, username: str) -> "CommentWithUsername":
        values = {f.name: getattr(comment, f.name) for f in fields(Comment)}
        return cls(username=username, **values)
