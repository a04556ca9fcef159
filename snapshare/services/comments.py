"""Service helpers for creating and listing comments."""

from typing import List

from snapshare.entity_store import EntityStore
from snapshare.errors import ValidationError
from snapshare.models import Comment
from snapshare.models.comment import MAX_TEXT_LENGTH


class CommentService:
    """Encapsulate comment creation and lookup for posts."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    def clean_text(self, text: str) -> str:
        """Return stripped comment text or raise ValidationError."""
        if text is not None and not isinstance(text, str):
            raise ValidationError("Comment must be text", field="text")
        text = (text or "").strip()
        if not text:
            raise ValidationError("Comment cannot be empty", field="text")
        if len(text) > MAX_TEXT_LENGTH:
            raise ValidationError(
                f"Comment must be at most {MAX_TEXT_LENGTH} characters", field="text"
            )
        return text

    def add_comment(self, post_id: str, user_id: str, text: str) -> Comment:
        """Create a comment on an existing post."""
        return self.store.create_comment(post_id, user_id, self.clean_text(text))

    def comments_for(self, post_id: str) -> List[Comment]:
        """Return the post's comments, oldest first."""
        return self.store.comments.for_post(post_id)
