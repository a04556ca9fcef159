"""Service helpers for liking and unliking posts."""

from snapshare.entity_store import EntityStore
from snapshare.models import Like


class LikeService:
    """Encapsulate like creation, removal and the like button's toggle."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    def add_like(self, post_id: str, user_id: str) -> Like:
        return self.store.create_like(post_id, user_id)

    def remove_like(self, like_id: str) -> None:
        self.store.delete_like(like_id)

    def toggle_like(self, post_id: str, user_id: str) -> bool:
        """Toggle like/unlike for a post; return True when the post is now liked."""
        with self.store.lock:
            existing = self.store.likes.for_pair(post_id, user_id)
            if existing is not None:
                self.store.delete_like(existing.id)
                return False
            self.store.create_like(post_id, user_id)
            return True
