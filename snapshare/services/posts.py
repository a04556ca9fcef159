"""Service helpers for post creation and deletion."""

import logging
from typing import List, Optional

from snapshare.entity_store import EntityStore
from snapshare.errors import NotFound, NotOwner
from snapshare.models import Post

logger = logging.getLogger(__name__)


class PostService:
    """Encapsulate the post lifecycle."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    def fetch(self, post_id: str) -> Post:
        """Fetch a post by id or raise NotFound."""
        post = self.store.posts.get_by_id(post_id)
        if post is None:
            raise NotFound("Post", post_id)
        return post

    def posts_by_user(self, user_id: str) -> List[Post]:
        """Return a user's posts, newest first."""
        return self.store.posts.list_for_user(user_id)

    def create_post(self, user_id: str, image_url: str, caption: str = "") -> Post:
        """Create and return a post owned by ``user_id``."""
        post = self.store.create_post(user_id, image_url or "", caption or "")
        logger.debug("User %s created post %s", user_id, post.id)
        return post

    def can_delete(self, post: Post, user_id: Optional[str]) -> bool:
        """Return True when the user owns the post."""
        return bool(user_id) and post.user_id == user_id

    def delete_post(self, post_id: str, acting_user_id: Optional[str] = None) -> None:
        """Delete a post with its likes and comments.

        When ``acting_user_id`` is given, only the owner may delete.
        """
        if acting_user_id is not None:
            with self.store.lock:
                post = self.fetch(post_id)
                if not self.can_delete(post, acting_user_id):
                    raise NotOwner()
                self.store.delete_post(post_id)
            return
        self.store.delete_post(post_id)
