"""Repository helpers for fetching posts."""

from typing import List, Optional

from snapshare.db_accessor import TableAccessor
from snapshare.models.post import Post


class PostRepo(TableAccessor):
    """Repository for Post queries (feed, user-specific).

    Rows are kept newest-first, so storage order is feed order.
    """
    def __init__(self) -> None:
        """Initialise with the Post record type."""
        super().__init__(Post)

    def get_by_id(self, post_id: str) -> Optional[Post]:
        return self.find(id=post_id)

    def insert_newest_first(self, post: Post) -> Post:
        """Insert keeping rows in descending ``created_at`` order.

        A post newer than every stored row goes to the head.
        """
        index = 0
        for index, row in enumerate(self.all()):
            if row.created_at <= post.created_at:
                break
        else:
            index = len(self)
        return self.insert_at(index, post)

    def list_for_feed(
        self,
        *,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Post]:
        """Return posts newest first with optional paging."""
        return self.list(order_by=("-created_at",), limit=limit, offset=offset)

    def list_for_user(
        self,
        user_id: str,
        *,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Post]:
        """Return posts authored by a given user, newest first."""
        return self.list(
            filters={"user_id": user_id},
            order_by=("-created_at",),
            limit=limit,
            offset=offset,
        )
