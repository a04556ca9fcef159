"""Repository helpers for comments."""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from snapshare.db_accessor import TableAccessor
from snapshare.models.comment import Comment


class CommentRepo(TableAccessor):
    """Repository for comment queries; comments read oldest first."""
    def __init__(self) -> None:
        super().__init__(Comment)

    def get_by_id(self, comment_id: str) -> Optional[Comment]:
        return self.find(id=comment_id)

    def for_post(self, post_id: str) -> List[Comment]:
        """Return the comments on a post in ascending ``created_at`` order."""
        return self.list(filters={"post_id": post_id}, order_by=("created_at",))

    def grouped_by_post(self, post_ids: Iterable[str]) -> Dict[str, List[Comment]]:
        """Group comments on the given posts by post id, oldest first."""
        grouped: Dict[str, List[Comment]] = defaultdict(list)
        rows = self.list(filters={"post_id__in": set(post_ids)}, order_by=("created_at",))
        for comment in rows:
            grouped[comment.post_id].append(comment)
        return grouped
