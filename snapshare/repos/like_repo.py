"""Repository helpers for likes."""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from snapshare.db_accessor import TableAccessor
from snapshare.models.like import Like


class LikeRepo(TableAccessor):
    def __init__(self) -> None:
        super().__init__(Like)

    def get_by_id(self, like_id: str) -> Optional[Like]:
        return self.find(id=like_id)

    def for_post(self, post_id: str) -> List[Like]:
        return self.filter(post_id=post_id)

    def for_pair(self, post_id: str, user_id: str) -> Optional[Like]:
        """Return the like a user left on a post, if any."""
        return self.find(post_id=post_id, user_id=user_id)

    def grouped_by_post(self, post_ids: Iterable[str]) -> Dict[str, List[Like]]:
        """Group likes on the given posts by post id."""
        grouped: Dict[str, List[Like]] = defaultdict(list)
        for like in self.filter(post_id__in=set(post_ids)):
            grouped[like.post_id].append(like)
        return grouped
