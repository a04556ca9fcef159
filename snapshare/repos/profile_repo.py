"""Repository helpers for profile lookups."""

from typing import Dict, Iterable, List, Optional

from snapshare.db_accessor import TableAccessor
from snapshare.models.profile import Profile


class ProfileRepo(TableAccessor):
    """Repository for profile queries, including batched lookups by user id."""
    def __init__(self) -> None:
        super().__init__(Profile)

    def get_by_id(self, user_id: str) -> Optional[Profile]:
        """Return the profile of a user."""
        return self.find(id=user_id)

    def for_ids(self, user_ids: Iterable[str]) -> List[Profile]:
        """Return the profiles whose id is in ``user_ids`` in one pass."""
        return self.filter(id__in=set(user_ids))

    def by_id(self, user_ids: Iterable[str]) -> Dict[str, Profile]:
        """Map user id to profile for every id that has one."""
        return {profile.id: profile for profile in self.for_ids(user_ids)}
