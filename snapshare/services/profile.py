"""Service helpers for reading and editing profiles."""

from collections import abc
from typing import Iterable, List, Mapping, Optional

from snapshare.entity_store import EntityStore
from snapshare.errors import NotFound, ValidationError
from snapshare.models import Profile
from snapshare.models.profile import EDITABLE_FIELDS


class ProfileService:
    """Provide profile lookups and updates."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    def get_profile(self, user_id: str) -> Optional[Profile]:
        """Return the user's profile, or None when there is none."""
        return self.store.profiles.get_by_id(user_id)

    def fetch(self, user_id: str) -> Profile:
        profile = self.get_profile(user_id)
        if profile is None:
            raise NotFound("Profile", user_id)
        return profile

    def get_profiles(self, user_ids: Iterable[str]) -> List[Profile]:
        """Return the profiles of the given users in one batched lookup."""
        if isinstance(user_ids, (str, bytes)) or not isinstance(user_ids, abc.Iterable):
            raise ValidationError("user_ids must be a list of ids", field="user_ids")
        return self.store.profiles.for_ids(user_ids)

    def update_profile(self, user_id: str, patch: Mapping[str, str]) -> Profile:
        """Apply a partial update to username, bio or avatar_url."""
        if not isinstance(patch, abc.Mapping):
            raise ValidationError("patch must be a mapping of profile fields", field="patch")
        unknown = sorted(set(patch) - set(EDITABLE_FIELDS))
        if unknown:
            raise ValidationError(
                f"Cannot update profile field(s): {', '.join(unknown)}", field=unknown[0]
            )
        changes = {key: value if value is not None else "" for key, value in patch.items()}
        if "username" in changes and not str(changes["username"]).strip():
            raise ValidationError("Username cannot be blank", field="username")
        return self.store.update_profile(user_id, **changes)
