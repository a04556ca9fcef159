"""Public operation set of the store, returning ``Result`` envelopes.

Build one ``SnapshareClient`` at process start (``SnapshareClient.from_settings()``)
and pass it to whatever needs the store; tests build their own isolated instances.
Domain failures never raise out of this module: they come back in ``Result.error``.
"""

import logging
from dataclasses import dataclass, field
from functools import wraps
from typing import Any, Iterable, Mapping, Optional

from snapshare.conf import get_setting
from snapshare.entity_store import EntityStore
from snapshare.errors import SnapshareError
from snapshare.models import PostWithEngagement
from snapshare.serializers import to_representation
from snapshare.services.auth import AuthSessionManager, Listener
from snapshare.services.comments import CommentService
from snapshare.services.feed import QueryEngine
from snapshare.services.likes import LikeService
from snapshare.services.posts import PostService
from snapshare.services.profile import ProfileService
from snapshare.services.storage import StorageAdapter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Result:
    """The ``{data, error}`` envelope every operation returns."""
    data: Any = None
    error: Optional[SnapshareError] = None
    error_only: bool = field(default=False, repr=False)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        """Render the envelope as plain data."""
        error = self.error.to_dict() if self.error is not None else None
        if self.error_only:
            return {"error": error}
        return {"data": to_representation(self.data), "error": error}


def enveloped(error_only=False):
    """Wrap a client method so SnapshareError becomes ``Result.error``."""
    def decorator(method):
        @wraps(method)
        def wrapper(self, *args, **kwargs):
            try:
                data = method(self, *args, **kwargs)
            except SnapshareError as error:
                logger.info("%s rejected: %s", method.__name__, error.message)
                return Result(error=error, error_only=error_only)
            return Result(data=None if error_only else data, error_only=error_only)
        return wrapper
    return decorator


class SnapshareClient:
    """Context object bundling the store, the session manager and the services."""

    def __init__(
        self,
        *,
        store: Optional[EntityStore] = None,
        storage: Optional[StorageAdapter] = None,
        unique_likes: bool = True,
        unknown_username: str = "Unknown",
        upload_dir: str = "uploads",
    ) -> None:
        self.store = store or EntityStore(unique_likes=unique_likes)
        self.auth = AuthSessionManager(self.store)
        self.queries = QueryEngine(self.store, unknown_username=unknown_username)
        self.post_service = PostService(self.store)
        self.like_service = LikeService(self.store)
        self.comment_service = CommentService(self.store)
        self.profile_service = ProfileService(self.store)
        self.storage = storage or StorageAdapter(upload_dir)

    @classmethod
    def from_settings(cls) -> "SnapshareClient":
        """Build a client from Django settings, seeding demo data when enabled."""
        client = cls(
            unique_likes=get_setting("SNAPSHARE_UNIQUE_LIKES"),
            unknown_username=get_setting("SNAPSHARE_UNKNOWN_USERNAME"),
            upload_dir=get_setting("SNAPSHARE_UPLOAD_DIR"),
        )
        if get_setting("SNAPSHARE_SEED_DEMO_DATA"):
            from snapshare.management.commands.seed_utils import DemoSeeder

            DemoSeeder(client).seed_demo()
        return client

    # --- auth ------------------------------------------------------------
    @enveloped()
    def sign_up(self, email: str, password: str, username: str = ""):
        return {"user": self.auth.sign_up(email, password, username)}

    @enveloped()
    def sign_in(self, email: str, password: str):
        return {"user": self.auth.sign_in(email, password)}

    @enveloped(error_only=True)
    def sign_out(self):
        self.auth.sign_out()

    @enveloped()
    def get_session(self):
        return {"session": self.auth.get_session()}

    @enveloped()
    def subscribe_auth(self, callback: Listener):
        return {"subscription": self.auth.subscribe(callback)}

    # --- posts -----------------------------------------------------------
    @enveloped()
    def get_posts(self):
        return self.queries.posts_with_engagement()

    @enveloped()
    def get_feed(self):
        return self.queries.feed()

    @enveloped()
    def get_posts_by_user(self, user_id: str):
        return self.post_service.posts_by_user(user_id)

    @enveloped()
    def create_post(self, user_id: str, image_url: str, caption: str = ""):
        return self.post_service.create_post(user_id, image_url, caption)

    @enveloped(error_only=True)
    def delete_post(self, post_id: str, acting_user_id: Optional[str] = None):
        self.post_service.delete_post(post_id, acting_user_id)

    # --- likes -----------------------------------------------------------
    @enveloped()
    def add_like(self, post_id: str, user_id: str):
        return self.like_service.add_like(post_id, user_id)

    @enveloped(error_only=True)
    def remove_like(self, like_id: str):
        self.like_service.remove_like(like_id)

    @enveloped()
    def toggle_like(self, post_id: str, user_id: str):
        return {"liked": self.like_service.toggle_like(post_id, user_id)}

    def is_liked(self, post: PostWithEngagement, user_id: Optional[str]) -> bool:
        return self.queries.is_liked(post, user_id)

    # --- comments --------------------------------------------------------
    @enveloped()
    def get_comments(self, post_id: str):
        return self.comment_service.comments_for(post_id)

    @enveloped()
    def get_comments_with_usernames(self, post_id: str):
        return self.queries.comments_with_usernames(post_id)

    @enveloped()
    def add_comment(self, post_id: str, user_id: str, text: str):
        return self.comment_service.add_comment(post_id, user_id, text)

    # --- profiles --------------------------------------------------------
    @enveloped()
    def get_profile(self, user_id: str):
        return self.profile_service.get_profile(user_id)

    @enveloped()
    def get_profiles(self, user_ids: Iterable[str]):
        return self.profile_service.get_profiles(user_ids)

    @enveloped()
    def update_profile(self, user_id: str, patch: Mapping[str, str]):
        return self.profile_service.update_profile(user_id, patch)

    # --- storage ---------------------------------------------------------
    @enveloped()
    def upload(self, blob, name: Optional[str] = None):
        return {"path": self.storage.upload(blob, name)}

    @enveloped()
    def open_upload(self, path: str):
        return self.storage.open(path)

    @enveloped()
    def public_url(self, path: str):
        return {"publicUrl": self.storage.public_url(path)}
