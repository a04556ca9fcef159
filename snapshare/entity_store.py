"""In-memory relational store standing in for the remote backend.

Invariants:
    - Every write, including a post's cascade and account creation, happens
      under one re-entrant lock, so no reader sees a half-applied change.
    - Auto-assigned ``created_at`` values strictly increase.
    - Posts are stored newest first.
    - Deleting a post leaves no Like or Comment pointing at it.
"""

import logging
import threading
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from django.utils import timezone

from snapshare.db_accessor import snapshot_rows
from snapshare.errors import DuplicateLike, DuplicateUser, NotFound
from snapshare.models import Comment, Like, Post, Profile, User
from snapshare.repos import CommentRepo, LikeRepo, PostRepo, ProfileRepo, UserRepo
from snapshare.utils.uuid import next_id

logger = logging.getLogger(__name__)

TICK = timedelta(microseconds=1)


class EntityStore:
    """Five linked tables with the referential rules between them."""

    def __init__(self, *, unique_likes: bool = True) -> None:
        self.users = UserRepo()
        self.profiles = ProfileRepo()
        self.posts = PostRepo()
        self.likes = LikeRepo()
        self.comments = CommentRepo()
        self.unique_likes = unique_likes
        self.lock = threading.RLock()
        self._last_timestamp: Optional[datetime] = None

    @property
    def tables(self):
        return {
            "users": self.users,
            "profiles": self.profiles,
            "posts": self.posts,
            "likes": self.likes,
            "comments": self.comments,
        }

    def snapshot(self) -> Dict[str, List]:
        """Return a consistent copy of every table's rows."""
        with self.lock:
            return snapshot_rows(self.tables)

    def next_timestamp(self) -> datetime:
        """Return now, nudged forward when the clock has not moved past the last stamp."""
        with self.lock:
            now = timezone.now()
            if self._last_timestamp is not None and now <= self._last_timestamp:
                now = self._last_timestamp + TICK
            self._last_timestamp = now
            return now

    def _observe_timestamp(self, value: datetime) -> None:
        if self._last_timestamp is None or value > self._last_timestamp:
            self._last_timestamp = value

    # --- accounts --------------------------------------------------------
    def create_account(self, email: str, password: str, username: str) -> User:
        """Insert a User and its Profile together; raise DuplicateUser on a taken email."""
        with self.lock:
            if self.users.exists(email=email):
                raise DuplicateUser()
            user = User(id=next_id(), email=email, password=password)
            profile = Profile(id=user.id, username=username)
            self.users.insert(user)
            self.profiles.insert(profile)
        logger.debug("Created account %s", user.id)
        return user

    def update_profile(self, user_id: str, **patch) -> Profile:
        with self.lock:
            profile = self.profiles.update({"id": user_id}, **patch)
        if profile is None:
            raise NotFound("Profile", user_id)
        return profile

    # --- posts -----------------------------------------------------------
    def create_post(
        self,
        user_id: str,
        image_url: str,
        caption: str,
        *,
        created_at: Optional[datetime] = None,
    ) -> Post:
        """Insert a post for an existing user."""
        with self.lock:
            self._require_user(user_id)
            if created_at is None:
                created_at = self.next_timestamp()
            else:
                self._observe_timestamp(created_at)
            post = Post(
                id=next_id(),
                user_id=user_id,
                image_url=image_url,
                caption=caption,
                created_at=created_at,
            )
            self.posts.insert_newest_first(post)
        return post

    def delete_post(self, post_id: str) -> int:
        """Delete a post with its likes and comments as one unit.

        Returns the number of dependent rows removed.
        """
        with self.lock:
            if self.posts.delete(id=post_id) == 0:
                raise NotFound("Post", post_id)
            removed = self.likes.delete(post_id=post_id)
            removed += self.comments.delete(post_id=post_id)
        logger.info("Deleted post %s and %d dependent rows", post_id, removed)
        return removed

    # --- likes -----------------------------------------------------------
    def create_like(self, post_id: str, user_id: str) -> Like:
        with self.lock:
            self._require_post(post_id)
            self._require_user(user_id)
            if self.unique_likes and self.likes.for_pair(post_id, user_id) is not None:
                raise DuplicateLike()
            like = Like(id=next_id(), post_id=post_id, user_id=user_id)
            self.likes.insert(like)
        return like

    def delete_like(self, like_id: str) -> None:
        with self.lock:
            if self.likes.delete(id=like_id) == 0:
                raise NotFound("Like", like_id)

    # --- comments --------------------------------------------------------
    def create_comment(
        self,
        post_id: str,
        user_id: str,
        text: str,
        *,
        created_at: Optional[datetime] = None,
    ) -> Comment:
        with self.lock:
            self._require_post(post_id)
            self._require_user(user_id)
            if created_at is None:
                created_at = self.next_timestamp()
            else:
                self._observe_timestamp(created_at)
            comment = Comment(
                id=next_id(),
                post_id=post_id,
                user_id=user_id,
                text=text,
                created_at=created_at,
            )
            self.comments.insert(comment)
        return comment

    # --- integrity helpers ----------------------------------------------
    def _require_user(self, user_id: str) -> User:
        user = self.users.get_by_id(user_id)
        if user is None:
            raise NotFound("User", user_id)
        return user

    def _require_post(self, post_id: str) -> Post:
        post = self.posts.get_by_id(post_id)
        if post is None:
            raise NotFound("Post", post_id)
        return post
