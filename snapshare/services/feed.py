"""Read-side joins used by the feed, profile and comment views."""

from typing import Dict, Iterable, List, Optional, Sequence

from snapshare.entity_store import EntityStore
from snapshare.models import (
    Comment,
    CommentWithUsername,
    FeedPost,
    Like,
    Post,
    PostWithAuthor,
    PostWithEngagement,
    Profile,
)


class QueryEngine:
    """Join posts to their likes, comments and author profiles.

    Author profiles are resolved with one batched lookup over the distinct
    user ids involved, never one lookup per row.
    """

    def __init__(self, store: EntityStore, *, unknown_username: str = "Unknown") -> None:
        self.store = store
        self.unknown_username = unknown_username

    # --- profile resolution ---------------------------------------------
    def profiles_for(self, user_ids: Iterable[str]) -> Dict[str, Profile]:
        """Map each distinct user id to its profile in a single pass."""
        return self.store.profiles.by_id(set(user_ids))

    def _username(self, profiles: Dict[str, Profile], user_id: str) -> str:
        profile = profiles.get(user_id)
        return profile.username if profile and profile.username else self.unknown_username

    def _avatar_url(self, profiles: Dict[str, Profile], user_id: str) -> str:
        profile = profiles.get(user_id)
        return (profile.avatar_url if profile else "") or ""

    # --- posts -----------------------------------------------------------
    def posts_with_engagement(self) -> List[PostWithEngagement]:
        """Return every post, newest first, with its likes and comments attached."""
        with self.store.lock:
            posts = self.store.posts.list_for_feed()
            post_ids = [post.id for post in posts]
            likes = self.store.likes.grouped_by_post(post_ids)
            comments = self.store.comments.grouped_by_post(post_ids)
        return [
            PostWithEngagement.from_post(post, likes.get(post.id, []), comments.get(post.id, []))
            for post in posts
        ]

    def posts_with_profiles(self, posts: Optional[Sequence[Post]] = None) -> List[PostWithAuthor]:
        """Attach the owner's username and avatar to each post."""
        with self.store.lock:
            if posts is None:
                posts = self.store.posts.list_for_feed()
            profiles = self.profiles_for(post.user_id for post in posts)
        return [
            PostWithAuthor.from_post(
                post,
                self._username(profiles, post.user_id),
                self._avatar_url(profiles, post.user_id),
            )
            for post in posts
        ]

    def feed(self) -> List[FeedPost]:
        """Return the feed: engagement plus author for every post, newest first."""
        with self.store.lock:
            posts = self.posts_with_engagement()
            profiles = self.profiles_for(post.user_id for post in posts)
        return [
            FeedPost.from_parts(
                post,
                self._username(profiles, post.user_id),
                self._avatar_url(profiles, post.user_id),
            )
            for post in posts
        ]

    # --- comments --------------------------------------------------------
    def comments_with_usernames(self, post_id: str) -> List[CommentWithUsername]:
        """Return a post's comments oldest first, each with its author's username."""
        with self.store.lock:
            comments: List[Comment] = self.store.comments.for_post(post_id)
            profiles = self.profiles_for(comment.user_id for comment in comments)
        return [
            CommentWithUsername.from_comment(comment, self._username(profiles, comment.user_id))
            for comment in comments
        ]

    # --- likes -----------------------------------------------------------
    def like_for(self, post: PostWithEngagement, user_id: str) -> Optional[Like]:
        """Return the user's like among the post's likes, if any."""
        for like in post.likes:
            if like.user_id == user_id:
                return like
        return None

    def is_liked(self, post: PostWithEngagement, user_id: Optional[str]) -> bool:
        """Return True when some like on the post belongs to ``user_id``."""
        if not user_id:
            return False
        return self.like_for(post, user_id) is not None
