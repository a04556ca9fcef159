"""
Post records and the read-side shapes built from them.

Post:
- A single image with a caption, owned by ``user_id``.
- ``created_at`` is assigned by the store and strictly increases with
  every insert, so newest-first order is the same as insertion order.

PostWithEngagement:
- A post with every Like and Comment whose ``post_id`` matches.

PostWithAuthor:
- A post with the owner's ``username`` and ``avatar_url`` resolved.

FeedPost:
- Both of the above; what the feed renders for each card.
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import List

from .comment import Comment
from .like import Like


@dataclass(frozen=True)
class Post:
    id: str
    user_id: str
    image_url: str
    caption: str
    created_at: datetime

    def __str__(self):
        return self.caption or self.id


def _post_values(post: Post) -> dict:
    return {f.name: getattr(post, f.name) for f in fields(Post)}


@dataclass(frozen=True)
class PostWithEngagement(Post):
    likes: List[Like] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)

    @classmethod
    def from_post(cls, post: Post, likes, comments) -> "PostWithEngagement":
        return cls(likes=list(likes), comments=list(comments), **_post_values(post))

    @property
    def likes_count(self):
        return len(self.likes)

    @property
    def comments_count(self):
        return len(self.comments)


@dataclass(frozen=True)
class PostWithAuthor(Post):
    username: str = ""
    avatar_url: str = ""

    @classmethod
    def from_post(cls, post: Post, username: str, avatar_url: str) -> "PostWithAuthor":
        return cls(username=username, avatar_url=avatar_url, **_post_values(post))


@dataclass(frozen=True)
class FeedPost(PostWithEngagement):
    username: str = ""
    avatar_url: str = ""

    @classmethod
    def from_parts(cls, post: PostWithEngagement, username: str, avatar_url: str) -> "FeedPost":
        return cls(
            likes=list(post.likes),
            comments=list(post.comments),
            username=username,
            avatar_url=avatar_url,
            **_post_values(post),
        )
