from .user import User, Session
from .profile import Profile
from .post import Post, PostWithEngagement, PostWithAuthor, FeedPost
from .like import Like
from .comment import Comment, CommentWithUsername

__all__ = [
    "User",
    "Session",
    "Profile",
    "Post",
    "PostWithEngagement",
    "PostWithAuthor",
    "FeedPost",
    "Like",
    "Comment",
    "CommentWithUsername",
]
