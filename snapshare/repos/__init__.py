from .user_repo import UserRepo
from .profile_repo import ProfileRepo
from .post_repo import PostRepo
from .like_repo import LikeRepo
from .comment_repo import CommentRepo

__all__ = ["UserRepo", "ProfileRepo", "PostRepo", "LikeRepo", "CommentRepo"]
