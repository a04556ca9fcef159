"""DRF serializers rendering store records into plain data for envelopes and JSON output."""

from collections.abc import Mapping

from rest_framework import serializers

from snapshare.models import (
    Comment,
    CommentWithUsername,
    FeedPost,
    Like,
    Post,
    PostWithAuthor,
    PostWithEngagement,
    Profile,
    Session,
    User,
)
from snapshare.services.auth import Subscription


class UserSerializer(serializers.Serializer):
    """User without its password hash."""
    id = serializers.CharField(read_only=True)
    email = serializers.EmailField(read_only=True)


class SessionSerializer(serializers.Serializer):
    user = UserSerializer(read_only=True)


class SubscriptionSerializer(serializers.Serializer):
    active = serializers.BooleanField(read_only=True)


class ProfileSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    username = serializers.CharField(read_only=True)
    bio = serializers.CharField(read_only=True)
    avatar_url = serializers.CharField(read_only=True)


class LikeSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    post_id = serializers.CharField(read_only=True)
    user_id = serializers.CharField(read_only=True)


class CommentSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    post_id = serializers.CharField(read_only=True)
    user_id = serializers.CharField(read_only=True)
    text = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)


class CommentWithUsernameSerializer(CommentSerializer):
    username = serializers.CharField(read_only=True)


class PostSerializer(serializers.Serializer):
    """Serializer for Post with common fields."""
    id = serializers.CharField(read_only=True)
    user_id = serializers.CharField(read_only=True)
    image_url = serializers.CharField(read_only=True)
    caption = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)


class PostWithEngagementSerializer(PostSerializer):
    likes = LikeSerializer(many=True, read_only=True)
    comments = CommentSerializer(many=True, read_only=True)
    likes_count = serializers.IntegerField(read_only=True)
    comments_count = serializers.IntegerField(read_only=True)


class PostWithAuthorSerializer(PostSerializer):
    username = serializers.CharField(read_only=True)
    avatar_url = serializers.CharField(read_only=True)


class FeedPostSerializer(PostWithEngagementSerializer):
    username = serializers.CharField(read_only=True)
    avatar_url = serializers.CharField(read_only=True)


SERIALIZERS = {
    User: UserSerializer,
    Session: SessionSerializer,
    Subscription: SubscriptionSerializer,
    Profile: ProfileSerializer,
    Like: LikeSerializer,
    Comment: CommentSerializer,
    CommentWithUsername: CommentWithUsernameSerializer,
    Post: PostSerializer,
    PostWithEngagement: PostWithEngagementSerializer,
    PostWithAuthor: PostWithAuthorSerializer,
    FeedPost: FeedPostSerializer,
}


def to_representation(value):
    """Render records, and dicts or lists of them, into plain Python data."""
    if value is None or isinstance(value, (str, bytes, int, float, bool)):
        return value
    if isinstance(value, Mapping):
        return {key: to_representation(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_representation(item) for item in value]
    serializer_class = SERIALIZERS.get(type(value))
    if serializer_class is None:
        raise TypeError(f"No serializer for {type(value).__name__}")
    return dict(serializer_class(value).data)
