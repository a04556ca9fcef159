"""Seeding helpers shared by the ``seed`` command and ``SnapshareClient.from_settings``."""

from datetime import timedelta
from random import Random
from typing import Dict, List, Optional

from django.contrib.auth.hashers import make_password
from django.utils import timezone
from faker import Faker

from snapshare.conf import get_setting
from snapshare.models import User
from .seed_data import (
    DEMO_BIO,
    DEMO_EMAIL,
    DEMO_USERNAME,
    demo_comment,
    demo_posts,
    post_image_pool,
)


class DemoSeeder:
    """Fill a client's store with the demo account and optional random users.

    Seeding writes straight to the store: it never signs anyone in and never
    notifies session listeners.
    """

    def __init__(self, client, *, seed: Optional[int] = None) -> None:
        self.client = client
        self.store = client.store
        self.random = Random(seed)
        self.faker = Faker("en_GB")
        if seed is not None:
            self.faker.seed_instance(seed)

    def seed_demo(self) -> Optional[User]:
        """Create the demo account with two posts, a like and a comment.

        Returns None when the demo account already exists.
        """
        if self.store.users.get_by_email(DEMO_EMAIL) is not None:
            return None
        password = make_password(get_setting("SNAPSHARE_DEMO_PASSWORD"))
        user = self.store.create_account(DEMO_EMAIL, password, DEMO_USERNAME)
        self.store.update_profile(user.id, bio=DEMO_BIO)

        now = timezone.now()
        posts = [
            self.store.create_post(
                user.id, image_url, caption, created_at=now - timedelta(hours=age)
            )
            for image_url, caption, age in demo_posts
        ]
        newest = posts[-1]
        self.store.create_like(newest.id, user.id)
        text, age = demo_comment
        self.store.create_comment(
            newest.id, user.id, text, created_at=now - timedelta(hours=age)
        )
        return user

    def seed_random_users(
        self,
        count: int,
        *,
        posts_per_user: int = 2,
        max_likes_per_post: int = 5,
        max_comments_per_post: int = 3,
    ) -> Dict[str, int]:
        """Generate ``count`` users with posts, likes and comments; return what was created."""
        users = [self.generate_user() for _ in range(max(0, count))]
        user_ids = [user.id for user in users]
        posts = []
        for user_id in user_ids:
            posts.extend(self.generate_posts(user_id, posts_per_user))
        likes = sum(self.generate_likes(post.id, user_ids, max_likes_per_post) for post in posts)
        comments = sum(
            self.generate_comments(post.id, user_ids, max_comments_per_post) for post in posts
        )
        return {"users": len(users), "posts": len(posts), "likes": likes, "comments": comments}

    def generate_user(self) -> User:
        """Create a single random user with a profile."""
        email = self.faker.unique.email()
        username = self.faker.unique.user_name()
        user = self.store.create_account(email, make_password(None), username)
        self.store.update_profile(user.id, bio=self.faker.sentence(nb_words=8))
        return user

    def generate_posts(self, user_id: str, per_user: int) -> List:
        return [
            self.store.create_post(
                user_id,
                self.random.choice(post_image_pool),
                self.faker.sentence(nb_words=6),
            )
            for _ in range(self.random.randint(1, max(1, per_user)))
        ]

    def generate_likes(self, post_id: str, user_ids: List[str], max_likes: int) -> int:
        likers = self.random.sample(user_ids, min(len(user_ids), self.random.randint(0, max_likes)))
        for user_id in likers:
            self.store.create_like(post_id, user_id)
        return len(likers)

    def generate_comments(self, post_id: str, user_ids: List[str], max_comments: int) -> int:
        commenters = self.random.sample(
            user_ids, min(len(user_ids), self.random.randint(0, max_comments))
        )
        for user_id in commenters:
            self.store.create_comment(post_id, user_id, self.faker.sentence(nb_words=10))
        return len(commenters)
