import json
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import SimpleTestCase

from snapshare.management.commands.seed_data import DEMO_EMAIL, DEMO_USERNAME, demo_posts
from snapshare.management.commands.seed_utils import DemoSeeder
from snapshare.tests.helpers import make_client


class DemoSeederTests(SimpleTestCase):
    def setUp(self):
        self.api = make_client()
        self.seeder = DemoSeeder(self.api, seed=42)

    def test_seed_demo_creates_account_posts_and_engagement(self):
        user = self.seeder.seed_demo()
        self.assertEqual(user.email, DEMO_EMAIL)
        self.assertEqual(self.api.get_profile(user.id).data.username, DEMO_USERNAME)

        posts = self.api.get_posts().data
        self.assertEqual(len(posts), len(demo_posts))
        newest, oldest = posts
        self.assertGreater(newest.created_at, oldest.created_at)
        self.assertEqual(newest.caption, demo_posts[1][1])
        self.assertEqual(newest.likes_count, 1)
        self.assertEqual(newest.comments_count, 1)
        self.assertEqual(oldest.likes_count, 0)

    def test_seed_demo_does_not_sign_in(self):
        self.seeder.seed_demo()
        self.assertIsNone(self.api.get_session().data["session"])

    def test_seed_demo_is_idempotent(self):
        self.seeder.seed_demo()
        self.assertIsNone(self.seeder.seed_demo())
        self.assertEqual(len(self.api.store.users), 1)

    def test_new_posts_sort_above_demo_posts(self):
        self.seeder.seed_demo()
        user = self.api.sign_up("new@example.org", "Password123").data["user"]
        post = self.api.create_post(user.id, "x.jpg", "fresh").data
        self.assertEqual(self.api.get_posts().data[0].id, post.id)

    def test_seed_random_users(self):
        counts = self.seeder.seed_random_users(3, posts_per_user=2)
        self.assertEqual(counts["users"], 3)
        self.assertEqual(len(self.api.store.users), 3)
        self.assertEqual(len(self.api.store.profiles), 3)
        self.assertEqual(counts["posts"], len(self.api.store.posts))
        self.assertEqual(counts["likes"], len(self.api.store.likes))
        self.assertEqual(counts["comments"], len(self.api.store.comments))
        self.assertTrue(1 <= counts["posts"] <= 6)

    def test_seed_random_users_zero(self):
        self.assertEqual(
            self.seeder.seed_random_users(0),
            {"users": 0, "posts": 0, "likes": 0, "comments": 0},
        )


class SeedCommandTests(SimpleTestCase):
    def call(self, *args):
        out = StringIO()
        call_command("seed", *args, stdout=out)
        return out.getvalue()

    def test_summary(self):
        output = self.call()
        self.assertIn("users=1 posts=2 likes=1 comments=1", output)
        self.assertIn("Seeding complete", output)

    def test_random_users(self):
        output = self.call("--users", "2", "--seed", "7")
        self.assertIn("users=3 ", output)

    def test_json_feed(self):
        feed = json.loads(self.call("--json"))
        self.assertEqual(len(feed), 2)
        self.assertEqual(feed[0]["caption"], demo_posts[1][1])
        self.assertEqual(feed[0]["username"], DEMO_USERNAME)

    def test_negative_users_rejected(self):
        with self.assertRaises(CommandError):
            self.call("--users", "-1")
