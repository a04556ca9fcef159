from unittest.mock import patch

from django.test import SimpleTestCase

from snapshare.models import Profile
from snapshare.services.feed import QueryEngine
from snapshare.tests.helpers import make_client, make_post, make_user


class QueryEngineTestCase(SimpleTestCase):
    def setUp(self):
        self.api = make_client()
        self.store = self.api.store
        self.queries = QueryEngine(self.store)
        self.u1 = make_user(self.api, username="u1")
        self.u2 = make_user(self.api, username="u2")
        self.sunset = make_post(self.api, self.u1, image_url="sunset.jpg", caption="Sunset")
        self.forest = make_post(self.api, self.u2, image_url="forest.jpg", caption="Forest")


class PostsWithEngagementTests(QueryEngineTestCase):
    def test_newest_post_first(self):
        posts = self.queries.posts_with_engagement()
        self.assertEqual([p.id for p in posts], [self.forest.id, self.sunset.id])

    def test_attaches_matching_likes_and_comments(self):
        like = self.store.create_like(self.sunset.id, self.u2.id)
        comment = self.store.create_comment(self.sunset.id, self.u2.id, "Lovely")
        by_id = {p.id: p for p in self.queries.posts_with_engagement()}
        self.assertEqual(by_id[self.sunset.id].likes, [like])
        self.assertEqual(by_id[self.sunset.id].comments, [comment])
        self.assertEqual(by_id[self.forest.id].likes, [])
        self.assertEqual(by_id[self.forest.id].comments, [])

    def test_scenario_like_from_other_user(self):
        self.store.create_like(self.sunset.id, self.u2.id)
        post = next(p for p in self.queries.posts_with_engagement() if p.id == self.sunset.id)
        self.assertEqual(len(post.likes), 1)
        self.assertTrue(self.queries.is_liked(post, self.u2.id))
        self.assertFalse(self.queries.is_liked(post, self.u1.id))
        self.assertFalse(self.queries.is_liked(post, None))

    def test_like_for(self):
        like = self.store.create_like(self.sunset.id, self.u2.id)
        post = self.queries.posts_with_engagement()[1]
        self.assertEqual(self.queries.like_for(post, self.u2.id), like)
        self.assertIsNone(self.queries.like_for(post, self.u1.id))

    def test_empty_store(self):
        self.assertEqual(QueryEngine(make_client().store).posts_with_engagement(), [])


class PostsWithProfilesTests(QueryEngineTestCase):
    def test_resolves_usernames(self):
        self.store.update_profile(self.u1.id, avatar_url="u1.png")
        posts = self.queries.posts_with_profiles()
        self.assertEqual([(p.username, p.avatar_url) for p in posts], [("u2", ""), ("u1", "u1.png")])

    def test_batches_profile_lookup_over_distinct_user_ids(self):
        make_post(self.api, self.u1, caption="Another")
        with patch.object(
            self.store.profiles, "by_id", wraps=self.store.profiles.by_id
        ) as lookup:
            self.queries.posts_with_profiles()
        lookup.assert_called_once()
        self.assertEqual(set(lookup.call_args.args[0]), {self.u1.id, self.u2.id})

    def test_missing_profile_uses_placeholder(self):
        self.store.profiles.delete(id=self.u2.id)
        posts = self.queries.posts_with_profiles()
        self.assertEqual(posts[0].username, "Unknown")
        self.assertEqual(posts[0].avatar_url, "")

    def test_accepts_explicit_posts(self):
        posts = self.queries.posts_with_profiles([self.sunset])
        self.assertEqual(len(posts), 1)
        self.assertEqual(posts[0].username, "u1")


class FeedTests(QueryEngineTestCase):
    def test_feed_combines_engagement_and_author(self):
        self.store.create_like(self.forest.id, self.u1.id)
        feed = self.queries.feed()
        self.assertEqual(feed[0].id, self.forest.id)
        self.assertEqual(feed[0].username, "u2")
        self.assertEqual(feed[0].likes_count, 1)
        self.assertEqual(feed[1].username, "u1")


class CommentsWithUsernamesTests(QueryEngineTestCase):
    def test_joins_usernames_oldest_first(self):
        self.store.create_comment(self.sunset.id, self.u2.id, "first")
        self.store.create_comment(self.sunset.id, self.u1.id, "second")
        comments = self.queries.comments_with_usernames(self.sunset.id)
        self.assertEqual([(c.text, c.username) for c in comments], [("first", "u2"), ("second", "u1")])

    def test_unknown_author_gets_placeholder(self):
        self.store.create_comment(self.sunset.id, self.u2.id, "hello")
        self.store.profiles.delete(id=self.u2.id)
        comments = self.queries.comments_with_usernames(self.sunset.id)
        self.assertEqual(comments[0].username, "Unknown")

    def test_custom_placeholder(self):
        self.store.create_comment(self.sunset.id, self.u2.id, "hello")
        self.store.profiles.delete(id=self.u2.id)
        queries = QueryEngine(self.store, unknown_username="(deleted)")
        self.assertEqual(queries.comments_with_usernames(self.sunset.id)[0].username, "(deleted)")

    def test_no_comments(self):
        self.assertEqual(self.queries.comments_with_usernames(self.forest.id), [])

    def test_blank_username_uses_placeholder(self):
        self.store.profiles.update({"id": self.u2.id}, username="")
        self.store.create_comment(self.sunset.id, self.u2.id, "hello")
        self.assertEqual(self.queries.comments_with_usernames(self.sunset.id)[0].username, "Unknown")

    def test_profiles_for_returns_profiles(self):
        profiles = self.queries.profiles_for([self.u1.id, self.u1.id])
        self.assertIsInstance(profiles[self.u1.id], Profile)
