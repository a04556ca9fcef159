from datetime import datetime, timedelta, timezone

from django.test import SimpleTestCase

from snapshare.models import Post
from snapshare.repos.post_repo import PostRepo

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _post(post_id, user_id, hours):
    return Post(
        id=post_id,
        user_id=user_id,
        image_url=f"{post_id}.jpg",
        caption=post_id,
        created_at=T0 + timedelta(hours=hours),
    )


class PostRepoTestCase(SimpleTestCase):

    def setUp(self):
        self.repo = PostRepo()
        self.repo.insert_newest_first(_post("old", "u1", 1))
        self.repo.insert_newest_first(_post("new", "u2", 3))

    def test_rows_are_newest_first(self):
        self.assertEqual([p.id for p in self.repo.all()], ["new", "old"])

    def test_empty_repo_has_no_rows(self):
        self.assertEqual([p.id for p in PostRepo().all()], [])

    def test_insert_newest_first_places_older_post_in_order(self):
        self.repo.insert_newest_first(_post("middle", "u1", 2))
        self.assertEqual([p.id for p in self.repo.all()], ["new", "middle", "old"])

    def test_insert_newest_first_appends_oldest(self):
        self.repo.insert_newest_first(_post("oldest", "u1", 0))
        self.assertEqual([p.id for p in self.repo.all()][-1], "oldest")

    def test_storage_order_matches_descending_sort(self):
        self.repo.insert_newest_first(_post("middle", "u1", 2))
        self.assertEqual([p.id for p in self.repo.list_for_feed()], [p.id for p in self.repo.all()])

    def test_list_for_user(self):
        self.repo.insert_newest_first(_post("newer", "u1", 4))
        posts = self.repo.list_for_user("u1")
        self.assertEqual([p.id for p in posts], ["newer", "old"])

    def test_list_for_feed_paging(self):
        self.assertEqual([p.id for p in self.repo.list_for_feed(limit=1, offset=1)], ["old"])

    def test_get_by_id(self):
        self.assertEqual(self.repo.get_by_id("old").user_id, "u1")
        self.assertIsNone(self.repo.get_by_id("missing"))
