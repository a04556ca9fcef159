"""Management command that seeds a fresh store and reports what it holds."""

import json

from django.core.management.base import BaseCommand, CommandError

from snapshare.client import SnapshareClient
from .seed_utils import DemoSeeder


class Command(BaseCommand):
    """Seed an in-memory store with demo and random data, then print it."""
    help = "Seeds an in-memory store with sample data and prints a summary or the feed"

    def add_arguments(self, parser):
        parser.add_argument(
            "--users",
            type=int,
            default=0,
            help="Number of random users to generate in addition to the demo account.",
        )
        parser.add_argument(
            "--seed",
            type=int,
            default=None,
            help="Random seed for reproducible output.",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print the resulting feed as JSON instead of a summary.",
        )

    def handle(self, *args, **options):
        """Run the seeding sequence."""
        if options["users"] < 0:
            raise CommandError("--users must not be negative")
        client = SnapshareClient.from_settings()
        seeder = DemoSeeder(client, seed=options["seed"])
        seeder.seed_demo()
        seeder.seed_random_users(options["users"])

        result = client.get_feed()
        if options["json"]:
            self.stdout.write(json.dumps(result.to_dict()["data"], indent=2, ensure_ascii=False))
            return
        counts = {name: len(table) for name, table in client.store.tables.items()}
        self.stdout.write(
            "users={users} posts={posts} likes={likes} comments={comments}".format(**counts)
        )
        self.stdout.write(self.style.SUCCESS("Seeding complete"))
