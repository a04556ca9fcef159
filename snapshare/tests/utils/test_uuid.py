import uuid
from unittest.mock import patch

from django.test import SimpleTestCase

from snapshare.utils.uuid import next_id, uuid7_or_4


class UuidHelperTests(SimpleTestCase):
    def test_next_id_returns_hex_string(self):
        value = next_id()
        self.assertIsInstance(value, str)
        self.assertEqual(len(value), 32)
        int(value, 16)

    def test_next_id_values_are_distinct(self):
        values = {next_id() for _ in range(500)}
        self.assertEqual(len(values), 500)

    def test_falls_back_to_uuid4_without_uuid7(self):
        with patch("snapshare.utils.uuid.uuid", spec=["uuid4", "UUID"]) as fake:
            fake.uuid4.return_value = uuid.UUID(int=7)
            self.assertEqual(uuid7_or_4(), uuid.UUID(int=7))
            fake.uuid4.assert_called_once_with()
