"""Unit tests for the on-disk token store."""

import tempfile
import unittest
from pathlib import Path

from quiz_client.core.token_store import TokenStore


class TestTokenStore(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.path = Path(self._tmp.name) / "nested" / "storage.json"
        self.store = TokenStore(self.path)

    def test_missing_file_reads_as_empty(self):
        self.assertIsNone(self.store.get("token"))

    def test_set_creates_parent_directories(self):
        self.store.set("token", "abc")
        self.assertTrue(self.path.exists())
        self.assertEqual(TokenStore(self.path).get("token"), "abc")

    def test_remove(self):
        self.store.set("token", "abc")
        self.store.set("other", "x")
        self.store.remove("token")
        self.assertIsNone(self.store.get("token"))
        self.assertEqual(self.store.get("other"), "x")

    def test_remove_missing_key_does_not_create_file(self):
        self.store.remove("token")
        self.assertFalse(self.path.exists())

    def test_corrupt_file_reads_as_empty(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("{not json", encoding="utf-8")
        self.assertIsNone(self.store.get("token"))
        self.store.set("token", "fresh")
        self.assertEqual(self.store.get("token"), "fresh")

    def test_undecodable_bytes_read_as_empty(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_bytes(b"\xff\xfe\x00garbage")
        self.assertIsNone(self.store.get("token"))

    def test_directory_in_place_of_file_reads_as_empty(self):
        self.path.mkdir(parents=True)
        self.assertIsNone(self.store.get("token"))


if __name__ == "__main__":
    unittest.main()
