import base64
import tempfile
import unittest
from pathlib import Path

from pantrypal.domain.errors import DuplicateUsernameError, InvalidCredentialsError, InvalidFieldError
from pantrypal.infra import security
from pantrypal.infra.User_Repository import UserRepository
from pantrypal.infra.id_allocator import IdAllocator
from pantrypal.infra.paths import DataPaths


class TestUserRepository(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.paths = DataPaths(Path(self._tmp.name))
        self.repo = UserRepository(self.paths, IdAllocator())

    def tearDown(self):
        self._tmp.cleanup()

    def _lines(self):
        return self.paths.users_file.read_text(encoding="utf-8").splitlines()

    def test_data_dir_under_home(self):
        self.assertEqual(self.paths.base_dir, Path(self._tmp.name) / "PantryPal")
        self.assertEqual(self.paths.users_file.name, "users.csv")

    def test_load_all_without_file_is_empty(self):
        self.assertEqual(self.repo.load_all(), [])
        self.assertFalse(self.paths.base_dir.exists())

    def test_register_then_login(self):
        user = self.repo.create("alice", "pw1")
        self.assertEqual(self.repo.authenticate("alice", "pw1"), user)
        with self.assertRaises(InvalidCredentialsError):
            self.repo.authenticate("alice", "pw2")

    def test_unknown_user_and_wrong_password_look_the_same(self):
        self.repo.create("alice", "pw1")
        with self.assertRaises(InvalidCredentialsError) as wrong_password:
            self.repo.authenticate("alice", "nope")
        with self.assertRaises(InvalidCredentialsError) as unknown_user:
            self.repo.authenticate("bob", "pw1")
        self.assertEqual(str(wrong_password.exception), str(unknown_user.exception))

    def test_duplicate_username_rejected(self):
        self.repo.create("alice", "pw1")
        with self.assertRaises(DuplicateUsernameError):
            self.repo.create("alice", "pw3")
        self.assertEqual(len(self._lines()), 1)

    def test_usernames_are_case_sensitive(self):
        self.repo.create("alice", "pw1")
        self.repo.create("Alice", "pw1")
        self.assertEqual([u.username for u in self.repo.load_all()], ["alice", "Alice"])

    def test_row_format(self):
        user = self.repo.create("alice", "pw1")
        line = self.paths.users_file.read_text(encoding="utf-8")
        self.assertTrue(line.endswith("\n"))
        user_id, username, hashed, salt = line.rstrip("\n").split(",")
        self.assertEqual(user_id, user.id)
        self.assertEqual(len(user_id), 16)
        self.assertEqual(username, "alice")
        self.assertEqual(len(base64.b64decode(salt)), 16)
        self.assertEqual(hashed, security.hash_password("pw1", salt))

    def test_round_trip_through_load_all(self):
        self.repo.create("alice", "pw1")
        loaded = self.repo.load_all()
        self.assertEqual(len(loaded), 1)
        self.assertEqual(loaded[0].username, "alice")
        self.assertEqual(loaded[0].hashed_password, security.hash_password("pw1", loaded[0].salt))

    def test_malformed_lines_skipped(self):
        user = self.repo.create("alice", "pw1")
        with open(self.paths.users_file, "a", encoding="utf-8") as f:
            f.write("garbage\n")
            f.write("a,b,c\n")
            f.write("a,,c,d\n")
            f.write("a,b,c,d,e\n")
            f.write("\n")
        self.assertEqual(self.repo.load_all(), [user])

    def test_username_with_comma_rejected(self):
        for bad in ("al,ice", "al\nice", ""):
            with self.subTest(username=bad):
                with self.assertRaises(InvalidFieldError):
                    self.repo.create(bad, "pw")
        self.assertFalse(self.paths.users_file.exists())

    def test_password_may_contain_commas(self):
        self.repo.create("alice", "p,w")
        self.assertEqual(self.repo.authenticate("alice", "p,w").username, "alice")

    def test_known_ids(self):
        a = self.repo.create("alice", "pw1")
        b = self.repo.create("bob", "pw2")
        self.assertEqual(self.repo.known_ids(), [a.id, b.id])
