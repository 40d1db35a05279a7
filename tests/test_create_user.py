"""Tests for the metaspace.scripts.create_user CLI."""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from metaspace.models import User
from metaspace.scripts import create_user
from support import DatabaseTestCase


class TestCreateUserCli(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        patcher = patch.object(create_user, "SessionLocal", self.session_factory)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _run(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = create_user.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_creates_admin(self) -> None:
        code, out, _ = self._run("root", "s3cret", "admin")
        self.assertEqual(code, 0)
        self.assertIn("with role 'admin'", out)
        user = self.session().query(User).filter(User.username == "root").one()
        self.assertEqual(user.role, "admin")

    def test_duplicate_username_fails(self) -> None:
        self._run("root", "s3cret")
        code, _, err = self._run("root", "other")
        self.assertEqual(code, 1)
        self.assertIn("already exists", err)

    def test_blank_username_fails(self) -> None:
        code, _, err = self._run("  ", "s3cret")
        self.assertEqual(code, 1)
        self.assertIn("Username is required", err)


if __name__ == "__main__":
    unittest.main()
