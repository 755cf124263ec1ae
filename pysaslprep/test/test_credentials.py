#!/usr/bin/python
# -*- coding: UTF-8 -*-
# pylint: disable=C0111

import unittest

from pysaslprep.credentials import normalize, credentials_equal
from pysaslprep.credentials import PasswordDatabase
from pysaslprep.exceptions import ProhibitedCharacterError
from pysaslprep.exceptions import UnassignedCodePointError

class DictPasswordDatabase(PasswordDatabase):
    def __init__(self, passwords):
        self.passwords = passwords

    def get_password(self, username):
        return self.passwords.get(username)

class TestNormalize(unittest.TestCase):
    def test_unicode(self):
        self.assertEqual(normalize("I\u00adX"), b"IX")
        self.assertEqual(normalize("e\u0301"), "\u00e9".encode("utf-8"))

    def test_bytes(self):
        self.assertEqual(normalize(b"user"), b"user")
        self.assertEqual(normalize("\u2168".encode("utf-8")), b"IX")

    def test_error(self):
        with self.assertRaises(ProhibitedCharacterError):
            normalize(b"\x07")

class TestCredentialsEqual(unittest.TestCase):
    def test_equal(self):
        self.assertTrue(credentials_equal("I\u00adX", "IX"))
        self.assertTrue(credentials_equal("\u2168", "IX"))
        self.assertTrue(credentials_equal("a\u00a0b", "a b"))
        self.assertTrue(credentials_equal("", "\u00ad"))

    def test_not_equal(self):
        self.assertFalse(credentials_equal("user", "USER"))
        self.assertFalse(credentials_equal("user", "user "))

    def test_unassigned(self):
        with self.assertRaises(UnassignedCodePointError):
            credentials_equal("\u0221", "\u0221")
        self.assertTrue(credentials_equal("\u0221", "\u0221",
                                                    allow_unassigned = True))

class TestPasswordDatabase(unittest.TestCase):
    def setUp(self):
        self.database = DictPasswordDatabase({
                                "user": "pass\u2168",
                                "IX": "secret",
                                })

    def test_valid(self):
        self.assertTrue(self.database.check_password("user", "passIX"))
        self.assertTrue(self.database.check_password("user", "pass\u2168"))
        self.assertTrue(self.database.check_password("us\u00ader", "passIX"))
        self.assertTrue(self.database.check_password("\u2168", "secret"))

    def test_invalid(self):
        self.assertFalse(self.database.check_password("user", "pass"))
        self.assertFalse(self.database.check_password("nobody", "passIX"))
        self.assertFalse(self.database.check_password("user", "pass\u0007"))
        self.assertFalse(self.database.check_password(None, "passIX"))

    def test_default_database(self):
        self.assertIsNone(PasswordDatabase().get_password("user"))
        self.assertFalse(PasswordDatabase().check_password("user", "x"))

    def test_password_not_logged(self):
        with self.assertLogs("pysaslprep.credentials", "DEBUG") as logs:
            self.database.check_password("user", "passIX")
            self.database.check_password("user", "wrong-one")
            self.database.check_password("user", "bad\u0007")
        output = "\n".join(logs.output)
        self.assertIn("user", output)
        for password in ("passIX", "wrong-one", "bad"):
            self.assertNotIn(password, output)

# pylint: disable=W0611
from pysaslprep.test._support import load_tests, setup_logging

def setUpModule():
    setup_logging()

if __name__ == "__main__":
    unittest.main()
