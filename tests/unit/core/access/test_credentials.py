"""
Unit tests for password hashing and generated branch credentials.
"""

import unittest

from core.access.credentials import (
    DIGITS,
    LOWER,
    SPECIAL,
    UPPER,
    branch_email,
    generate_branch_credentials,
    generate_password,
    hash_password,
    verify_password,
)
from core.exceptions import ValidationError


class TestPasswordHashing(unittest.TestCase):

    def test_hash_verifies(self):
        hashed = hash_password("Admin@123")
        self.assertNotEqual(hashed, "Admin@123")
        self.assertTrue(verify_password("Admin@123", hashed))
        self.assertFalse(verify_password("admin@123", hashed))

    def test_malformed_hash_never_matches(self):
        self.assertFalse(verify_password("Admin@123", "not-a-bcrypt-hash"))
        self.assertFalse(verify_password("Admin@123", ""))
        self.assertFalse(verify_password("", hash_password("x")))

    def test_password_length_limit_is_in_bytes(self):
        self.assertTrue(verify_password("a" * 72, hash_password("a" * 72)))
        with self.assertRaises(ValidationError):
            hash_password("a" * 80)
        # 37 two-byte characters are 74 bytes
        with self.assertRaises(ValidationError):
            hash_password("\u00e9" * 37)

    def test_overlong_password_never_verifies(self):
        self.assertFalse(verify_password("a" * 80, hash_password("a" * 72)))


class TestGeneratedCredentials(unittest.TestCase):

    def test_branch_email(self):
        self.assertEqual(branch_email("North Hub"), "north.hub@company.com")
        self.assertEqual(branch_email("  Lagos   Office ", "hireai.io"), "lagos.office@hireai.io")

    def test_password_composition(self):
        for _ in range(50):
            pwd = generate_password()
            self.assertEqual(len(pwd), 12)
            self.assertTrue(any(c in UPPER for c in pwd))
            self.assertTrue(any(c in LOWER for c in pwd))
            self.assertTrue(any(c in DIGITS for c in pwd))
            self.assertTrue(any(c in SPECIAL for c in pwd))
            self.assertTrue(all(c in UPPER + LOWER + DIGITS + SPECIAL for c in pwd))

    def test_passwords_differ(self):
        self.assertEqual(len({generate_password() for _ in range(20)}), 20)

    def test_generate_branch_credentials(self):
        email, password = generate_branch_credentials("West Coast")
        self.assertEqual(email, "west.coast@company.com")
        self.assertEqual(len(password), 12)


if __name__ == '__main__':
    unittest.main()
