"""
Tests for password hashing.
"""

from harmonylearn.core.security import hash_password, verify_password


class TestPasswordHashing:
    def test_hash_differs_from_plaintext(self):
        hashed = hash_password("secret123")
        assert hashed != "secret123"
        assert hashed.startswith("$2")

    def test_hash_is_salted(self):
        assert hash_password("secret123") != hash_password("secret123")

    def test_verify_matching_password(self):
        assert verify_password("secret123", hash_password("secret123"))

    def test_verify_wrong_password(self):
        assert not verify_password("wrong-password", hash_password("secret123"))

    def test_verify_against_non_bcrypt_value(self):
        assert not verify_password("secret123", "secret123")
