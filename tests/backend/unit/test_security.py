"""
Unit tests for core.security module.
Tests password hashing and verification.
"""
import pytest
from chatroom_server.core.security import dummy_hash, hash_password, verify_password


class TestPasswordHashing:
    """Tests for password hashing and verification."""

    def test_hash_password_returns_different_hash_each_time(self):
        """Password hashing should produce different hashes (salt included)."""
        password = "TestPassword123"
        hash1 = hash_password(password)
        hash2 = hash_password(password)
        assert hash1 != hash2  # Different salts produce different hashes

    def test_hash_password_produces_valid_hash(self):
        """Hashed password should be a non-empty argon2 string."""
        password = "TestPassword123"
        hashed = hash_password(password)
        assert isinstance(hashed, str)
        assert hashed.startswith("$argon2")
        assert password not in hashed  # Should not be plain text

    def test_hash_length_does_not_depend_on_input(self):
        assert len(hash_password("a")) == len(hash_password("a much longer password " * 10))

    def test_verify_password_correct_password(self):
        """verify_password should return True for correct password."""
        password = "TestPassword123"
        hashed = hash_password(password)
        assert verify_password(password, hashed) is True

    def test_verify_password_incorrect_password(self):
        """verify_password should return False for incorrect password."""
        hashed = hash_password("TestPassword123")
        assert verify_password("WrongPassword456", hashed) is False

    def test_password_hash_consistency(self):
        """Same password should verify against its hash consistently."""
        password = "ConsistentPassword789"
        hashed = hash_password(password)
        for _ in range(3):
            assert verify_password(password, hashed) is True


class TestMalformedHashes:
    """A broken stored hash must read as a failed check, never an exception."""

    @pytest.mark.parametrize("bad_hash", ["", None, "not-a-hash", "$argon2id$garbage"])
    def test_verify_password_rejects_malformed_hash(self, bad_hash):
        assert verify_password("whatever", bad_hash) is False

    def test_dummy_hash_is_cached_and_never_matches_user_input(self):
        assert dummy_hash() is dummy_hash()
        assert verify_password("password", dummy_hash()) is False
