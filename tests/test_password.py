"""
Tests for the password commitment.
"""
import pytest

from navigator_secrets.models import INT64_MAX, INT64_MIN
from navigator_secrets.password import commit_password, hash_password, verify_password


class TestHashPassword:
    """Tests for hash_password and commit_password."""

    def test_deterministic(self):
        """Test the same password always yields the same commitment."""
        assert hash_password("s3cret") == hash_password("s3cret")

    def test_distinct_passwords(self):
        """Test different passwords yield different commitments."""
        values = {hash_password(f"password-{i}") for i in range(1000)}
        assert len(values) == 1000

    @pytest.mark.parametrize("pwd", ["", "s3cret", "ünïcødé", "x" * 10000])
    def test_signed_64_bit(self, pwd):
        """Test commitments fit a signed 64-bit integer."""
        value = hash_password(pwd)
        assert isinstance(value, int)
        assert INT64_MIN <= value <= INT64_MAX

    def test_commit_none(self):
        """Test no password stores no commitment."""
        assert commit_password(None) is None

    def test_commit_empty_string_is_a_password(self):
        """Test an empty string still counts as a password."""
        assert commit_password("") is not None


class TestVerifyPassword:
    """Tests for verify_password."""

    def test_match(self):
        """Test the right password verifies."""
        assert verify_password(hash_password("s3cret"), "s3cret") is True

    def test_mismatch(self):
        """Test a wrong password is refused."""
        assert verify_password(hash_password("s3cret"), "guess") is False

    def test_missing_password(self):
        """Test a missing password is refused when one is required."""
        assert verify_password(hash_password("s3cret"), None) is False

    def test_no_commitment(self):
        """Test secrets without a commitment need no password."""
        assert verify_password(None, None) is True
        assert verify_password(None, "anything") is True
