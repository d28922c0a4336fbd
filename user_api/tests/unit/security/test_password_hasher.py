"""
Unit tests for BcryptPasswordHasher.

Tests hashing, verification and the error channel of both.
"""
import pytest
from unittest.mock import patch

from user_api.app.domain.exceptions import HashingException
from user_api.app.infrastructure.security import BcryptPasswordHasher


class TestBcryptPasswordHasherInit:
    """Test hasher initialization."""

    def test_default_rounds(self):
        """Test default cost factor is 10."""
        assert BcryptPasswordHasher().rounds == 10

    def test_custom_rounds(self):
        """Test custom cost factor is kept."""
        assert BcryptPasswordHasher(rounds=12).rounds == 12


class TestHash:
    """Test password hashing."""

    def test_hash_is_modular_crypt_string(self, password_hasher):
        """Test hash embeds algorithm and cost."""
        hashed = password_hasher.hash("pw1234")

        assert hashed.startswith("$2b$04$")
        assert len(hashed) == 60

    def test_hash_never_equals_plaintext(self, password_hasher):
        """Test the plaintext does not appear in the credential."""
        hashed = password_hasher.hash("pw1234")

        assert hashed != "pw1234"
        assert "pw1234" not in hashed

    def test_same_password_hashes_differently(self, password_hasher):
        """Test each hash gets its own salt, and both still verify."""
        first = password_hasher.hash("pw1234")
        second = password_hasher.hash("pw1234")

        assert first != second
        assert password_hasher.verify("pw1234", first) is True
        assert password_hasher.verify("pw1234", second) is True

    def test_hash_unicode_password(self, password_hasher):
        """Test non-ASCII passwords round trip."""
        hashed = password_hasher.hash("pässwörd-日本")

        assert password_hasher.verify("pässwörd-日本", hashed) is True

    def test_library_failure_raises_hashing_exception(self, password_hasher):
        """Test bcrypt errors surface as HashingException."""
        with patch(
            "user_api.app.infrastructure.security.password_hasher.bcrypt.hashpw",
            side_effect=ValueError("boom"),
        ):
            with pytest.raises(HashingException) as exc_info:
                password_hasher.hash("pw1234")

        assert exc_info.value.code == "HASHING_FAILED"
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestVerify:
    """Test password verification."""

    @pytest.mark.parametrize("password", ["pw1234", "a", "correct horse battery staple"])
    def test_verify_matching_password(self, password_hasher, password):
        """Test verify(P, hash(P)) succeeds."""
        assert password_hasher.verify(password, password_hasher.hash(password)) is True

    @pytest.mark.parametrize("stored,attempt", [
        ("pw1234", "pw12345"),
        ("pw1234", "PW1234"),
        ("pw1234", ""),
    ])
    def test_verify_different_password_fails(self, password_hasher, stored, attempt):
        """Test verify(P1, hash(P2)) fails when P1 != P2."""
        assert password_hasher.verify(attempt, password_hasher.hash(stored)) is False

    def test_verify_corrupt_hash_reports_mismatch(self, password_hasher):
        """Test a malformed stored credential is reported as a mismatch."""
        assert password_hasher.verify("pw1234", "not-a-bcrypt-hash") is False

    def test_verify_library_error_reports_mismatch(self, password_hasher):
        """Test library errors during checkpw look like a mismatch."""
        hashed = password_hasher.hash("pw1234")

        with patch(
            "user_api.app.infrastructure.security.password_hasher.bcrypt.checkpw",
            side_effect=TypeError("bad input"),
        ):
            assert password_hasher.verify("pw1234", hashed) is False
