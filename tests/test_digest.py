"""Tests for secret hashing and prefix/suffix split."""

import hashlib

import pytest

from passleak import HASH_SIZE, PREFIX_SIZE, SUFFIX_SIZE
from passleak.digest import Suffix, digest, encode_hex_upper, hash_secret, split_digest
from passleak.secure_memory import SecureBytes


class TestDigest:
    """Test the digest engine."""

    def test_known_hash(self):
        """SHA-1 of "password" is 5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8."""
        with digest("password") as digest_hex:
            assert digest_hex.get() == b"5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8"

    def test_digest_is_deterministic(self):
        """Same secret should produce same digest."""
        with digest("mypassword") as first, digest("mypassword") as second:
            assert first.get() == second.get()

    def test_digest_length_and_case(self):
        """Digest is 40 uppercase hex characters."""
        for secret in ["", "a", "пароль123", "x" * 10_000]:
            with digest(secret) as digest_hex:
                value = digest_hex.get()
                assert len(value) == HASH_SIZE
                assert value == value.upper()
                assert value == hashlib.sha1(secret.encode("utf-8")).hexdigest().upper().encode()

    def test_bytes_and_str_agree(self):
        """Text is hashed as UTF-8."""
        with digest("pässword") as text, digest("pässword".encode("utf-8")) as raw:
            assert text.get() == raw.get()

    def test_caller_buffer_untouched(self):
        """The caller's bytearray is copied, not zeroed."""
        secret = bytearray(b"hunter2")
        digest(secret).clear()
        assert secret == bytearray(b"hunter2")

    def test_rejects_non_bytes(self):
        with pytest.raises(TypeError):
            digest(12345)

    def test_hex_encoding_matches_stdlib(self):
        """Branch-free encoding agrees with bytes.hex for every byte value."""
        data = bytes(range(256))
        assert encode_hex_upper(data) == data.hex().upper().encode("ascii")


class TestSplit:
    """Test the prefix splitter."""

    def test_known_split(self):
        prefix, suffix = split_digest(digest("P@ssw0rd"))
        assert prefix == "21BD1"
        assert suffix.get() == b"2DC183F740EE76F27B78EB39C8AD972A757"

    def test_prefix_plus_suffix_is_digest(self, hash_parts):
        """Prefix ++ suffix reconstructs the digest, prefix length is fixed."""
        for secret in ["password", "test", "", "correct horse battery staple"]:
            with digest(secret) as digest_hex:
                prefix, suffix = split_digest(digest_hex)
                assert len(prefix) == PREFIX_SIZE
                assert len(suffix) == SUFFIX_SIZE
                assert prefix.encode("ascii") + suffix.get() == digest_hex.get()
                assert (prefix, suffix.get().decode()) == hash_parts(secret)

    def test_wrong_length_rejected(self):
        with pytest.raises(ValueError):
            split_digest(SecureBytes(b"ABCDEF"))


class TestHashSecret:
    """Test scoped hashing."""

    def test_suffix_cleared_after_block(self):
        with hash_secret("password") as (prefix, suffix):
            assert prefix == "5BAA6"
            assert suffix.get() == b"1E4C9B93F3F0682250B6CF8331B7EE68FD8"
        assert suffix.is_cleared

    def test_suffix_cleared_on_error(self):
        with pytest.raises(RuntimeError):
            with hash_secret("password") as (_, suffix):
                raise RuntimeError("boom")
        assert suffix.is_cleared


class TestSuffix:
    """Suffix equality is constant-time and content based."""

    def test_equal_suffixes(self):
        assert Suffix(b"ABC") == Suffix(b"ABC")
        assert Suffix(b"ABC") == b"ABC"

    def test_different_suffixes(self):
        assert Suffix(b"ABC") != Suffix(b"ABD")
        assert Suffix(b"ABC") != b"ABCD"

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(Suffix(b"ABC"))

    def test_repr_hides_data(self):
        assert "ABC" not in repr(Suffix(b"ABC"))
