"""Tests for log-safe text fingerprints."""
import hashlib

from moodlens.shared.utils import fingerprint_text


class TestFingerprintText:
    """Tests for fingerprint_text."""

    def test_sha256_hex(self):
        expected = hashlib.sha256("I feel calm".encode("utf-8")).hexdigest()
        assert fingerprint_text("I feel calm") == expected

    def test_does_not_contain_text(self):
        assert "calm" not in fingerprint_text("calm")

    def test_non_string_hashes_as_empty(self):
        assert fingerprint_text(None) == fingerprint_text("")
        assert fingerprint_text(42) == fingerprint_text("")
