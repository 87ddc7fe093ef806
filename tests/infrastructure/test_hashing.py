"""Tests for template_digestor.infrastructure.parsing.hashing."""

import hashlib

import pytest

from template_digestor.domain.exceptions import ConfigurationError
from template_digestor.infrastructure.parsing.hashing import compute_content_hash


class TestComputeContentHash:
    def test_md5_by_default(self):
        assert compute_content_hash("hello-") == hashlib.md5(b"hello-").hexdigest()

    def test_lowercase_hex_128_bit(self):
        value = compute_content_hash("anything")
        assert len(value) == 32
        assert value == value.lower()
        int(value, 16)

    def test_deterministic(self):
        assert compute_content_hash("same") == compute_content_hash("same")

    def test_different_content(self):
        assert compute_content_hash("a") != compute_content_hash("b")

    def test_unicode(self):
        assert compute_content_hash("héllo") == hashlib.md5("héllo".encode("utf-8")).hexdigest()

    def test_other_algorithm(self):
        assert compute_content_hash("x", "sha256") == hashlib.sha256(b"x").hexdigest()

    def test_unknown_algorithm(self):
        with pytest.raises(ConfigurationError, match="Unsupported hash algorithm"):
            compute_content_hash("x", "no-such-hash")
