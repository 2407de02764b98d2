#!/usr/bin/env python3
"""
Tests for write_files content decoding.
"""

import base64
import gzip

import pytest

from conftest import b64, gz_b64
from cloudcmd.config.provider import DecoderConfig
from cloudcmd.errors import ContentDecodeError
from cloudcmd.modules.encoding import ContentDecoder, ContentEncoding, decode, resolve_encodings


class TestResolveEncodings:
    """Test label resolution."""

    @pytest.mark.parametrize("label", ["gz", "gzip", "GZIP", " gz "])
    def test_gzip_labels(self, label):
        assert resolve_encodings(label) == [ContentEncoding.GZIP]

    @pytest.mark.parametrize("label", ["base64", "b64", "Base64"])
    def test_base64_labels(self, label):
        assert resolve_encodings(label) == [ContentEncoding.BASE64]

    @pytest.mark.parametrize("label", ["gz+base64", "gzip+base64", "gz+b64", "GZIP+B64"])
    def test_combined_labels(self, label):
        """Test combined labels base64-decode first, then gunzip."""
        assert resolve_encodings(label) == [ContentEncoding.BASE64, ContentEncoding.GZIP]

    @pytest.mark.parametrize("label", ["", None, "text/plain"])
    def test_plain_text_labels(self, label):
        assert resolve_encodings(label) == [ContentEncoding.TEXT]

    def test_unknown_label_is_plain_text(self):
        """Test unknown labels fall back to plain text by default."""
        assert resolve_encodings("rot13") == [ContentEncoding.TEXT]

    def test_unknown_label_strict(self):
        """Test strict mode rejects unknown labels."""
        with pytest.raises(ContentDecodeError) as exc_info:
            resolve_encodings("rot13", strict=True)
        assert "rot13" in str(exc_info.value)


class TestDecode:
    """Test content decoding."""

    def test_base64(self):
        assert decode("aGVsbG8=", "base64") == "hello"

    def test_base64_with_line_breaks(self):
        """Test line breaks from YAML block scalars are ignored."""
        assert decode("aGVs\nbG8=\n", "b64") == "hello"

    def test_gzip(self):
        """Test gzip-only content is decompressed."""
        compressed = gzip.compress(b"hello").decode("utf-8", errors="surrogateescape")
        assert decode(compressed, "gzip") == "hello"

    def test_plain_text_unchanged(self):
        assert decode("plain content\n", "") == "plain content\n"
        assert decode("aGVsbG8=", "text/plain") == "aGVsbG8="

    def test_combined_chain_applied(self):
        """Test gz+base64 is fully decoded by default."""
        assert decode(gz_b64("hello world"), "gz+base64") == "hello world"

    def test_combined_legacy_single_step(self):
        """Test the legacy mode stops after base64-decoding."""
        compressed = gzip.compress(b"hello world")
        config = DecoderConfig(chain_encodings=False)
        decoded = decode(base64.b64encode(compressed).decode(), "gzip+b64", config)
        assert decoded.encode("utf-8", errors="surrogateescape") == compressed

    def test_malformed_base64(self):
        with pytest.raises(ContentDecodeError) as exc_info:
            decode("not base64!!", "base64")
        assert "base64" in str(exc_info.value)

    def test_invalid_gzip(self):
        with pytest.raises(ContentDecodeError) as exc_info:
            decode("definitely not gzip", "gz")
        assert "gzip" in str(exc_info.value)

    def test_truncated_gzip(self):
        """Test a truncated compressed stream fails."""
        truncated = base64.b64encode(gzip.compress(b"hello world" * 10)[:12]).decode()
        with pytest.raises(ContentDecodeError):
            decode(truncated, "gz+b64")

    def test_binary_payload_survives(self):
        """Test non-UTF-8 bytes round-trip through the decoded text."""
        payload = bytes(range(256))
        decoded = decode(base64.b64encode(payload).decode(), "base64")
        assert decoded.encode("utf-8", errors="surrogateescape") == payload

    def test_decoder_reuses_config(self):
        decoder = ContentDecoder(DecoderConfig(strict_encodings=True))
        assert decoder.decode(b64("x"), "b64") == "x"
        with pytest.raises(ContentDecodeError):
            decoder.decode("x", "zstd")
