"""
Tests for content-type classification.
"""
import pytest

from navigator_secrets.content import classify_content, sniff_mime

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
PDF = b"%PDF-1.7\n" + b"\x00" * 64


class TestSniff:
    """Tests for signature based detection."""

    @pytest.mark.parametrize("data, mime", [
        (PNG, "image/png"),
        (PDF, "application/pdf"),
    ])
    def test_detects_binary_signatures(self, data, mime):
        """Test magic numbers map to their mime types."""
        assert sniff_mime(data) == mime

    @pytest.mark.parametrize("data", [
        b"<!DOCTYPE html><html></html>",
        b"<html><body>hi</body></html>",
        b"  \n<HEAD>\n<title>x</title>",
        b"<p>paragraph</p>",
        b"<a href='/'>link</a>",
        b"<!-- comment -->",
    ])
    def test_detects_html(self, data):
        """Test documents opening with a known HTML tag are text/html."""
        assert sniff_mime(data) == "text/html"

    def test_html_tag_must_terminate(self):
        """Test a tag prefix followed by other letters is not HTML."""
        assert sniff_mime(b"<abbr>x</abbr>") is None

    def test_detects_xml(self):
        """Test an XML declaration is text/xml."""
        assert sniff_mime(b'<?xml version="1.0"?><root/>') == "text/xml"

    def test_detects_shell_script(self):
        """Test a shebang line is a shell script."""
        assert sniff_mime(b"#!/bin/sh\necho hi\n") == "text/x-shellscript"

    def test_plain_text_not_sniffable(self):
        """Test plain text has no signature."""
        assert sniff_mime(b"hello world") is None

    def test_empty_payload(self):
        """Test an empty payload has no signature."""
        assert sniff_mime(b"") is None


class TestClassify:
    """Tests for classify_content header fallback."""

    def test_sniffed_type_wins_over_header(self):
        """Test the detected type takes precedence over the header."""
        assert classify_content(PNG, {"Content-Type": "text/plain"}) == "image/png"

    def test_header_fallback(self):
        """Test the declared header is used when nothing is detected."""
        assert classify_content(b"hello world", {"Content-Type": "text/plain"}) == "text/plain"

    def test_header_fallback_bytes(self):
        """Test a raw bytes header is decoded as UTF-8."""
        hdrs = {"content-type": b"application/json; charset=utf-8"}
        assert classify_content(b"{}", hdrs) == "application/json; charset=utf-8"

    def test_undecodable_header(self):
        """Test an undecodable header gives the error marker."""
        assert classify_content(b"hello", {"Content-Type": b"\xff"}) == "error"

    @pytest.mark.parametrize("empty", ["", b""])
    def test_empty_header_is_none(self, empty):
        """Test an empty declared header falls back to none."""
        assert classify_content(b"hello world", {"Content-Type": empty}) == "none"

    def test_nothing_known(self):
        """Test no signature and no header gives none."""
        assert classify_content(b"hello world") == "none"
        assert classify_content(b"hello world", {}) == "none"
