"""Unit tests for security utilities."""

from solarroots.security import InputSanitizer


class TestInputSanitizer:
    """Tests for InputSanitizer class."""

    def test_sanitize_name_truncates_long_input(self):
        """Test that names exceeding max length are truncated."""
        result = InputSanitizer.sanitize_name("a" * 500)
        assert len(result) == InputSanitizer.MAX_NAME_LENGTH

    def test_sanitize_name_strips_whitespace(self):
        """Test that leading/trailing whitespace is stripped."""
        assert InputSanitizer.sanitize_name("  Sunrise Co-op  ") == "Sunrise Co-op"

    def test_sanitize_name_handles_empty_input(self):
        """Test handling of empty input."""
        assert InputSanitizer.sanitize_name("") == ""
        assert InputSanitizer.sanitize_name(None) == ""

    def test_sanitize_name_keeps_unicode(self):
        """Test that valid unicode passes through."""
        assert InputSanitizer.sanitize_name("Coopérative 世界") == "Coopérative 世界"

    def test_sanitize_removes_control_characters(self):
        """Test that control characters are dropped but newlines survive."""
        assert InputSanitizer.sanitize_message("hello\x00\x07 there\nfriend") == "hello there\nfriend"

    def test_sanitize_description_truncates_long_input(self):
        result = InputSanitizer.sanitize_description("b" * 5000)
        assert len(result) == InputSanitizer.MAX_DESCRIPTION_LENGTH

    def test_sanitize_message_truncates_long_input(self):
        result = InputSanitizer.sanitize_message("c" * 10000)
        assert len(result) == InputSanitizer.MAX_MESSAGE_LENGTH

    def test_sanitize_array_limits_items(self):
        """Test that arrays are limited to max items."""
        result = InputSanitizer.sanitize_array([f"tag{i}" for i in range(100)])
        assert len(result) == InputSanitizer.MAX_ARRAY_ITEMS

    def test_sanitize_array_truncates_and_drops_blanks(self):
        """Test that items are truncated, stripped and blanks removed."""
        result = InputSanitizer.sanitize_array(["  solar ", "", "   ", None, "x" * 300])
        assert result == ["solar", "x" * InputSanitizer.MAX_TAG_LENGTH]

    def test_sanitize_array_handles_empty_input(self):
        assert InputSanitizer.sanitize_array(None) == []
        assert InputSanitizer.sanitize_array([]) == []

    def test_is_safe_url_accepts_http_and_https(self):
        assert InputSanitizer.is_safe_url("https://sunrisecoop.example.com")
        assert InputSanitizer.is_safe_url("http://example.org/path?q=1")

    def test_is_safe_url_rejects_other_schemes(self):
        assert not InputSanitizer.is_safe_url("javascript:alert(1)")
        assert not InputSanitizer.is_safe_url("ftp://example.com")
        assert not InputSanitizer.is_safe_url("example.com")

    def test_is_safe_url_rejects_long_urls(self):
        assert not InputSanitizer.is_safe_url("https://example.com/" + "a" * 600)

    def test_escape_html(self):
        """Test HTML entity escaping."""
        result = InputSanitizer.escape_html("<script>alert('xss')</script>")
        assert "<" not in result
        assert ">" not in result
        assert "'" not in result
        assert "&lt;script&gt;" in result

    def test_escape_html_escapes_ampersand_and_quotes(self):
        assert InputSanitizer.escape_html('a & "b"') == "a &amp; &quot;b&quot;"

    def test_escape_html_uses_decimal_apostrophe_entity(self):
        assert InputSanitizer.escape_html("it's") == "it&#39;s"

    def test_escape_attribute_escapes_backticks(self):
        assert InputSanitizer.escape_attribute("`x`") == "&#96;x&#96;"
        assert InputSanitizer.escape_attribute('"x"') == "&quot;x&quot;"
