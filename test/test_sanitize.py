import pytest

from dualpascal.utils.sanitize import is_http_url, sanitize_html, strip_tags, truncate


class TestSanitizeHtml:
    def test_keeps_allowed_tags(self):
        assert sanitize_html("<p><strong>hi</strong></p>") == "<p><strong>hi</strong></p>"

    def test_strips_disallowed_tags_and_attributes(self):
        cleaned = sanitize_html('<p onclick="x()">hi<iframe src="https://evil"></iframe></p>')
        assert "onclick" not in cleaned
        assert "iframe" not in cleaned

    def test_javascript_links_are_neutralised(self):
        assert "javascript" not in sanitize_html('<a href="javascript:alert(1)">x</a>')

    def test_none(self):
        assert sanitize_html(None) == ""


class TestTextHelpers:
    def test_strip_tags(self):
        assert strip_tags("<p>Tom &amp; Jerry</p>") == "Tom & Jerry"

    def test_truncate(self):
        assert truncate("abcdefghij", 8) == "abcde..."
        assert truncate("abc", 8) == "abc"

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("https://example.com", True),
            ("http://x.y/path?q=1", True),
            ("ftp://x", False),
            ("http://exa mple .com", False),
            ("http://<script>", False),
            ("https://:::::", False),
            ("https://", False),
            ("", False),
            (None, False),
        ],
    )
    def test_is_http_url(self, value, expected):
        assert is_http_url(value) is expected
