import pytest

from dualpascal.exceptions import MarkdownRenderError
from dualpascal.services import markdown_service
from dualpascal.services.markdown_service import content_preview, render_markdown


class TestRenderMarkdown:
    def test_basic_markdown(self):
        html = render_markdown("# Title\n\nSome **bold** text")
        assert "<h1>Title</h1>" in html
        assert "<strong>bold</strong>" in html

    def test_tables(self):
        html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |")
        assert "<table>" in html
        assert "<td>1</td>" in html

    def test_fenced_code_is_highlighted(self):
        html = render_markdown("```python\nprint('hi')\n```")
        assert 'class="highlight"' in html

    def test_script_is_stripped(self):
        html = render_markdown("hello <script>alert(1)</script>")
        assert "<script>" not in html

    def test_none_renders_empty(self):
        assert render_markdown(None) == ""

    def test_renderer_failure_raises(self, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError("broken")

        monkeypatch.setattr(markdown_service.markdown, "markdown", boom)
        with pytest.raises(MarkdownRenderError):
            render_markdown("text")


class TestContentPreview:
    def test_plain_text_truncated(self):
        preview = content_preview("# Heading\n\n" + "word " * 50, length=20)
        assert len(preview) == 20
        assert preview.endswith("...")
        assert "<" not in preview

    def test_short_text_unchanged(self):
        assert content_preview("short **one**") == "short one"
