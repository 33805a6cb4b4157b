"""
Tests for the high level API.
"""

import io

import pytest

from html_interpreter import compose, styled_text
from html_interpreter.exceptions import AdjustFontSizeError
from html_interpreter.models.directive import BreakBlock, RuleBlock, TextBlock
from html_interpreter.models.geometry import Bounds


class TestCompose:
    """Test composing HTML into blocks."""

    def test_mixed_document(self):
        html = (
            "<h1>Title</h1>"
            "<p>Some <b>bold</b> and <i>italic</i> text.</p>"
            "<ol><li>First</li><li>Second</li></ol>"
            "<ul><li>Bullet</li></ul>"
            "<hr>"
        )
        blocks = compose(html)

        texts = [b.text for b in blocks if isinstance(b, TextBlock)]
        assert texts == [
            "Title",
            "Some bold and italic text.",
            "1. First",
            "2. Second",
            "• Bullet",
        ]
        assert isinstance(blocks[-1], RuleBlock)

    def test_font_tag(self):
        blocks = compose('<p><font face="Arial" color="#ff0000">Red</font></p>')

        assert blocks[0].parts[0].options == {"font": "Arial", "color": "ff0000"}

    def test_consecutive_breaks(self):
        blocks = compose("<p>a<br><br>b</p>")
        assert [type(b) for b in blocks] == [TextBlock, BreakBlock, TextBlock]

    def test_percentage_uses_bounds(self):
        blocks = compose(
            '<p><span style="font-size: 2em">Big</span></p><img src="x.png" style="width: 50%">',
            font_size=10,
            bounds=Bounds(width=400, height=600),
        )

        assert blocks[0].parts[0].options["size"] == 20
        assert blocks[1].width == pytest.approx(200.0)

    def test_sessions_do_not_leak_between_documents(self):
        compose("<ol><li>One</li>")
        blocks = compose("<ul><li>Two</li></ul>")

        assert blocks[0].pre == "• "
        assert blocks[0].margin_left == 15

    def test_bad_adjust_hook(self):
        with pytest.raises(AdjustFontSizeError):
            compose("<p>x</p>", adjust_font_size="big")


class TestStyledText:
    """Test rendering HTML into a PDF."""

    def test_writes_pdf_stream(self):
        buffer = io.BytesIO()
        html = (
            '<h2>Report</h2><p style="text-align: justify">Text with '
            '<a href="https://example.com">a link</a>, <del>removed</del> and '
            '<mark style="background-color: yellow">marked</mark> words.</p>'
            '<ul style="list-symbol: \'- \'"><li>item</li></ul>'
        )
        blocks = styled_text(html, buffer, font_size=11)

        assert buffer.getvalue().startswith(b"%PDF")
        assert blocks[-1].pre == "- "

    def test_writes_pdf_file(self, temp_dir):
        output = temp_dir / "out.pdf"
        styled_text("<p>Hello</p>", output, page_size="LETTER")

        assert output.read_bytes().startswith(b"%PDF")
