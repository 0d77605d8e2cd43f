from diffmemo.config import Settings
from diffmemo.markup import (
    escape_html,
    markup_to_text,
    remove_html_spans,
)


class TestEscapeHtml:
    def test_escapes_html_special_characters(self):
        assert escape_html("<script>") == "&lt;script&gt;"
        assert escape_html("a & b") == "a &amp; b"
        assert escape_html('"quoted"') == "&quot;quoted&quot;"

    def test_ampersand_is_escaped_first(self):
        assert escape_html("&lt;") == "&amp;lt;"

    def test_single_quotes_are_left_alone(self):
        assert escape_html("don't") == "don't"

    def test_converts_newlines_to_br_tags(self):
        assert escape_html("line1\nline2") == "line1<br>line2"
        assert escape_html("\n\n") == "<br><br>"

    def test_custom_line_break_marker(self):
        assert escape_html("a\nb", line_break="<br />") == "a<br />b"

    def test_empty(self):
        assert escape_html("") == ""


def test_remove_html_spans():
    text = 'Hi <span class="extra">Jan</span>!'
    assert remove_html_spans(text) == "Hi Jan!"
    assert remove_html_spans('<span class="missing"></span>a') == "a"
    assert remove_html_spans("a &lt;span&gt; b") == "a &lt;span&gt; b"


class TestMarkupToText:
    def test_drops_placeholders_and_unwraps_highlights(self):
        markup = (
            '<span class="missing"></span>a<br>b &amp; '
            '<span class="extra">&lt;c&gt;</span>'
        )
        assert markup_to_text(markup) == "a\nb & <c>"

    def test_br_variants(self):
        assert markup_to_text("a<BR/>b<br />c") == "a\nb\nc"

    def test_escaped_markup_typed_by_the_user_survives(self):
        text = 'x <br> y <span class="extra">z</span> &amp;'
        assert markup_to_text(escape_html(text)) == text

    def test_custom_line_break_marker(self):
        settings = Settings(line_break="<p/>")
        assert markup_to_text("a<p/>b", settings) == "a\nb"

    def test_marker_typed_by_the_user_is_not_a_line_break(self):
        settings = Settings(line_break="<p/>")
        text = "say <p/> twice\nok"
        assert markup_to_text(escape_html(text, settings.line_break), settings) == text

    def test_reverses_escape_html(self):
        text = '  tab\there\n"quotes" & <angles>\n'
        assert markup_to_text(escape_html(text)) == text
