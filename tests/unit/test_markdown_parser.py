#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_parser.py
"""Unit tests for the Markdown event source.

Tests cover:
- Event streams for block and inline constructs
- Always-on extensions (tables, footnotes, strikethrough, task lists, math)
- Input types (str, bytes, Path, streams)
- Stream well-formedness

"""

from io import BytesIO, StringIO

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mdstream.events import (
    BlockQuote,
    CodeBlock,
    CodeSpan,
    Emphasis,
    End,
    FootnoteDefinition,
    FootnoteRef,
    HardBreak,
    Heading,
    HorizontalRule,
    Image,
    Link,
    List,
    ListItem,
    MathSpan,
    Paragraph,
    RawHtml,
    SoftBreak,
    Start,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableHead,
    TableRow,
    TaskMarker,
    Text,
)
from mdstream.exceptions import FileNotFoundError
from mdstream.parsers.markdown import MarkdownEventParser, markdown_to_events


def parse(markdown):
    return list(MarkdownEventParser().parse(markdown))


@pytest.mark.unit
class TestBlockEvents:
    """Tests for block-level constructs."""

    def test_empty_document(self):
        """Test that an empty document gives no events."""
        assert parse("") == []

    def test_paragraph(self):
        """Test a single paragraph."""
        assert parse("Hello world") == [Start(Paragraph()), Text("Hello world"), End(Paragraph())]

    def test_two_paragraphs(self):
        """Test that blank lines produce no events."""
        assert parse("One\n\nTwo\n") == [
            Start(Paragraph()),
            Text("One"),
            End(Paragraph()),
            Start(Paragraph()),
            Text("Two"),
            End(Paragraph()),
        ]

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_atx_heading(self, level):
        """Test ATX headings at every level."""
        assert parse("#" * level + " Title") == [Start(Heading(level)), Text("Title"), End(Heading(level))]

    def test_fenced_code_block(self):
        """Test a fenced code block with an info string."""
        assert parse("```rust\nfn main() {}\n```\n") == [
            Start(CodeBlock("fenced", "rust")),
            Text("fn main() {}\n"),
            End(CodeBlock("fenced", "rust")),
        ]

    def test_fenced_code_block_without_info(self):
        """Test a fenced code block without an info string."""
        assert parse("```\ncode\n```\n") == [
            Start(CodeBlock("fenced", "")),
            Text("code\n"),
            End(CodeBlock("fenced", "")),
        ]

    def test_empty_code_block(self):
        """Test that an empty code block has no text event."""
        assert parse("```\n```\n") == [Start(CodeBlock("fenced", "")), End(CodeBlock("fenced", ""))]

    def test_indented_code_block(self):
        """Test an indented code block."""
        assert parse("    code\n") == [
            Start(CodeBlock("indented")),
            Text("code\n"),
            End(CodeBlock("indented")),
        ]

    def test_block_quote(self):
        """Test a block quote."""
        assert parse("> quoted\n") == [
            Start(BlockQuote()),
            Start(Paragraph()),
            Text("quoted"),
            End(Paragraph()),
            End(BlockQuote()),
        ]

    def test_tight_list(self):
        """Test that tight list items contain their text directly."""
        assert parse("- a\n- b\n") == [
            Start(List()),
            Start(ListItem()),
            Text("a"),
            End(ListItem()),
            Start(ListItem()),
            Text("b"),
            End(ListItem()),
            End(List()),
        ]

    def test_ordered_list_start(self):
        """Test that ordered lists carry their start number."""
        events = parse("3. a\n4. b\n")
        assert events[0] == Start(List(ordered=True, start=3))
        assert events[-1] == End(List(ordered=True, start=3))

    def test_thematic_break(self):
        """Test a thematic break."""
        assert parse("***\n") == [HorizontalRule()]

    def test_block_html(self):
        """Test that HTML blocks are passed through as raw HTML."""
        assert parse("<div>hi</div>\n") == [RawHtml("<div>hi</div>\n", inline=False)]


@pytest.mark.unit
class TestInlineEvents:
    """Tests for inline constructs."""

    def test_strong(self):
        """Test strong emphasis inside a paragraph."""
        assert parse("This is **bold** text.") == [
            Start(Paragraph()),
            Text("This is "),
            Start(Strong()),
            Text("bold"),
            End(Strong()),
            Text(" text."),
            End(Paragraph()),
        ]

    def test_emphasis(self):
        """Test emphasis."""
        events = parse("*em*")
        assert events[1:4] == [Start(Emphasis()), Text("em"), End(Emphasis())]

    def test_code_span(self):
        """Test inline code."""
        assert CodeSpan("x < y") in parse("Use `x < y` here")

    def test_link(self):
        """Test that links carry their destination."""
        events = parse("[click](https://example.com)")
        assert events[1:4] == [Start(Link("https://example.com")), Text("click"), End(Link("https://example.com"))]

    def test_link_title(self):
        """Test that link titles are kept on the tag."""
        events = parse('[click](/x "Title")')
        assert events[1] == Start(Link("/x", "Title"))

    def test_image(self):
        """Test that image alt text arrives as child events."""
        events = parse("![a b](x.png)")
        assert events[1:4] == [Start(Image("x.png")), Text("a b"), End(Image("x.png"))]

    def test_soft_break(self):
        """Test a line ending inside a paragraph."""
        assert parse("a\nb") == [Start(Paragraph()), Text("a"), SoftBreak(), Text("b"), End(Paragraph())]

    def test_hard_break(self):
        """Test a hard line break."""
        assert HardBreak() in parse("a  \nb")

    def test_inline_html(self):
        """Test that inline HTML is passed through as raw HTML."""
        assert RawHtml("<b>", inline=True) in parse("a <b>x</b> c")

    def test_character_references_resolved(self):
        """Test that entity and numeric references become the characters they name."""
        text = "".join(event.text for event in parse("Tom &amp; Jerry &copy; &#65;") if isinstance(event, Text))
        assert text == "Tom & Jerry © A"

    def test_character_references_in_code_kept(self):
        """Test that references inside code are literal text."""
        assert CodeSpan("&amp;") in parse("`&amp;`")
        assert Text("&amp;\n") in parse("```\n&amp;\n```\n")


@pytest.mark.unit
class TestExtensions:
    """Tests for the always-enabled extensions."""

    def test_strikethrough(self):
        """Test strikethrough."""
        events = parse("~~gone~~")
        assert events[1:4] == [Start(Strikethrough()), Text("gone"), End(Strikethrough())]

    def test_task_list(self):
        """Test that task list items start with a task marker."""
        assert parse("- [x] done\n- [ ] todo\n") == [
            Start(List()),
            Start(ListItem()),
            TaskMarker(done=True),
            Text("done"),
            End(ListItem()),
            Start(ListItem()),
            TaskMarker(done=False),
            Text("todo"),
            End(ListItem()),
            End(List()),
        ]

    def test_table(self):
        """Test that table heads contain cells directly and body rows are wrapped."""
        assert parse("| a | b |\n|---|---|\n| 1 | 2 |\n") == [
            Start(Table()),
            Start(TableHead()),
            Start(TableCell()),
            Text("a"),
            End(TableCell()),
            Start(TableCell()),
            Text("b"),
            End(TableCell()),
            End(TableHead()),
            Start(TableRow()),
            Start(TableCell()),
            Text("1"),
            End(TableCell()),
            Start(TableCell()),
            Text("2"),
            End(TableCell()),
            End(TableRow()),
            End(Table()),
        ]

    def test_footnotes(self):
        """Test a footnote reference and its definition."""
        assert parse("Text[^1]\n\n[^1]: Note.\n") == [
            Start(Paragraph()),
            Text("Text"),
            FootnoteRef("1"),
            End(Paragraph()),
            Start(FootnoteDefinition("1")),
            Start(Paragraph()),
            Text("Note."),
            End(Paragraph()),
            End(FootnoteDefinition("1")),
        ]

    def test_footnote_label_keeps_case(self):
        """Test that footnote names are the labels as written, not normalized keys."""
        events = parse("Text[^Note]\n\n[^Note]: Body.\n")
        assert FootnoteRef("Note") in events
        assert Start(FootnoteDefinition("Note")) in events
        assert End(FootnoteDefinition("Note")) in events

    def test_footnote_label_first_spelling_wins(self):
        """Test that a label spelled two ways uses the first spelling."""
        events = parse("A[^note] B[^NOTE]\n\n[^Note]: Body.\n")
        refs = [event for event in events if isinstance(event, FootnoteRef)]
        assert refs == [FootnoteRef("note"), FootnoteRef("note")]
        assert Start(FootnoteDefinition("note")) in events

    def test_inline_math(self):
        """Test inline math."""
        assert MathSpan("x^2", kind="inline") in parse("Area $x^2$ here")

    def test_display_math(self):
        """Test that display math on its own lines is wrapped in a paragraph."""
        assert parse("$$\nx^2\n$$\n") == [
            Start(Paragraph()),
            MathSpan("x^2", kind="display"),
            End(Paragraph()),
        ]

    def test_display_math_inside_paragraph(self):
        """Test that $$...$$ within a line stays inline in its paragraph."""
        assert parse("a $$x$$ b") == [
            Start(Paragraph()),
            Text("a "),
            MathSpan("x", kind="display"),
            Text(" b"),
            End(Paragraph()),
        ]


@pytest.mark.unit
class TestParserInput:
    """Tests for the supported input types."""

    def test_str_is_never_a_path(self, markdown_file):
        """Test that a str naming an existing file is parsed as text."""
        events = parse(str(markdown_file))
        assert events[0] == Start(Paragraph())
        assert Start(Heading(1)) not in events

    def test_path(self, markdown_file):
        """Test reading from a Path."""
        assert parse(markdown_file)[:3] == [Start(Heading(1)), Text("Title"), End(Heading(1))]

    def test_missing_path(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            MarkdownEventParser().parse(tmp_path / "missing.md")

    def test_bytes(self):
        """Test parsing bytes."""
        assert parse(b"# Hi") == [Start(Heading(1)), Text("Hi"), End(Heading(1))]

    def test_binary_stream(self):
        """Test parsing a binary stream."""
        assert parse(BytesIO(b"# Hi")) == [Start(Heading(1)), Text("Hi"), End(Heading(1))]

    def test_text_stream(self):
        """Test parsing a text stream."""
        assert parse(StringIO("# Hi")) == [Start(Heading(1)), Text("Hi"), End(Heading(1))]

    def test_markdown_to_events(self):
        """Test the convenience function."""
        assert len(list(markdown_to_events("Hello\n\nWorld"))) == 6

    def test_parser_reuse(self):
        """Test that one parser can parse several documents."""
        parser = MarkdownEventParser()
        assert list(parser.parse("# a"))[0] == Start(Heading(1))
        assert list(parser.parse("b"))[0] == Start(Paragraph())


@pytest.mark.unit
class TestStreamShape:
    """Property-based checks on parser output."""

    @given(st.text(alphabet=st.sampled_from(list("ab *_`#>-[]()!~$|\n")), max_size=60))
    def test_starts_and_ends_balance(self, markdown):
        """Test that every start is closed by a matching end in nesting order."""
        stack = []
        for event in parse(markdown):
            if isinstance(event, Start):
                stack.append(event.tag)
            elif isinstance(event, End):
                assert stack and stack.pop() == event.tag
        assert stack == []
