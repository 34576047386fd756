"""Unit and property-based tests for the content module."""
import re

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from chatbubble.content import (
    CodeBlockSegment,
    InlineCode,
    MessageContent,
    PlainTextSegment,
    SegmentKind,
    TextRun,
    parse_message,
)
from chatbubble.content.scanner import TRIM_CHARS

BOM = chr(0xFEFF)
NBSP = chr(0xA0)

# Text built from characters that exercise fences, backticks and tag lines
markup_text = st.text(alphabet="ab`\n \tZ1", max_size=80)


def split_reference(raw: str) -> list[tuple]:
    """Delimiter-splitting parser used as an oracle for the scanner."""
    result = []
    for index, text in enumerate(raw.split("```")):
        if index % 2:
            lines = text.split("\n")
            language = "text"
            if re.fullmatch(r"[a-zA-Z]+", lines[0]):
                language = lines.pop(0)
            result.append(("code", language, "\n".join(lines).strip(TRIM_CHARS)))
        else:
            runs = []
            for run_index, part in enumerate(text.split("`")):
                if run_index % 2:
                    runs.append(("inline", part))
                else:
                    runs.append(("text", part[1:] if part.startswith("\n") else part))
            result.append(("plain", tuple(runs)))
    return result


def as_tuples(segments) -> list[tuple]:
    result = []
    for segment in segments:
        if isinstance(segment, CodeBlockSegment):
            result.append(("code", segment.language, segment.code))
        else:
            result.append((
                "plain",
                tuple(
                    ("inline", run.code) if isinstance(run, InlineCode) else ("text", run.text)
                    for run in segment.runs
                ),
            ))
    return result


class TestParseMessage:
    """Tests for parse_message."""

    def test_empty_input(self):
        """Test that empty input gives one plain segment with one empty run."""
        assert parse_message("") == [PlainTextSegment(runs=(TextRun(text=""),))]

    def test_plain_text_only(self):
        """Test text without any backticks."""
        segments = parse_message("hello world")

        assert segments == [PlainTextSegment(runs=(TextRun(text="hello world"),))]

    def test_code_block_with_language(self):
        """Test a fenced block with a language line."""
        segments = parse_message("```go\nfmt.Println(1)\n```")

        assert [s.kind for s in segments] == [
            SegmentKind.PLAIN_TEXT,
            SegmentKind.CODE_BLOCK,
            SegmentKind.PLAIN_TEXT,
        ]
        block = segments[1]
        assert block.language == "go"
        assert block.code == "fmt.Println(1)"
        assert block.closed

    def test_code_block_without_language(self):
        """Test that a non-alphabetic first line stays in the body."""
        segments = parse_message("```\nx=1\n```")

        block = segments[1]
        assert block.language == "text"
        assert block.code == "x=1"

    def test_first_line_with_digits_is_not_a_tag(self):
        """Test that 'Go1' is rejected as a language tag."""
        block = parse_message("```Go1\nx\n```")[1]

        assert block.language == "text"
        assert block.code == "Go1\nx"

    def test_mixed_case_tag_is_kept_as_is(self):
        """Test that tags are matched case-sensitively and not lower-cased."""
        block = parse_message("```Python\nprint(1)\n```")[1]

        assert block.language == "Python"
        assert block.code == "print(1)"

    def test_tag_with_symbols_is_rejected(self):
        """Test that 'c++' and ' go' are not language tags."""
        assert parse_message("```c++\nint x;\n```")[1].language == "text"
        assert parse_message("``` go\nx\n```")[1].code == "go\nx"

    def test_empty_first_line_is_not_consumed(self):
        """Test that an empty tag line falls back to 'text'."""
        block = parse_message("```\n\nvalue\n```")[1]

        assert block.language == "text"
        assert block.code == "value"

    def test_block_on_one_line(self):
        """Test blocks without any line break."""
        assert parse_message("```python```")[1] == CodeBlockSegment(language="python", code="")
        assert parse_message("```x = 1```")[1] == CodeBlockSegment(language="text", code="x = 1")

    def test_code_body_is_trimmed(self):
        """Test that the body is stripped on both ends only."""
        block = parse_message("```py\n\n    x = 1\n    y = 2  \n\n```")[1]

        assert block.code == "x = 1\n    y = 2"

    def test_code_body_trims_byte_order_mark_and_nbsp(self):
        """Test that BOM and non-breaking spaces are trimmed from the body."""
        block = parse_message(f"```\n{BOM}x=1{NBSP}{BOM}\n```")[1]

        assert block.code == "x=1"

    def test_code_body_keeps_separator_controls(self):
        """Test that \\x1c-\\x1f and \\x85 are not treated as whitespace."""
        body = "".join(chr(c) for c in (0x1C, 0x1D, 0x1E, 0x1F, 0x85))
        block = parse_message(f"```\n{body}x{body}\n```")[1]

        assert block.code == f"{body}x{body}"

    def test_inline_code(self):
        """Test inline code spans inside plain text."""
        segments = parse_message("a `b` c")

        assert segments == [
            PlainTextSegment(runs=(TextRun(text="a "), InlineCode(code="b"), TextRun(text=" c")))
        ]

    def test_inline_code_display_text(self):
        """Test that inline code is shown wrapped in backticks."""
        assert InlineCode(code="b").display_text == "`b`"

    def test_leading_newline_after_fence_is_stripped(self):
        """Test that the newline after a closing fence is dropped."""
        segments = parse_message("```js\nf()\n```\nafter")

        assert segments[2] == PlainTextSegment(runs=(TextRun(text="after"),))

    def test_only_one_leading_newline_is_stripped(self):
        """Test that blank lines after the fence survive."""
        segments = parse_message("```\nx\n```\n\nafter")

        assert segments[2].runs[0].text == "\nafter"

    def test_leading_newline_stripped_in_every_text_run(self):
        """Test that each text run loses one leading newline."""
        segments = parse_message("a `b`\nc")

        assert segments[0].runs == (TextRun(text="a "), InlineCode(code="b"), TextRun(text="c"))

    def test_unclosed_inline_code(self):
        """Test that an unpaired backtick keeps the rest as inline code."""
        segments = parse_message("a `b")

        assert segments[0].runs == (TextRun(text="a "), InlineCode(code="b", closed=False))

    def test_inline_code_does_not_cross_fences(self):
        """Test that inline state resets at every fence."""
        segments = parse_message("a `b ```x``` c` d")

        assert segments[0].runs == (TextRun(text="a "), InlineCode(code="b ", closed=False))
        assert segments[1] == CodeBlockSegment(language="x", code="")
        assert segments[2].runs == (TextRun(text=" c"), InlineCode(code=" d", closed=False))

    def test_unpaired_trailing_fence_becomes_code_block(self):
        """Test that an unclosed fence keeps its content as a final block."""
        segments = parse_message("intro\n```python\nprint(1)")

        assert len(segments) == 2
        assert segments[0].runs == (TextRun(text="intro\n"),)
        assert segments[1] == CodeBlockSegment(language="python", code="print(1)", closed=False)

    def test_fence_at_end_of_input(self):
        """Test a dangling fence with nothing after it."""
        segments = parse_message("abc```")

        assert segments[1] == CodeBlockSegment(language="text", code="", closed=False)

    def test_four_backticks(self):
        """Test that a fence wins over a following single backtick."""
        segments = parse_message("````")

        assert segments == [
            PlainTextSegment(runs=(TextRun(text=""),)),
            CodeBlockSegment(language="text", code="`", closed=False),
        ]

    def test_two_backticks_are_empty_inline_code(self):
        """Test that a double backtick is an empty inline span."""
        segments = parse_message("``")

        assert segments[0].runs == (TextRun(text=""), InlineCode(code=""), TextRun(text=""))

    def test_multiple_blocks_preserve_order(self):
        """Test ordering across several blocks."""
        segments = parse_message("one\n```py\na\n```\ntwo\n```sh\nb\n```\nthree")

        assert [s.kind for s in segments] == [
            SegmentKind.PLAIN_TEXT,
            SegmentKind.CODE_BLOCK,
            SegmentKind.PLAIN_TEXT,
            SegmentKind.CODE_BLOCK,
            SegmentKind.PLAIN_TEXT,
        ]
        assert [s.language for s in segments if isinstance(s, CodeBlockSegment)] == ["py", "sh"]
        assert [s.display_text for s in segments if isinstance(s, PlainTextSegment)] == [
            "one\n",
            "two\n",
            "three",
        ]

    def test_crlf_language_line_is_not_a_tag(self):
        """Test that a carriage return makes the tag line non-alphabetic."""
        block = parse_message("```go\r\nx\r\n```")[1]

        assert block.language == "text"
        assert block.code == "go\r\nx"

    @given(markup_text)
    def test_parse_is_idempotent(self, raw: str):
        """Property test: parsing the same input twice gives equal output."""
        assert parse_message(raw) == parse_message(raw)

    @given(markup_text)
    def test_segment_count_follows_fences(self, raw: str):
        """Property test: one more segment than fences, kinds alternating."""
        segments = parse_message(raw)

        assert len(segments) == raw.count("```") + 1
        for index, segment in enumerate(segments):
            expected = SegmentKind.CODE_BLOCK if index % 2 else SegmentKind.PLAIN_TEXT
            assert segment.kind == expected

    @given(markup_text)
    def test_matches_split_reference(self, raw: str):
        """Property test: scanner agrees with delimiter splitting."""
        assert as_tuples(parse_message(raw)) == split_reference(raw)

    @given(st.lists(st.text(alphabet="xy =\n", max_size=20), min_size=1, max_size=4))
    def test_balanced_fences_give_half_as_many_blocks(self, bodies: list[str]):
        """Property test: n closed blocks for 2n fences."""
        raw = "intro\n" + "\ntext\n".join(f"```py\n{body}\n```" for body in bodies)
        segments = parse_message(raw)
        blocks = [s for s in segments if isinstance(s, CodeBlockSegment)]

        assert len(blocks) == len(bodies)
        assert all(block.closed and block.language == "py" for block in blocks)
        assert [block.code for block in blocks] == [body.strip() for body in bodies]

    @given(markup_text)
    def test_runs_never_contain_backticks(self, raw: str):
        """Property test: delimiters never leak into text or inline runs."""
        for segment in parse_message(raw):
            if isinstance(segment, PlainTextSegment):
                for run in segment.runs:
                    content = run.code if isinstance(run, InlineCode) else run.text
                    assert "`" not in content
            else:
                assert "```" not in segment.code


class TestMessageContent:
    """Tests for MessageContent."""

    def test_from_text(self, sample_message_text):
        """Test building content from raw text."""
        content = MessageContent.from_text(sample_message_text)

        assert len(content.segments) == 5
        assert [b.language for b in content.code_blocks] == ["python", "text"]
        assert content.code_blocks[1].code == "SELECT 1;"

    def test_display_text_restores_inline_code(self):
        """Test the readable form of plain text."""
        assert MessageContent.from_text("a `b` c").to_display_text() == "a `b` c"

    def test_display_text_restores_fences(self):
        """Test the readable form of a code block."""
        content = MessageContent.from_text("x\n```py\nprint(1)\n```")

        assert content.to_display_text() == "x\n```py\nprint(1)\n```"

    def test_display_text_puts_text_after_block_on_new_line(self, sample_message_text):
        """Test that text following a fence is not glued onto it."""
        assert MessageContent.from_text(sample_message_text).to_display_text() == sample_message_text

    def test_display_text_is_normalised(self):
        """Test that the display form drops the default tag and re-fences one-liners."""
        assert MessageContent.from_text("```text\nx\n```").to_display_text() == "```\nx\n```"
        assert MessageContent.from_text("```x = 1```").to_display_text() == "```\nx = 1\n```"
        assert MessageContent.from_text("a\n```go\nf()").to_display_text() == "a\n```go\nf()\n```"

    def test_segments_are_immutable(self):
        """Test that parsed segments cannot be modified."""
        content = MessageContent.from_text("```go\nx\n```")

        with pytest.raises(ValidationError):
            content.code_blocks[0].language = "rust"
        assert content.code_blocks[0].language == "go"
