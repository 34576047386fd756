"""Single-pass scanner for message content.

Hidden design decisions:
- Fences (three backticks) take precedence over single backticks
- Fences are matched left to right without overlap
- Every fence toggles between plain text and a code block, so the output
  always holds one more segment than there are fences
- Unclosed fences and backticks keep their content (marked closed=False)
"""

import re
from enum import Enum

from .models import (
    DEFAULT_LANGUAGE,
    CodeBlockSegment,
    ContentSegment,
    InlineCode,
    PlainTextSegment,
    TextRun,
)

FENCE = "```"
BACKTICK = "`"

# Whole first line of a block, ASCII letters only
LANGUAGE_TAG_RE = re.compile(r"[a-zA-Z]+")

# Characters trimmed from both ends of a code body: ECMAScript white space
# and line terminators. Unlike str.strip() this leaves \x1c-\x1f and \x85
# in place and removes the byte order mark.
TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


class ScanState(Enum):
    """Scanner states."""

    IN_PLAIN_TEXT = "plain_text"
    IN_INLINE_CODE = "inline_code"
    IN_LANGUAGE_TAG = "language_tag"
    IN_CODE_BLOCK = "code_block"


class ContentScanner:
    """Scans raw message text into content segments.

    A scanner instance is single-use; call ``parse_message`` instead of
    driving it directly.
    """

    def __init__(self, raw: str) -> None:
        self._raw = raw
        self._pos = 0
        self._state = ScanState.IN_PLAIN_TEXT
        self._segments: list[ContentSegment] = []
        self._runs: list[TextRun | InlineCode] = []
        self._buffer = ""
        self._language = DEFAULT_LANGUAGE

    def scan(self) -> list[ContentSegment]:
        """Run the scanner to the end of input."""
        raw = self._raw
        while self._pos < len(raw):
            if self._state is ScanState.IN_CODE_BLOCK:
                self._scan_code_block()
            elif self._state is ScanState.IN_LANGUAGE_TAG:
                self._scan_language_tag()
            else:
                self._scan_text()
        self._finish()
        return self._segments

    # Per-state steps. Each consumes input up to and including the next
    # character that can change state.

    def _scan_text(self) -> None:
        end = self._raw.find(BACKTICK, self._pos)
        if end == -1:
            self._buffer += self._raw[self._pos:]
            self._pos = len(self._raw)
            return

        self._buffer += self._raw[self._pos:end]
        if self._raw.startswith(FENCE, end):
            self._close_plain_text(closed=False)
            self._state = ScanState.IN_LANGUAGE_TAG
            self._pos = end + len(FENCE)
            return

        if self._state is ScanState.IN_PLAIN_TEXT:
            self._flush_text_run()
            self._state = ScanState.IN_INLINE_CODE
        else:
            self._flush_inline_code(closed=True)
            self._state = ScanState.IN_PLAIN_TEXT
        self._pos = end + len(BACKTICK)

    def _scan_language_tag(self) -> None:
        newline = self._raw.find("\n", self._pos)
        fence = self._raw.find(FENCE, self._pos)

        if fence != -1 and (newline == -1 or fence < newline):
            # Block without a line break: the whole block is the tag line
            self._buffer += self._raw[self._pos:fence]
            self._resolve_language_tag(has_newline=False)
            self._close_code_block(closed=True)
            self._pos = fence + len(FENCE)
            return

        if newline == -1:
            self._buffer += self._raw[self._pos:]
            self._pos = len(self._raw)
            return

        self._buffer += self._raw[self._pos:newline]
        self._resolve_language_tag(has_newline=True)
        self._state = ScanState.IN_CODE_BLOCK
        self._pos = newline + 1

    def _scan_code_block(self) -> None:
        fence = self._raw.find(FENCE, self._pos)
        if fence == -1:
            self._buffer += self._raw[self._pos:]
            self._pos = len(self._raw)
            return

        self._buffer += self._raw[self._pos:fence]
        self._close_code_block(closed=True)
        self._pos = fence + len(FENCE)

    # Transitions

    def _resolve_language_tag(self, has_newline: bool) -> None:
        """Decide whether the buffered first line is a language tag."""
        line = self._buffer
        if LANGUAGE_TAG_RE.fullmatch(line):
            self._language = line
            self._buffer = ""
        else:
            self._language = DEFAULT_LANGUAGE
            if has_newline:
                self._buffer = line + "\n"

    def _flush_text_run(self) -> None:
        text = self._buffer
        if text.startswith("\n"):
            text = text[1:]
        self._runs.append(TextRun(text=text))
        self._buffer = ""

    def _flush_inline_code(self, closed: bool) -> None:
        self._runs.append(InlineCode(code=self._buffer, closed=closed))
        self._buffer = ""

    def _close_plain_text(self, closed: bool) -> None:
        # An inline span still open at a fence or at the end of input
        # keeps its content.
        if self._state is ScanState.IN_INLINE_CODE:
            self._flush_inline_code(closed=closed)
        else:
            self._flush_text_run()
        self._segments.append(PlainTextSegment(runs=tuple(self._runs)))
        self._runs = []

    def _close_code_block(self, closed: bool) -> None:
        self._segments.append(
            CodeBlockSegment(
                language=self._language,
                code=self._buffer.strip(TRIM_CHARS),
                closed=closed,
            )
        )
        self._buffer = ""
        self._language = DEFAULT_LANGUAGE
        self._state = ScanState.IN_PLAIN_TEXT

    def _finish(self) -> None:
        if self._state is ScanState.IN_LANGUAGE_TAG:
            self._resolve_language_tag(has_newline=False)
            self._close_code_block(closed=False)
        elif self._state is ScanState.IN_CODE_BLOCK:
            self._close_code_block(closed=False)
        else:
            self._close_plain_text(closed=False)


def parse_message(raw: str) -> list[ContentSegment]:
    """Parse raw message text into ordered content segments.

    Plain-text segments alternate with fenced code blocks. Plain text is
    further split into text runs and inline-code runs. Never raises:
    unclosed fences and backticks are kept as trailing code.

    Args:
        raw: Raw message body

    Returns:
        List of PlainTextSegment and CodeBlockSegment, in input order
    """
    return ContentScanner(raw).scan()
