"""Message content module for chatbubble.

Turns raw message text into fenced code blocks and plain text with
inline-code runs.
"""

from .models import (
    DEFAULT_LANGUAGE,
    CodeBlockSegment,
    ContentSegment,
    InlineCode,
    MessageContent,
    PlainTextSegment,
    RunKind,
    SegmentKind,
    TextRun,
)
from .scanner import ContentScanner, ScanState, parse_message

__all__ = [
    "DEFAULT_LANGUAGE",
    "CodeBlockSegment",
    "ContentScanner",
    "ContentSegment",
    "InlineCode",
    "MessageContent",
    "PlainTextSegment",
    "RunKind",
    "ScanState",
    "SegmentKind",
    "TextRun",
    "parse_message",
]
