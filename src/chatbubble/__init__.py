"""
chatbubble: a chat message bubble for terminal conversations.

Parses message bodies into plain text and fenced code, and drives a
bubble's panels through a small view controller. This package follows
Parnas's information hiding principles, where each module hides a
specific design decision.
"""

__version__ = "0.1.0"

from .content import (
    CodeBlockSegment,
    ContentSegment,
    InlineCode,
    MessageContent,
    PlainTextSegment,
    TextRun,
    parse_message,
)
from .message import (
    MessageInput,
    MessageView,
    MessageViewController,
    PanelState,
    Role,
    SourceRef,
)

__all__ = [
    "CodeBlockSegment",
    "ContentSegment",
    "InlineCode",
    "MessageContent",
    "MessageInput",
    "MessageView",
    "MessageViewController",
    "PanelState",
    "PlainTextSegment",
    "Role",
    "SourceRef",
    "TextRun",
    "parse_message",
]
