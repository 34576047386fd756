"""Data models for parsed message content.

These models describe the structure of a message body after fence and
inline-code extraction, independent of how it is rendered.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LANGUAGE = "text"


class SegmentKind(str, Enum):
    """Kind of a top-level content segment."""

    PLAIN_TEXT = "plain_text"
    CODE_BLOCK = "code_block"


class RunKind(str, Enum):
    """Kind of a run inside a plain-text segment."""

    TEXT = "text"
    INLINE_CODE = "inline_code"


class TextRun(BaseModel):
    """A run of ordinary text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[RunKind.TEXT] = RunKind.TEXT
    text: str = Field(default="", description="Text with one leading newline stripped")

    @property
    def display_text(self) -> str:
        return self.text


class InlineCode(BaseModel):
    """A span wrapped in single backticks."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[RunKind.INLINE_CODE] = RunKind.INLINE_CODE
    code: str = Field(description="Code between the backticks")
    closed: bool = Field(
        default=True,
        description="False if the closing backtick was missing"
    )

    @property
    def display_text(self) -> str:
        """Code wrapped back in backticks, as shown to the reader."""
        return f"`{self.code}`"


Run = Annotated[TextRun | InlineCode, Field(discriminator="kind")]


class PlainTextSegment(BaseModel):
    """Text between code fences, split into text and inline-code runs."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[SegmentKind.PLAIN_TEXT] = SegmentKind.PLAIN_TEXT
    runs: tuple[Run, ...] = Field(default=(TextRun(),))

    @property
    def display_text(self) -> str:
        return "".join(run.display_text for run in self.runs)


class CodeBlockSegment(BaseModel):
    """A fenced code block."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[SegmentKind.CODE_BLOCK] = SegmentKind.CODE_BLOCK
    language: str = Field(default=DEFAULT_LANGUAGE, description="Language tag")
    code: str = Field(default="", description="Trimmed code body")
    closed: bool = Field(
        default=True,
        description="False if the input ended before a closing fence"
    )

    @property
    def display_text(self) -> str:
        """Block re-fenced with the fences on their own lines.

        The default language is written without a tag, so an explicit
        `text` tag and one-line blocks do not survive the round trip.
        """
        tag = "" if self.language == DEFAULT_LANGUAGE else self.language
        return f"```{tag}\n{self.code}\n```"


ContentSegment = Annotated[PlainTextSegment | CodeBlockSegment, Field(discriminator="kind")]


class MessageContent(BaseModel):
    """Ordered segments of a parsed message body."""

    model_config = ConfigDict(frozen=True)

    segments: tuple[ContentSegment, ...] = Field(default_factory=tuple)

    @classmethod
    def from_text(cls, raw: str) -> "MessageContent":
        """Parse raw message text into content."""
        from .scanner import parse_message

        return cls(segments=tuple(parse_message(raw)))

    @property
    def code_blocks(self) -> list[CodeBlockSegment]:
        """All fenced code blocks, in order."""
        return [s for s in self.segments if isinstance(s, CodeBlockSegment)]

    def to_display_text(self) -> str:
        """Rebuild a readable text form with fences and backticks restored.

        The result is normalised and need not equal the raw input. Code
        bodies come back trimmed and text after a block starts on its own line.
        """
        parts = []
        for segment in self.segments:
            piece = segment.display_text
            if parts and piece and isinstance(segment, PlainTextSegment):
                piece = "\n" + piece
            parts.append(piece)
        return "".join(parts)
