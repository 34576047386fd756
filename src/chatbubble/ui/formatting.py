"""Text formatting utilities for the TUI.

Hides the details of turning parsed content segments into Rich renderables.
"""

from rich.syntax import Syntax
from rich.text import Text

from ..content import CodeBlockSegment, InlineCode, PlainTextSegment
from ..message import ReasoningStepLine
from .config import CODE_LINE_NUMBERS, CODE_THEME

INLINE_CODE_STYLE = "bold"
STEP_LABEL_STYLE = "bold"


def render_plain_text(segment: PlainTextSegment) -> Text:
    """Render a plain-text segment.

    Text runs are kept verbatim (whitespace preserved); inline code is shown
    bold and wrapped back in backticks.
    """
    result = Text(overflow="fold")
    for run in segment.runs:
        if isinstance(run, InlineCode):
            result.append(run.display_text, style=INLINE_CODE_STYLE)
        else:
            result.append(run.text)
    return result


def render_code_block(segment: CodeBlockSegment, theme: str = CODE_THEME) -> Syntax:
    """Render a fenced code block with syntax highlighting and line numbers.

    Unknown language tags fall back to plain text highlighting.
    """
    return Syntax(
        segment.code,
        segment.language,
        theme=theme,
        line_numbers=CODE_LINE_NUMBERS,
        word_wrap=True,
    )


def render_reasoning_step(step: ReasoningStepLine) -> Text:
    """Render a reasoning step as 'label: text'."""
    result = Text(overflow="fold")
    result.append(step.display_label, style=STEP_LABEL_STYLE)
    result.append(" ")
    result.append(step.text)
    return result
