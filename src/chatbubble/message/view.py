"""Render description of a message bubble.

A MessageView is what the controller hands to the presentation layer. It
says what to show, never how to draw it.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..content import ContentSegment
from .models import SourceRef


class ReasoningStepLine(BaseModel):
    """One labelled reasoning step shown above the bubble."""

    model_config = ConfigDict(frozen=True)

    label: str
    text: str

    @property
    def display_label(self) -> str:
        return f"{self.label}:"


class OptionsRow(BaseModel):
    """The Context / Learn more buttons under a finished response."""

    model_config = ConfigDict(frozen=True)

    context_active: bool = False
    learn_more_active: bool = False


class ContextPanel(BaseModel):
    """Source files listed under a response."""

    model_config = ConfigDict(frozen=True)

    sources: tuple[SourceRef, ...] = Field(default_factory=tuple)


class MessageView(BaseModel):
    """Everything the presentation layer draws for one message."""

    model_config = ConfigDict(frozen=True)

    reasoning_steps: tuple[ReasoningStepLine, ...] = Field(default_factory=tuple)
    bubble_classes: tuple[str, ...] = Field(
        default_factory=tuple,
        description="CSS classes of the bubble (ai-response, blocked-message, loading-message)"
    )
    content_classes: tuple[str, ...] = Field(
        default_factory=tuple,
        description="CSS classes of the content container (blocked)"
    )
    show_paywall: bool = False
    segments: tuple[ContentSegment, ...] = Field(default_factory=tuple)
    options: OptionsRow | None = None
    context: ContextPanel | None = None
    learn_more_open: bool = False
    scroll_anchor: bool = Field(
        default=False,
        description="True only for the last message of the conversation"
    )
