"""Data models for a chat message and its conversation.

These models are the inputs of a message bubble. They are supplied fresh
for every render and never mutated by the view controller.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Who produced a message."""

    RESPONSE = "response"  # AI response
    REQUEST = "request"    # User message


class PanelState(str, Enum):
    """Which auxiliary panel of a bubble is open."""

    NONE = "none"
    CONTEXT = "context"
    LEARN_MORE = "learn_more"


class SourceRef(BaseModel):
    """A source file backing a response."""

    model_config = ConfigDict(frozen=True)

    file_path: str = Field(description="Path or identifier of the source file")


class MessageInput(BaseModel):
    """Everything a message bubble needs to render once."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(default="", description="Raw message body")
    role: Role = Field(default=Role.REQUEST)
    is_complete: bool = Field(default=True, description="False while streaming")
    is_paywalled: bool = Field(default=False)
    is_first_message: bool = Field(default=False)
    is_last_message: bool = Field(default=False)
    reasoning_steps: dict[str, str] = Field(
        default_factory=dict,
        description="Step label -> step text, in display order"
    )
    sources: tuple[SourceRef, ...] = Field(default_factory=tuple)

    @property
    def is_response(self) -> bool:
        return self.role == Role.RESPONSE


class MessageRecord(BaseModel):
    """A message as stored in a conversation file.

    Position flags are not stored; they follow from the record's place in
    the conversation.
    """

    model_config = ConfigDict(extra="forbid")

    role: Role
    text: str = ""
    is_complete: bool = True
    is_paywalled: bool = False
    reasoning_steps: dict[str, str] = Field(default_factory=dict)
    sources: list[SourceRef] = Field(default_factory=list)


class Conversation(BaseModel):
    """An ordered list of messages."""

    messages: list[MessageRecord] = Field(default_factory=list)

    def to_inputs(self) -> list[MessageInput]:
        """Build render inputs with first/last flags derived from position.

        Returns:
            One MessageInput per record, in conversation order
        """
        last_index = len(self.messages) - 1
        return [
            MessageInput(
                text=record.text,
                role=record.role,
                is_complete=record.is_complete,
                is_paywalled=record.is_paywalled,
                is_first_message=index == 0,
                is_last_message=index == last_index,
                reasoning_steps=dict(record.reasoning_steps),
                sources=tuple(record.sources),
            )
            for index, record in enumerate(self.messages)
        ]
