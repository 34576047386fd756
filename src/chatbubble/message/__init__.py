"""Message module for chatbubble.

Provides the inputs, panel state machine and view controller of a single
chat message bubble.
"""

from .controller import MessageViewController
from .effects import ScrollEffectRunner, ScrollReason, ScrollRequest, ScrollTarget
from .models import Conversation, MessageInput, MessageRecord, PanelState, Role, SourceRef
from .state import PanelTransition, toggle_context, toggle_learn_more
from .view import ContextPanel, MessageView, OptionsRow, ReasoningStepLine

__all__ = [
    "ContextPanel",
    "Conversation",
    "MessageInput",
    "MessageRecord",
    "MessageView",
    "MessageViewController",
    "OptionsRow",
    "PanelState",
    "PanelTransition",
    "ReasoningStepLine",
    "Role",
    "ScrollEffectRunner",
    "ScrollReason",
    "ScrollRequest",
    "ScrollTarget",
    "SourceRef",
    "toggle_context",
    "toggle_learn_more",
]
