"""Terminal UI module for chatbubble.

Provides Textual widgets that draw a MessageView, plus a small app that
hosts a conversation.

Module structure (Parnas principle - each module hides a design decision):
- config.py: Constants (log levels, code theme, labels)
- formatting.py: Segment to Rich renderable conversion
- widgets.py: Custom widgets (message bubble, panels, log panel)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette
- screens.py: Modal dialogs (upgrade confirmation)
- callbacks.py: Streaming integration (how bubbles receive chunks)
- app.py: Application orchestration
"""

from .app import ChatBubbleApp, run_textual_tui
from .callbacks import StreamCallback
from .config import LogLevel
from .widgets import ChatHistoryWidget, DebugPanel, MessageBubble

__all__ = [
    "ChatBubbleApp",
    "ChatHistoryWidget",
    "DebugPanel",
    "LogLevel",
    "MessageBubble",
    "StreamCallback",
    "run_textual_tui",
]
