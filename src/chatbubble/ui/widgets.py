"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Message bubble composition from a MessageView
- Code block and inline code rendering
- Options row, context panel and paywall notice
- Scroll anchor behaviour
- Chat history and log rendering
"""

from collections.abc import Callable
from typing import Any

from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.widgets import Button, LoadingIndicator, RichLog, Static

from ..content import CodeBlockSegment, ContentSegment, MessageContent, PlainTextSegment
from ..message import (
    ContextPanel,
    MessageInput,
    MessageViewController,
    OptionsRow,
    PanelState,
    ReasoningStepLine,
    ScrollEffectRunner,
)
from .config import (
    CODE_THEME,
    CONTEXT_LABEL,
    LEARN_MORE_LABEL,
    LOG_TIMESTAMP_FORMAT,
    SCROLL_ANIMATE,
    SOURCE_ICON,
    LogLevel,
)
from .formatting import render_code_block, render_plain_text, render_reasoning_step


class ClickableMessage(Vertical):
    """A chat message container that copies content when clicked.

    Clicking anywhere on the message copies the raw content to the system
    clipboard, falling back to Textual's OSC 52 if pyperclip is unavailable.
    """

    def __init__(self, content: str = "", *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._content = content

    def get_copy_text(self) -> str:
        """Text placed on the clipboard."""
        return self._content

    def on_click(self, event: Click) -> None:
        """Copy message content to clipboard when clicked."""
        event.stop()
        text = self.get_copy_text()
        if not text.strip():
            return
        try:
            import pyperclip
            pyperclip.copy(text)
            self.app.notify("Copied to clipboard", timeout=2)
        except Exception:
            self.app.copy_to_clipboard(text)
            self.app.notify("Copied (terminal)", timeout=2)


class ReasoningStep(Static):
    """A 'label: text' line shown above a response."""

    def __init__(self, step: ReasoningStepLine, **kwargs) -> None:
        super().__init__(render_reasoning_step(step), classes="reasoning-step", **kwargs)
        self.step = step


class PlainTextView(Static):
    """Plain text with bold inline code."""

    def __init__(self, segment: PlainTextSegment, **kwargs) -> None:
        super().__init__(render_plain_text(segment), classes="plain-text", **kwargs)
        self.segment = segment


class CodeBlockView(Static):
    """Syntax highlighted code block with line numbers."""

    def __init__(self, segment: CodeBlockSegment, theme: str | None = None, **kwargs) -> None:
        super().__init__(render_code_block(segment, theme or CODE_THEME), classes="code-block", **kwargs)
        self.segment = segment
        self.border_title = segment.language


class PaywallMessage(Vertical):
    """Upgrade prompt shown over a paywalled response."""

    class UpgradeRequested(Message):
        """Posted when the upgrade button is pressed."""

    def compose(self):
        yield Static("This response is available on a paid plan.", classes="paywall-text")
        yield Button("Upgrade plan", id="upgrade-btn", variant="warning")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "upgrade-btn":
            event.stop()
            self.post_message(self.UpgradeRequested())


class OptionsRowView(Horizontal):
    """Context / Learn more buttons under a finished response."""

    def __init__(self, options: OptionsRow, **kwargs) -> None:
        super().__init__(classes="response-options", **kwargs)
        self.options = options

    def compose(self):
        context = Button(CONTEXT_LABEL, id="option-context", classes="option-button")
        if self.options.context_active:
            context.add_class("is-clicked")
        yield context

        learn_more = Button(LEARN_MORE_LABEL, id="option-learn-more", classes="option-button")
        if self.options.learn_more_active:
            learn_more.add_class("is-clicked")
        yield learn_more


class ContextSourceEntry(Static):
    """A clickable source file in the Context panel."""

    class Activated(Message):
        """Posted when the entry is clicked."""

        def __init__(self, file_path: str) -> None:
            super().__init__()
            self.file_path = file_path

    def __init__(self, file_path: str, **kwargs) -> None:
        super().__init__(f"{SOURCE_ICON} {file_path}", classes="context-source", markup=False, **kwargs)
        self.file_path = file_path

    def on_click(self, event: Click) -> None:
        event.stop()
        self.post_message(self.Activated(self.file_path))


class ContextPanelView(Vertical):
    """List of sources backing a response."""

    def __init__(self, panel: ContextPanel, **kwargs) -> None:
        super().__init__(classes="options-display", **kwargs)
        self.panel = panel

    def compose(self):
        if not self.panel.sources:
            yield Static("No sources", classes="context-empty")
        for source in self.panel.sources:
            yield ContextSourceEntry(source.file_path)


class ScrollAnchor(Static):
    """Zero-height marker at the end of the last message."""

    def __init__(self, **kwargs) -> None:
        super().__init__("", classes="scroll-anchor", **kwargs)

    def scroll_into_view(self) -> None:
        """Bring the end of the message into view."""
        if self.is_mounted:
            self.scroll_visible(animate=SCROLL_ANIMATE)


class MessageBubble(ClickableMessage):
    """A single chat message: reasoning steps, content, options and panels.

    The bubble is redrawn from its controller's MessageView whenever the
    input changes or a panel is toggled.
    """

    def __init__(
        self,
        message: MessageInput,
        on_upgrade_plan: Callable[[], Any] | None = None,
        on_set_file_context: Callable[[str], Any] | None = None,
        debug_callback: Any | None = None,
        code_theme: str | None = None,
        **kwargs,
    ) -> None:
        role_class = "assistant-message" if message.is_response else "user-message"
        super().__init__(message.text, classes=f"chat-message-container {role_class}", **kwargs)
        self._code_theme = code_theme
        self._controller = MessageViewController(
            message,
            on_upgrade_plan=on_upgrade_plan,
            on_set_file_context=on_set_file_context,
            scroll_runner=ScrollEffectRunner(scheduler=self.call_after_refresh),
            debug_callback=debug_callback,
        )

    @property
    def controller(self) -> MessageViewController:
        return self._controller

    @property
    def message(self) -> MessageInput:
        return self._controller.message

    def get_copy_text(self) -> str:
        """Message body with fences and inline backticks restored."""
        return MessageContent.from_text(self._controller.message.text).to_display_text()

    def compose(self):
        view = self._controller.render()
        message = self._controller.message

        for step in view.reasoning_steps:
            yield ReasoningStep(step)

        with Vertical(classes=" ".join(("chat-message", *view.bubble_classes))):
            header = "< Assistant" if message.is_response else "> You"
            yield Static(header, classes="message-header", markup=False)
            if view.show_paywall:
                yield PaywallMessage(classes="paywall")
            with Vertical(classes=" ".join(("message-container", *view.content_classes))):
                if "loading-message" in view.bubble_classes:
                    yield LoadingIndicator()
                for segment in view.segments:
                    yield self._segment_widget(segment)
            if view.options is not None:
                yield OptionsRowView(view.options)

        if view.context is not None:
            yield ContextPanelView(view.context)

        if view.scroll_anchor:
            anchor = ScrollAnchor()
            self._controller.scroll_runner.attach(anchor)
            yield anchor
        else:
            self._controller.scroll_runner.attach(None)

    def _segment_widget(self, segment: ContentSegment) -> Static:
        if isinstance(segment, CodeBlockSegment):
            return CodeBlockView(segment, theme=self._code_theme)
        return PlainTextView(segment)

    def on_mount(self) -> None:
        self._controller.mount()

    def update_message(self, message: MessageInput) -> None:
        """Replace the message input and redraw."""
        self._controller.update(message)
        self.refresh(recompose=True)

    def toggle_context(self) -> PanelState:
        state = self._controller.toggle_context()
        self.refresh(recompose=True)
        return state

    def toggle_learn_more(self) -> PanelState:
        state = self._controller.toggle_learn_more()
        self.refresh(recompose=True)
        return state

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "option-context":
            event.stop()
            self.toggle_context()
        elif event.button.id == "option-learn-more":
            event.stop()
            self.toggle_learn_more()

    def on_context_source_entry_activated(self, event: ContextSourceEntry.Activated) -> None:
        event.stop()
        self._controller.activate_source(event.file_path)

    def on_paywall_message_upgrade_requested(self, event: PaywallMessage.UpgradeRequested) -> None:
        event.stop()
        self._controller.upgrade_plan()


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def log(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Bubble, Scroll, Stream)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        from datetime import datetime
        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)

        level_colors = {
            LogLevel.DEBUG: "dim white",
            LogLevel.INFO: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
        }
        level_color = level_colors.get(level, "white")
        level_name = LogLevel.name(level)

        component_colors = {
            "TUI": "cyan",
            "Bubble": "magenta",
            "Scroll": "bright_blue",
            "Stream": "green",
        }
        comp_color = component_colors.get(component, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{level_name:<5}[/] "
            f"[{comp_color}]\\[{component}][/] {message}"
        )

    def debug(self, component: str, message: str) -> None:
        """Log a DEBUG level message."""
        self.log(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        """Log an INFO level message."""
        self.log(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        """Log a WARNING level message."""
        self.log(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        """Log an ERROR level message."""
        self.log(component, message, LogLevel.ERROR)

    def route(self, level: str, component: str, message: str) -> None:
        """Debug callback entry point: Callable(level, component, message)."""
        self.log(component, message, LogLevel.from_string(level))

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True


class ChatHistoryWidget(VerticalScroll):
    """Scrollable conversation of message bubbles."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"
    ALLOW_MAXIMIZE = True

    def __init__(
        self,
        *args,
        on_upgrade_plan: Callable[[], Any] | None = None,
        on_set_file_context: Callable[[str], Any] | None = None,
        debug_callback: Any | None = None,
        code_theme: str | None = None,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._on_upgrade_plan = on_upgrade_plan
        self._on_set_file_context = on_set_file_context
        self._debug_callback = debug_callback
        self._code_theme = code_theme
        self._bubbles: list[MessageBubble] = []

    @property
    def bubbles(self) -> list[MessageBubble]:
        return list(self._bubbles)

    def add_message(self, message: MessageInput) -> MessageBubble:
        """Append a message; it becomes the last message of the conversation."""
        if self._bubbles:
            previous = self._bubbles[-1]
            if previous.message.is_last_message:
                previous.update_message(previous.message.model_copy(update={"is_last_message": False}))

        message = message.model_copy(update={
            "is_first_message": not self._bubbles,
            "is_last_message": True,
        })
        bubble = MessageBubble(
            message,
            on_upgrade_plan=self._on_upgrade_plan,
            on_set_file_context=self._on_set_file_context,
            debug_callback=self._debug_callback,
            code_theme=self._code_theme,
        )
        self._bubbles.append(bubble)
        self.mount(bubble)
        self.border_subtitle = f"{len(self._bubbles)} messages"
        return bubble

    def get_last_response(self) -> str | None:
        """Get the text of the last response."""
        for bubble in reversed(self._bubbles):
            if bubble.message.is_response:
                return bubble.get_copy_text()
        return None

    def clear_history(self) -> None:
        """Remove all bubbles."""
        self._bubbles.clear()
        self.remove_children()
        self.border_subtitle = "Conversation history"
