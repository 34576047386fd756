"""Main Textual TUI application.

Hosts a conversation of message bubbles and wires their collaborator
callbacks (upgrade prompt, file context) to the app.
"""

import asyncio
import contextlib

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..message import MessageInput
from .callbacks import STREAM_END, STREAM_START, StreamCallback
from .config import LogLevel
from .screens import UpgradePlanScreen
from .styles import APP_CSS
from .themes import DRACULA
from .widgets import ChatHistoryWidget, DebugPanel, MessageBubble

STREAM_CHUNK_SIZE = 8  # Characters per replayed chunk


class ChatBubbleApp(App):
    """Textual TUI showing a conversation."""

    CSS = APP_CSS
    TITLE = "chatbubble"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+l", "clear_log", "Clear Log"),
        Binding("ctrl+k", "clear_chat", "Clear Chat"),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
        Binding("ctrl+d", "toggle_debug", "Debug"),
    ]

    def __init__(
        self,
        messages: list[MessageInput] | None = None,
        log_level: str | None = None,
        code_theme: str | None = None,
        stream_last: bool = False,
        stream_delay: float = 0.03,
    ) -> None:
        super().__init__()
        self._messages = list(messages or [])
        self._log_level = log_level
        self._code_theme = code_theme
        self._stream_last = stream_last
        self._stream_delay = stream_delay
        self._debug_panel: DebugPanel | None = None
        self.file_context: str | None = None
        self.upgrade_requests = 0
        self.upgrades_confirmed = 0

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ChatHistoryWidget(
            id="chat-history",
            on_upgrade_plan=self._on_upgrade_plan,
            on_set_file_context=self._on_set_file_context,
            debug_callback=self._debug,
            code_theme=self._code_theme,
        )
        self._debug_panel = DebugPanel(id="debug-panel")
        yield self._debug_panel
        yield Footer()

    def _debug(self, level: str, component: str, message: str) -> None:
        """Route debug messages to the log panel."""
        if self._debug_panel is not None:
            self._debug_panel.route(level, component, message)

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(DRACULA)
        self.theme = DRACULA.name

        if self._log_level is not None:
            log_panel = self.query_one("#debug-panel", DebugPanel)
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        chat = self.query_one("#chat-history", ChatHistoryWidget)
        messages = self._messages
        streamed: MessageInput | None = None
        if self._stream_last and messages and messages[-1].is_response:
            streamed = messages[-1]
            messages = messages[:-1]

        for message in messages:
            chat.add_message(message)

        if streamed is not None:
            bubble = chat.add_message(streamed.model_copy(update={"text": "", "is_complete": False}))
            self._replay_stream(bubble, streamed.text)

    @work(exclusive=True)
    async def _replay_stream(self, bubble: MessageBubble, text: str) -> None:
        """Replay a finished response as a stream of small chunks."""
        callback = StreamCallback(bubble, app=self, debug_callback=self._debug)
        callback.handle_stream_chunk(STREAM_START)
        for start in range(0, len(text), STREAM_CHUNK_SIZE):
            await asyncio.sleep(self._stream_delay)
            callback.handle_stream_chunk(text[start:start + STREAM_CHUNK_SIZE])
        callback.handle_stream_chunk(STREAM_END)

    def _on_upgrade_plan(self) -> None:
        """Paywall upgrade action from any bubble."""
        self.upgrade_requests += 1

        def _handle(confirmed: bool | None) -> None:
            if confirmed:
                self.upgrades_confirmed += 1
                self._debug("info", "TUI", "Upgrade confirmed")
                self.notify("Upgrade requested", severity="information", timeout=3)
            else:
                self.notify("Upgrade cancelled", timeout=2)

        self.push_screen(UpgradePlanScreen(), callback=_handle)

    def _on_set_file_context(self, file_path: str) -> None:
        """A context source was activated in a bubble."""
        self.file_context = file_path
        self.sub_title = f"Context: {file_path}"
        self.notify(f"File context: {file_path}", timeout=2)

    def action_clear_log(self) -> None:
        """Clear the log panel."""
        self.query_one("#debug-panel", DebugPanel).clear()
        self.notify("Log cleared", timeout=2)

    def action_clear_chat(self) -> None:
        """Clear the chat history."""
        self.query_one("#chat-history", ChatHistoryWidget).clear_history()
        self.notify("Chat cleared", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last response to clipboard."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        response = chat.get_last_response()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")


async def run_textual_tui(
    messages: list[MessageInput],
    log_level: str | None = None,
    code_theme: str | None = None,
    stream_last: bool = False,
) -> None:
    """Run the Textual TUI.

    Args:
        messages: Conversation to show, in order
        log_level: Log level for panel (debug/info/warning/error), None to hide
        code_theme: Pygments style for code blocks
        stream_last: Replay the last response as a stream
    """
    app = ChatBubbleApp(
        messages=messages,
        log_level=log_level,
        code_theme=code_theme,
        stream_last=stream_last,
    )
    with contextlib.suppress(KeyboardInterrupt, asyncio.CancelledError):
        await app.run_async()
