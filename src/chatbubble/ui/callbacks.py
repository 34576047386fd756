"""Streaming callback for message bubbles.

Hides the details of how streamed text reaches a bubble.
Uses thread-safe methods to update UI from worker threads.
"""

import threading
from typing import TYPE_CHECKING, Any

from ..message import MessageInput
from .config import STREAM_BUFFER_THRESHOLD

if TYPE_CHECKING:
    from textual.app import App

    from .widgets import MessageBubble

STREAM_START = "__START__"
STREAM_END = "__END__"


class StreamCallback:
    """Feeds streamed chunks into a message bubble.

    Special chunks:
    - __START__: Beginning of streaming (text reset, message incomplete)
    - __END__: End of streaming (buffer flushed, message complete)
    - Other strings: Actual token content

    Chunks are buffered and pushed every ~STREAM_BUFFER_THRESHOLD characters.
    """

    def __init__(
        self,
        bubble: "MessageBubble",
        app: "App | None" = None,
        buffer_threshold: int = STREAM_BUFFER_THRESHOLD,
        debug_callback: Any | None = None,
    ) -> None:
        self.bubble = bubble
        self.app = app
        self._buffer_threshold = buffer_threshold
        self._debug_callback = debug_callback
        self._text = bubble.message.text
        self._stream_buffer: list[str] = []
        self._stream_chars_since_update = 0

    @property
    def text(self) -> str:
        """Text pushed to the bubble so far."""
        return self._text

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Stream", message)

    def _call_thread_safe(self, func: Any, *args: Any, **kwargs: Any) -> None:
        """Call a function in a thread-safe manner for UI updates."""
        if self.app is not None and self.app._thread_id != threading.get_ident():
            self.app.call_from_thread(func, *args, **kwargs)
        else:
            func(*args, **kwargs)

    def _push(self, is_complete: bool) -> None:
        message: MessageInput = self.bubble.message.model_copy(
            update={"text": self._text, "is_complete": is_complete}
        )
        self._call_thread_safe(self.bubble.update_message, message)

    def _flush(self) -> None:
        if self._stream_buffer:
            self._text += "".join(self._stream_buffer)
            self._stream_buffer = []
        self._stream_chars_since_update = 0

    def handle_stream_chunk(self, chunk: str) -> None:
        """Handle a streaming chunk."""
        if chunk == STREAM_START:
            self._text = ""
            self._stream_buffer = []
            self._stream_chars_since_update = 0
            self._debug("debug", "Stream started")
            self._push(is_complete=False)
            return

        if chunk == STREAM_END:
            self._flush()
            self._debug("debug", f"Stream ended ({len(self._text)} chars)")
            self._push(is_complete=True)
            return

        self._stream_buffer.append(chunk)
        self._stream_chars_since_update += len(chunk)

        if self._stream_chars_since_update >= self._buffer_threshold:
            self._flush()
            self._push(is_complete=False)
