"""Scroll-into-view side effect.

Hides how and when a bubble scrolls itself into view:
- Only the last message of a conversation ever scrolls
- Requests are fire-and-forget; failures are reported, never raised
- Requests made while one is already scheduled are coalesced
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol


class ScrollReason(str, Enum):
    """Why a scroll was requested."""

    MOUNT = "mount"
    UPDATE = "update"
    PANEL_OPENED = "panel_opened"


@dataclass(frozen=True)
class ScrollRequest:
    """Description of a scroll the controller wants performed."""

    reason: ScrollReason
    is_last_message: bool


class ScrollTarget(Protocol):
    """Anything that can bring the end of a message into view."""

    def scroll_into_view(self) -> None: ...


class ScrollEffectRunner:
    """Performs scroll requests against an attached target.

    Example:
        runner = ScrollEffectRunner(scheduler=widget.call_after_refresh)
        runner.attach(anchor)
        runner.run(ScrollRequest(ScrollReason.MOUNT, is_last_message=True))
    """

    def __init__(
        self,
        target: ScrollTarget | None = None,
        scheduler: Callable[[Callable[[], None]], Any] | None = None,
    ) -> None:
        self._target = target
        self._scheduler = scheduler
        self._pending = False
        self._debug_callback: Any | None = None
        self.scroll_count = 0

    def set_debug_callback(self, callback: Any) -> None:
        """Set debug callback for logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Scroll", message)

    def attach(self, target: ScrollTarget | None) -> None:
        """Attach the scroll target (None detaches it)."""
        self._target = target

    def run(self, request: ScrollRequest) -> None:
        """Handle a scroll request.

        No-op unless the message is the last one and a target is attached.
        """
        if not request.is_last_message:
            return
        if self._target is None:
            self._debug("debug", f"No scroll target for {request.reason.value}")
            return
        if self._pending:
            return

        if self._scheduler is None:
            self._scroll()
            return

        self._pending = True
        try:
            self._scheduler(self._scroll)
        except Exception as e:
            self._pending = False
            self._debug("warning", f"Could not schedule scroll for {request.reason.value}: {e}")

    def _scroll(self) -> None:
        self._pending = False
        target = self._target
        if target is None:
            return
        try:
            target.scroll_into_view()
            self.scroll_count += 1
        except Exception as e:
            self._debug("warning", f"Scroll into view failed: {e}")
