"""View controller for a single chat message.

Owns the panel state of one bubble, derives loading/options/paywall flags
from the current MessageInput and builds the MessageView to draw.
"""

from collections.abc import Callable
from typing import Any

from ..content import parse_message
from .effects import ScrollEffectRunner, ScrollReason, ScrollRequest
from .models import MessageInput, PanelState
from .state import PanelTransition, toggle_context, toggle_learn_more
from .view import ContextPanel, MessageView, OptionsRow, ReasoningStepLine


class MessageViewController:
    """Controller behind one message bubble.

    Panel state belongs to this instance only and survives input updates.
    Scroll requests go through a ScrollEffectRunner so transitions stay
    testable without a UI.
    """

    def __init__(
        self,
        message: MessageInput,
        on_upgrade_plan: Callable[[], Any] | None = None,
        on_set_file_context: Callable[[str], Any] | None = None,
        scroll_runner: ScrollEffectRunner | None = None,
        debug_callback: Any | None = None,
    ) -> None:
        self._message = message
        self._panel = PanelState.NONE
        self._on_upgrade_plan = on_upgrade_plan
        self._on_set_file_context = on_set_file_context
        self._scroll_runner = scroll_runner or ScrollEffectRunner()
        self._debug_callback: Any | None = None
        if debug_callback is not None:
            self.set_debug_callback(debug_callback)

    def set_debug_callback(self, callback: Any) -> None:
        """Set debug callback for logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback
        self._scroll_runner.set_debug_callback(callback)

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Bubble", message)

    @property
    def message(self) -> MessageInput:
        return self._message

    @property
    def panel_state(self) -> PanelState:
        return self._panel

    @property
    def scroll_runner(self) -> ScrollEffectRunner:
        return self._scroll_runner

    # Lifecycle

    def mount(self) -> None:
        """Called once the bubble is on screen."""
        self._request_scroll(ScrollReason.MOUNT)

    def update(self, message: MessageInput) -> None:
        """Replace the input (e.g. a new streamed chunk arrived)."""
        self._message = message
        self._request_scroll(ScrollReason.UPDATE)

    # Panel toggles

    def toggle_context(self) -> PanelState:
        """Open or close the Context panel. Returns the new state."""
        return self._apply(toggle_context(self._panel, self._message.is_last_message))

    def toggle_learn_more(self) -> PanelState:
        """Open or close the Learn more panel. Returns the new state."""
        return self._apply(toggle_learn_more(self._panel, self._message.is_last_message))

    def _apply(self, transition: PanelTransition) -> PanelState:
        self._debug("debug", f"Panel {self._panel.value} -> {transition.state.value}")
        self._panel = transition.state
        if transition.should_scroll:
            self._request_scroll(ScrollReason.PANEL_OPENED)
        return self._panel

    def _request_scroll(self, reason: ScrollReason) -> None:
        self._scroll_runner.run(ScrollRequest(reason, self._message.is_last_message))

    # Derived flags

    @property
    def is_loading(self) -> bool:
        """A response with no text yet that is still streaming."""
        message = self._message
        return message.is_response and message.text == "" and not message.is_complete

    @property
    def should_show_options(self) -> bool:
        """Options are only offered on finished responses after the first message."""
        message = self._message
        return (
            message.is_response
            and not self.is_loading
            and not message.is_first_message
            and message.is_complete
        )

    @property
    def should_show_paywall(self) -> bool:
        """Paywalled messages show the upgrade prompt once complete."""
        return self._message.is_paywalled and self._message.is_complete

    # Collaborator callbacks

    def activate_source(self, file_path: str) -> None:
        """A source entry in the Context panel was activated."""
        if self._on_set_file_context is None:
            self._debug("debug", f"No file context handler for {file_path}")
            return
        self._debug("info", f"Set file context: {file_path}")
        self._on_set_file_context(file_path)

    def upgrade_plan(self) -> None:
        """The paywall's upgrade action was triggered."""
        if self._on_upgrade_plan is None:
            self._debug("debug", "No upgrade handler")
            return
        self._debug("info", "Upgrade plan requested")
        self._on_upgrade_plan()

    # Rendering

    def css_classes(self) -> tuple[str, ...]:
        """Classes of the bubble itself."""
        classes = []
        if self._message.is_response:
            classes.append("ai-response")
        if self._message.is_paywalled:
            classes.append("blocked-message")
        if self.is_loading:
            classes.append("loading-message")
        return tuple(classes)

    def render(self) -> MessageView:
        """Build the render description for the current input and state."""
        message = self._message

        options = None
        if self.should_show_options:
            options = OptionsRow(
                context_active=self._panel == PanelState.CONTEXT,
                learn_more_active=self._panel == PanelState.LEARN_MORE,
            )

        context = None
        if self._panel == PanelState.CONTEXT:
            context = ContextPanel(sources=message.sources)

        return MessageView(
            reasoning_steps=tuple(
                ReasoningStepLine(label=label, text=text)
                for label, text in message.reasoning_steps.items()
            ),
            bubble_classes=self.css_classes(),
            content_classes=("blocked",) if message.is_paywalled else (),
            show_paywall=self.should_show_paywall,
            segments=tuple(parse_message(message.text)),
            options=options,
            context=context,
            learn_more_open=self._panel == PanelState.LEARN_MORE,
            scroll_anchor=message.is_last_message,
        )
