"""Pure panel transitions.

The Context and Learn more panels are mutually exclusive. A transition
returns the next state and whether the bubble should scroll into view; the
scroll itself is performed elsewhere.
"""

from dataclasses import dataclass

from .models import PanelState


@dataclass(frozen=True)
class PanelTransition:
    """Result of a toggle."""

    state: PanelState
    should_scroll: bool = False


def _toggle(current: PanelState, target: PanelState, is_last_message: bool) -> PanelTransition:
    if current == target:
        return PanelTransition(PanelState.NONE)
    # Opening a panel closes the other one
    return PanelTransition(target, should_scroll=is_last_message)


def toggle_context(current: PanelState, is_last_message: bool = False) -> PanelTransition:
    """Open or close the Context panel."""
    return _toggle(current, PanelState.CONTEXT, is_last_message)


def toggle_learn_more(current: PanelState, is_last_message: bool = False) -> PanelTransition:
    """Open or close the Learn more panel."""
    return _toggle(current, PanelState.LEARN_MORE, is_last_message)
