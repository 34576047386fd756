"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

The palette matches the Pygments "dracula" style used for code blocks, so
highlighted code sits naturally inside the bubbles.
"""

from textual.theme import Theme

DRACULA = Theme(
    name="chatbubble-dracula",
    primary="#bd93f9",      # Purple - main accent
    secondary="#ff79c6",    # Pink - AI responses
    accent="#f1fa8c",       # Yellow - highlights, code language tags
    foreground="#f8f8f2",
    background="#21222c",
    success="#50fa7b",      # Green - user messages
    warning="#ffb86c",      # Orange - loading, paywall
    error="#ff5555",
    surface="#282a36",      # Same as the code block background
    panel="#1e1f29",
    dark=True,
    variables={
        "border": "#44475a",
        "border-blurred": "#343746",

        "scrollbar": "#343746",
        "scrollbar-hover": "#44475a",
        "scrollbar-active": "#bd93f9",
        "scrollbar-background": "#1e1f29",

        "footer-foreground": "#f8f8f2",
        "footer-background": "#21222c",
        "footer-key-foreground": "#f1fa8c",
        "footer-key-background": "#44475a",

        "text-muted": "#6272a4",  # Dracula comment colour
        "text-disabled": "#44475a",

        "button-foreground": "#f8f8f2",
        "button-color-foreground": "#21222c",
        "button-focus-text-style": "bold reverse",
    },
)
