"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Design Philosophy:
- Responses and requests are told apart by accent colour
- Paywalled content is dimmed behind its upgrade prompt
- Auxiliary panels sit directly under the bubble they belong to
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - Chat over Log
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Chat History Panel - Primary Focus Area
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus {
        border: round $primary;
    }
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 14;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    overflow-x: auto;
    scrollbar-gutter: stable;

    &:focus {
        border: round $warning;
    }
}

/* ============================================
   Message Bubble
   ============================================ */
.chat-message-container {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
}

.reasoning-step {
    height: auto;
    padding: 0 2;
    color: $text-muted;
}

.chat-message {
    width: 100%;
    height: auto;
    padding: 1 2;
    border-left: tall $success;
    background: $success 8%;

    & .message-header {
        color: $success;
        text-style: bold;
    }

    &:hover {
        background: $success 12%;
    }
}

/* AI responses - Purple accent */
.chat-message.ai-response {
    border-left: tall $secondary;
    background: $secondary 8%;

    & .message-header {
        color: $secondary;
    }

    &:hover {
        background: $secondary 12%;
    }
}

/* Waiting for the first streamed chunk */
.chat-message.loading-message {
    border-left: tall $warning;
}

.chat-message.blocked-message {
    border-left: tall $error;
}

.message-header {
    height: auto;
    padding: 0;
}

.message-container {
    height: auto;
    padding: 0;
    margin: 0;

    &.blocked {
        opacity: 30%;
        text-style: dim;
    }

    & LoadingIndicator {
        height: 1;
        color: $warning;
    }
}

.plain-text {
    height: auto;
    color: $foreground;
}

.code-block {
    height: auto;
    margin: 1 0;
    padding: 0 1;
    background: $surface;
    border: round $border;
    border-title-color: $accent;
    border-title-align: right;
}

/* ============================================
   Paywall Notice
   ============================================ */
.paywall {
    height: auto;
    padding: 1;
    margin-bottom: 1;
    background: $warning 12%;
    border: round $warning;

    & .paywall-text {
        text-style: bold;
        margin-bottom: 1;
    }
}

/* ============================================
   Options Row and Panels
   ============================================ */
.response-options {
    height: auto;
    margin-top: 1;
}

.option-button {
    min-width: 12;
    margin: 0 1 0 0;

    &.is-clicked {
        background: $primary;
        color: $background;
        border: tall $primary;
    }
}

.options-display {
    height: auto;
    margin: 0 0 0 2;
    padding: 0 1;
    background: $surface;
    border-left: tall $primary;
}

.context-source {
    height: auto;
    color: $foreground;

    &:hover {
        background: $primary 20%;
        text-style: underline;
    }
}

.context-empty {
    color: $text-muted;
}

.scroll-anchor {
    height: 0;
}

/* ============================================
   Notification Toasts
   ============================================ */
Toast {
    background: $surface;
    border: tall $border;
    padding: 0 1;

    &.-information {
        border: tall $primary;
        background: $primary 12%;
        color: $foreground;
    }

    &.-error {
        border: tall $error;
        background: $error 12%;
        color: $foreground;
    }

    &.-warning {
        border: tall $warning;
        background: $warning 12%;
        color: $foreground;
    }
}

/* ============================================
   Scrollbar Styling
   ============================================ */
* {
    scrollbar-background: $panel;
    scrollbar-color: $surface-lighten-1;
    scrollbar-color-hover: $primary 50%;
    scrollbar-color-active: $primary;
    scrollbar-size: 1 1;
}

/* ============================================
   Header and Footer
   ============================================ */
Header {
    background: $panel;
    color: $foreground;
    dock: top;
    height: 1;
}

Footer {
    background: $panel;
    height: auto;
}

/* ============================================
   Buttons
   ============================================ */
Button {
    min-width: 8;
    height: 3;
    border: tall $border;
    background: $surface;
    color: $foreground;

    &:hover {
        text-style: bold;
        background: $surface-lighten-1;
    }

    &:focus {
        border: tall $primary;
    }
}

Button.-warning {
    background: $warning;
    color: $background;
    border: tall $warning;

    &:hover {
        background: $warning-lighten-1;
        border: tall $warning-lighten-1;
    }
}
"""
