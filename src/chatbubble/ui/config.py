"""UI configuration constants.

Centralizes magic numbers and configuration values for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)


# Code block rendering
CODE_THEME = "dracula"  # Pygments style used for fenced code
CODE_LINE_NUMBERS = True

# Streaming configuration
STREAM_BUFFER_THRESHOLD = 50  # Characters before flushing stream buffer

# Scroll behaviour
SCROLL_ANIMATE = True  # Smooth scroll when a bubble brings itself into view

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"

# Labels
CONTEXT_LABEL = "Context"
LEARN_MORE_LABEL = "Learn more"
SOURCE_ICON = "\U0001f4c4"  # Page facing up
