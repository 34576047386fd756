"""Loader functions for CLI.

Centralizes reading conversation files and settings from environment
variables. Hides configuration details from command implementations.
"""

import json
import os
from pathlib import Path

import yaml

from ..message import Conversation, MessageInput
from ..ui.config import CODE_THEME

CONVERSATION_SUFFIXES = {".json", ".yaml", ".yml"}


def load_conversation(path: Path) -> list[MessageInput]:
    """Load a conversation file into render inputs.

    Args:
        path: JSON or YAML file with a top-level "messages" list

    Returns:
        Message inputs with first/last flags derived from position

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the format is unsupported or the content invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in CONVERSATION_SUFFIXES:
        raise ValueError(f"Unsupported conversation format: {path.suffix}")

    text = path.read_text(encoding="utf-8")
    data = json.loads(text) if suffix == ".json" else yaml.safe_load(text)
    if isinstance(data, list):
        data = {"messages": data}

    return Conversation.model_validate(data or {}).to_inputs()


def get_log_level(default: str | None = None) -> str | None:
    """Log panel level.

    Environment variables:
        CHATBUBBLE_LOG_LEVEL: debug, info, warning or error (unset hides the panel)
    """
    return os.getenv("CHATBUBBLE_LOG_LEVEL", default)


def get_code_theme() -> str:
    """Pygments style for code blocks.

    Environment variables:
        CHATBUBBLE_CODE_THEME: Any Pygments style name (default: dracula)
    """
    return os.getenv("CHATBUBBLE_CODE_THEME", CODE_THEME)
