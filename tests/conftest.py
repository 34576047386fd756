"""Pytest configuration and shared fixtures."""
import json

import pytest

from chatbubble.message import MessageInput, Role, SourceRef


@pytest.fixture
def sample_message_text():
    """Return a response body with inline code and two fenced blocks."""
    return (
        "Use `connect()` first:\n"
        "```python\n"
        "conn = connect()\n"
        "```\n"
        "Then query it:\n"
        "```\n"
        "SELECT 1;\n"
        "```\n"
        "Done."
    )


@pytest.fixture
def response_message(sample_message_text):
    """Return a finished response that is the last in its conversation."""
    return MessageInput(
        text=sample_message_text,
        role=Role.RESPONSE,
        is_complete=True,
        is_last_message=True,
        reasoning_steps={"Plan": "Find the connection helper", "Search": "db.py"},
        sources=(SourceRef(file_path="src/db.py"), SourceRef(file_path="src/query.py")),
    )


@pytest.fixture
def conversation_data():
    """Return a conversation as stored in a file."""
    return {
        "messages": [
            {"role": "response", "text": "Hi! Ask me about your code."},
            {"role": "request", "text": "How do I connect?"},
            {
                "role": "response",
                "text": "Call `connect()`:\n```python\nconn = connect()\n```",
                "reasoning_steps": {"Plan": "Look up connect"},
                "sources": [{"file_path": "src/db.py"}, {"file_path": "README.md"}],
            },
        ]
    }


@pytest.fixture
def conversation_file(tmp_path, conversation_data):
    """Create a temporary JSON conversation file."""
    path = tmp_path / "conversation.json"
    path.write_text(json.dumps(conversation_data))
    return path
