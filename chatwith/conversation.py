"""Conversation history and its on-disk format."""

from __future__ import annotations

import contextlib
import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

_ESCAPED_APOSTROPHE = "\\\\'"


class Role(Enum):
    USER = "user"
    ASSISTANT = "assistant"
    NONE = "none"

    def __str__(self) -> str:
        return self.value


@dataclass
class Message:
    role: Role
    content: str

    def __str__(self) -> str:
        return f"<{self.role}>\n{self.content}\n</{self.role}>\n"

    def to_json(self) -> str:
        """Serialise the message as a chat API message object."""
        return json.dumps(
            {"role": str(self.role), "content": self.content},
            separators=(",", ":"),
            ensure_ascii=False,
        )


@dataclass
class Conversation:
    model: str
    messages: list[Message] = field(default_factory=list)

    def to_json(self) -> str:
        """Serialise the conversation as a streaming chat request."""
        payload = {
            "model": self.model,
            "messages": [
                {"role": str(m.role), "content": m.content} for m in self.messages
            ],
            "stream": True,
        }
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


_TAGS = {
    "<user>": Role.USER,
    "</user>": Role.NONE,
    "<assistant>": Role.ASSISTANT,
    "</assistant>": Role.NONE,
}


def parse_conversation(model: str, text: str) -> Conversation:
    """Parse stored conversation text; lines of one role are concatenated."""
    conversation = Conversation(model)
    role = Role.NONE
    for line in text.splitlines():
        if line in _TAGS:
            role = _TAGS[line]
        elif role is not Role.NONE:
            messages = conversation.messages
            if messages and messages[-1].role is role:
                messages[-1].content += line
            else:
                messages.append(Message(role, line))
    return conversation


def format_conversation(conversation: Conversation) -> str:
    """Render a conversation in the stored format, escaping apostrophes."""
    return "".join(
        str(message).replace(_ESCAPED_APOSTROPHE, "'").replace("'", _ESCAPED_APOSTROPHE)
        for message in conversation.messages
    )


def conversation_path(config_dir: Path | str, model: str) -> Path:
    return Path(config_dir) / f"{model}.conv"


def load_conversation(config_dir: Path | str, model: str) -> Conversation:
    """Load the stored conversation for *model*, or an empty one."""
    path = conversation_path(config_dir, model)
    if not path.exists():
        return Conversation(model)
    return parse_conversation(model, path.read_text())


def save_conversation(conversation: Conversation, config_dir: Path | str) -> None:
    conversation_path(config_dir, conversation.model).write_text(
        format_conversation(conversation)
    )


def clear_conversation(config_dir: Path | str, model: str) -> None:
    """Empty the stored conversation for *model* if it exists."""
    with contextlib.suppress(OSError):
        with conversation_path(config_dir, model).open("r+") as handle:
            handle.truncate(0)