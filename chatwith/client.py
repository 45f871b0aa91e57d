"""Streaming chat requests against a local model server."""

from __future__ import annotations

import json
import sys
import urllib.request
from typing import TextIO

from chatwith.conversation import Conversation

DEFAULT_URL = "http://localhost:11434/api/chat"

_GREY = "\x1b[90m"
_DEFAULT_COLOUR = "\x1b[39m"


class StreamPrinter:
    """Prints streamed response chunks and collects the visible answer.

    Text inside a ``<think>`` block is shown greyed out and is left out of
    the collected response.
    """

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.is_response = True
        self._parts: list[str] = []

    @property
    def response(self) -> str:
        return "".join(self._parts)

    def feed(self, chunk: bytes | str) -> None:
        """Handle one JSON object from the response stream."""
        if isinstance(chunk, bytes):
            chunk = chunk.decode("utf-8")
        data = json.loads(chunk)
        message = data.get("message") if isinstance(data, dict) else None
        if not isinstance(message, dict) or "content" not in message:
            print(
                "No value message.content in response json. Response is: "
                + json.dumps(data, separators=(",", ":"), ensure_ascii=False),
                file=self.err,
            )
            return

        output = json.dumps(message["content"], ensure_ascii=False).replace('"', "")
        newlines = output.count("\\n")
        if newlines:
            output = output.replace("\\n", "").replace("\\", "")

        if "<think>" in output:
            self.out.write(_GREY)
            self.is_response = False

        self.out.write(output)
        if self.is_response:
            self._parts.append(output)

        if "</think>" in output:
            self.out.write(_DEFAULT_COLOUR)
            self.is_response = True

        for _ in range(newlines):
            self.out.write("\n")
            if self.is_response:
                self._parts.append("\n")

        self.out.flush()


def send_message(
    conversation: Conversation, url: str = DEFAULT_URL, out: TextIO | None = None
) -> str:
    """Send the conversation, print the streamed reply and return it."""
    request = urllib.request.Request(
        url,
        data=conversation.to_json().encode("utf-8"),
        headers={"Content-Type": "application/json"},
        method="POST",
    )
    printer = StreamPrinter(out)
    with urllib.request.urlopen(request) as response:
        for line in response:
            if line.strip():
                printer.feed(line)
    return printer.response