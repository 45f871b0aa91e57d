"""Command line interface for chatting with local models."""

from __future__ import annotations

import contextlib
import sys
from dataclasses import dataclass, field
from pathlib import Path

import platformdirs

from chatwith.client import send_message
from chatwith.config import (
    ConfigError,
    add_entry,
    list_entries,
    load_config,
    remove_entries,
    save_config,
    show_entries,
)
from chatwith.conversation import (
    Message,
    Role,
    clear_conversation,
    load_conversation,
    save_conversation,
)

_HELP = """chatwith - easily chat with your ollama models inside the terminal

usage: chatwith [command [args...]]
usage: chatwith <entry> [options...] [messages...]

commands:
  help - show this help
  entry - add a new entry or update existing ones using "chatwith entry <entry_name> <ollama_model_name>"
  remove - remove existing entries using "chatwith remove <entry_name>"
  show - show all entries with names matching any of the given arguments
  list - list all currently existing entries
  <entry> - chat with one of your entries. all arguments are joined together and sent as a single message
  
options:
  -n - start a new conversation
"""


@dataclass
class Query:
    command: str
    args: list[str] = field(default_factory=list)


def parse_query(argv: list[str]) -> Query:
    """Build a query from arguments that follow the program name."""
    if not argv:
        return Query("help", [])
    return Query(argv[0].lower(), list(argv[1:]))


def help_text() -> str:
    return _HELP


def default_config_dir() -> Path:
    return Path(platformdirs.user_config_dir("chatwith", appauthor=False))


def _chat(query: Query, entries, config_dir: Path) -> None:
    entry = next((e for e in entries if e.name == query.command), None)
    if entry is None:
        print(f"No model with name {query.command} found in config file.")
        return
    model = entry.model
    args = query.args
    if args and args[0] == "-n":
        clear_conversation(config_dir, model)
        args = args[1:]
    conversation = load_conversation(config_dir, model)
    conversation.messages.append(Message(Role.USER, " ".join(args)))
    reply = send_message(conversation)
    conversation.messages.append(Message(Role.ASSISTANT, reply))
    with contextlib.suppress(OSError):
        save_conversation(conversation, config_dir)


def run(query: Query, config_dir: Path | str | None = None) -> None:
    """Execute a query against the configuration in *config_dir*."""
    if query.command == "help":
        print(help_text())
        return

    config_dir = Path(config_dir) if config_dir is not None else default_config_dir()
    cfg_path = config_dir / "chatwith.cfg"
    entries = load_config(cfg_path)

    if query.command == "entry":
        message = add_entry(query.args, entries)
        print(message)
        save_config(entries, cfg_path)
    elif query.command == "remove":
        entries, removed = remove_entries(query.args, entries)
        print(f"Removed {removed} entries from config file.")
        save_config(entries, cfg_path)
    elif query.command == "show":
        for entry in show_entries(query.args, entries):
            print(entry)
    elif query.command == "list":
        print("\n".join(list_entries(entries)))
    else:
        _chat(query, entries, config_dir)


def main(argv: list[str] | None = None) -> int:
    query = parse_query(sys.argv[1:] if argv is None else argv)
    try:
        run(query)
    except (ConfigError, OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())