"""Model entries stored in the chatwith configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

VALID_COMMANDS = ("help", "entry", "remove", "show", "list")


class ConfigError(ValueError):
    """Raised for malformed configuration lines or incomplete entries."""


@dataclass
class Entry:
    """A named shortcut to a model, with optional extra options."""

    name: str
    model: str
    options: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.name} {self.model} {' '.join(self.options)}"


def parse_config(text: str) -> list[Entry]:
    """Parse configuration text into entries, one per non-blank line."""
    entries = []
    for line in text.splitlines():
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) == 1:
            raise ConfigError(
                f"Invalid entry in config. Make sure to specify a model. Line:\n{line}"
            )
        name, model, *options = tokens
        if name in VALID_COMMANDS:
            raise ConfigError(
                "Invalid entry in config. Make sure the entry is not named after "
                f"a valid command. Line:\n{line}"
            )
        entries.append(Entry(name, model, options))
    return entries


def format_config(entries: list[Entry]) -> str:
    """Render entries in the configuration file format."""
    return "".join(f"{entry}\n" for entry in entries)


def load_config(path: Path | str) -> list[Entry]:
    """Read entries from *path*; a missing file yields no entries."""
    path = Path(path)
    if not path.exists():
        return []
    return parse_config(path.read_text())


def save_config(entries: list[Entry], path: Path | str) -> None:
    """Overwrite *path* with the given entries."""
    Path(path).write_text(format_config(entries))


def add_entry(args: list[str], config: list[Entry]) -> str:
    """Add an entry or update same-named ones in place; return a status message."""
    if len(args) < 2:
        raise ConfigError(
            "Incomplete entry given. Please provide at least a name and a model."
        )
    name, model, *options = args
    matches = [entry for entry in config if entry.name == name]
    if not matches:
        config.append(Entry(name, model, list(options)))
        return "Entry successfully added."
    for entry in matches:
        entry.model = model
        entry.options = list(options)
    if len(matches) > 1:
        return f"Updated {len(matches)} entries."
    return "Updated 1 entry."


def remove_entries(args: list[str], config: list[Entry]) -> tuple[list[Entry], int]:
    """Return the entries not named in *args* and how many were removed."""
    names = set(args)
    kept = [entry for entry in config if entry.name not in names]
    return kept, len(config) - len(kept)


def show_entries(args: list[str], config: list[Entry]) -> list[Entry]:
    """Return the entries whose name is among *args*, in config order."""
    names = set(args)
    return [entry for entry in config if entry.name in names]


def list_entries(config: list[Entry]) -> list[str]:
    """Return the lines describing every entry."""
    if not config:
        return ["No entries found in config file."]
    return [f"{len(config)} entries found in config file:", *map(str, config)]