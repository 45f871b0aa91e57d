# chatwith

Chat with the models served by a local ollama instance, straight from the
terminal.

You give each model a short name (an *entry*). Then you talk to it by running
`chatwith <name> <message...>`. Each model's conversation is stored between
runs, so follow-up messages keep their context.

## Installation

```
pip install .
```

Chatting needs an ollama server that listens on `http://localhost:11434`.

## Usage

```
chatwith [command [args...]]
chatwith <entry> [options...] [messages...]
```

The command is case-insensitive. Running `chatwith` with no arguments shows
the help text.

Commands:

- `chatwith help`: show the help text.
- `chatwith entry <entry_name> <ollama_model_name> [options...]`: add a new
  entry. If entries with that name already exist, their model and options are
  updated.
- `chatwith remove <entry_name>...`: remove every entry with any of the given
  names and report how many were removed.
- `chatwith show <entry_name>...`: print the entries with any of the given
  names.
- `chatwith list`: list every entry.
- `chatwith <entry> <message...>`: join the arguments with spaces and send them
  as one message to the entry's model, together with the stored conversation.
  The reply streams to the terminal. Text inside a `<think>` block is shown
  dimmed and is not kept in the stored conversation.

Options when chatting:

- `-n`: as the first argument after the entry name, this clears the stored
  conversation for that model before the message is sent.

An entry cannot have the same name as a command. Such a line in the
configuration file is an error.

On an error (a malformed configuration line, an incomplete `entry`, a file
that cannot be written, a server that cannot be reached) `chatwith` prints
`Error: ...` to standard error and exits with status 1.

The program can also be started with `python -m chatwith.cli`.

## Example

```
chatwith entry qwen qwen3:8b
chatwith qwen What is the capital of France?
chatwith qwen And of Italy?
chatwith qwen -n Let us start over.
```

## Files

All files go in the `chatwith` directory of your user configuration
directory, which `platformdirs` finds for your platform (`~/.config/chatwith`
on Linux).

- `chatwith.cfg` holds the entries, one per line: a name, a model and any
  options, separated by whitespace. Blank lines are ignored.
- `<model>.conv` holds the conversation with one model. Each message is
  wrapped in `<user>` ... `</user>` or `<assistant>` ... `</assistant>` lines.
  Apostrophes are stored escaped.

`chatwith` does not create this directory. Create it before your first
`chatwith entry`.

## Using it as a library

- `chatwith.config`: `Entry`, `ConfigError`, `parse_config`, `format_config`,
  `load_config`, `save_config`, `add_entry`, `remove_entries`, `show_entries`,
  `list_entries`.
- `chatwith.conversation`: `Role`, `Message`, `Conversation` (with `to_json`
  giving the streaming chat request body), `parse_conversation`,
  `format_conversation`, `conversation_path`, `load_conversation`,
  `save_conversation`, `clear_conversation`.
- `chatwith.client`: `StreamPrinter`, which prints streamed response chunks
  and collects the reply, and `send_message(conversation, url, out)`, which
  posts a conversation and returns the reply. The default URL is
  `DEFAULT_URL`.
- `chatwith.cli`: `Query`, `parse_query`, `help_text`, `default_config_dir`,
  `run(query, config_dir)` and `main(argv)`.

## Limitations

- Each run sends one message. There is no interactive session.
- The options stored with an entry are kept in the configuration file but are
  not sent to the model.
- The command always talks to `http://localhost:11434`. Only
  `send_message` takes a different URL.
- Line breaks within one stored message are not kept. When a conversation is
  read back, the lines of a message are joined together.
- If the conversation file cannot be written after a reply, the reply is not
  saved and no error is shown.

## Running the tests

```
pip install .[test]
pytest
```