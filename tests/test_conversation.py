import json

from chatwith.conversation import (
    Conversation,
    Message,
    Role,
    clear_conversation,
    conversation_path,
    format_conversation,
    load_conversation,
    parse_conversation,
    save_conversation,
)


def test_message_str():
    assert str(Message(Role.USER, "hi")) == "<user>\nhi\n</user>\n"


def test_message_to_json():
    data = json.loads(Message(Role.ASSISTANT, 'say "x"').to_json())
    assert data == {"role": "assistant", "content": 'say "x"'}


def test_conversation_to_json():
    conv = Conversation("llama3", [Message(Role.USER, "a"), Message(Role.ASSISTANT, "b")])
    data = json.loads(conv.to_json())
    assert data["model"] == "llama3"
    assert data["stream"] is True
    assert data["messages"] == [
        {"role": "user", "content": "a"},
        {"role": "assistant", "content": "b"},
    ]


def test_format_parse_round_trip():
    conv = Conversation("m", [Message(Role.USER, "hello"), Message(Role.ASSISTANT, "hey")])
    assert parse_conversation("m", format_conversation(conv)) == conv


def test_parse_concatenates_lines():
    conv = parse_conversation("m", "<user>\nfirst\nsecond\n</user>\n")
    assert conv.messages == [Message(Role.USER, "firstsecond")]


def test_parse_ignores_untagged_lines():
    conv = parse_conversation("m", "stray\n<assistant>\nok\n</assistant>\nmore\n")
    assert conv.messages == [Message(Role.ASSISTANT, "ok")]


def test_apostrophes_escaped():
    conv = Conversation("m", [Message(Role.USER, "it's")])
    text = format_conversation(conv)
    assert "it\\\\'s" in text
    again = format_conversation(parse_conversation("m", text))
    assert again == text


def test_conversation_path(tmp_path):
    assert conversation_path(tmp_path, "llama3") == tmp_path / "llama3.conv"


def test_load_missing(tmp_path):
    assert load_conversation(tmp_path, "m") == Conversation("m", [])


def test_save_load_round_trip(tmp_path):
    conv = Conversation("m", [Message(Role.USER, "q"), Message(Role.ASSISTANT, "a")])
    save_conversation(conv, tmp_path)
    assert load_conversation(tmp_path, "m") == conv


def test_clear_conversation(tmp_path):
    save_conversation(Conversation("m", [Message(Role.USER, "q")]), tmp_path)
    clear_conversation(tmp_path, "m")
    assert conversation_path(tmp_path, "m").read_text() == ""
    assert load_conversation(tmp_path, "m").messages == []


def test_clear_missing_does_not_create(tmp_path):
    clear_conversation(tmp_path, "m")
    assert not conversation_path(tmp_path, "m").exists()