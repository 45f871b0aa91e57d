from chatwith.cli import Query, default_config_dir, help_text, main, parse_query, run
from chatwith.config import Entry, load_config, save_config


def test_parse_query_defaults_to_help():
    assert parse_query([]) == Query("help", [])


def test_parse_query_lowercases_command():
    assert parse_query(["LIST", "A", "b"]) == Query("list", ["A", "b"])


def test_help_text_mentions_usage():
    assert help_text().startswith("chatwith - easily chat with your ollama models")
    assert "-n - start a new conversation" in help_text()


def test_run_help(capsys, tmp_path):
    run(Query("help"), tmp_path)
    assert capsys.readouterr().out == help_text() + "\n"
    assert not (tmp_path / "chatwith.cfg").exists()


def test_run_entry_and_list(capsys, tmp_path):
    run(Query("entry", ["a", "llama3", "-x"]), tmp_path)
    assert load_config(tmp_path / "chatwith.cfg") == [Entry("a", "llama3", ["-x"])]
    run(Query("list"), tmp_path)
    out = capsys.readouterr().out
    assert "Entry successfully added." in out
    assert "1 entries found in config file:" in out


def test_run_remove(capsys, tmp_path):
    cfg = tmp_path / "chatwith.cfg"
    save_config([Entry("a", "m"), Entry("b", "n")], cfg)
    run(Query("remove", ["a"]), tmp_path)
    assert load_config(cfg) == [Entry("b", "n")]
    assert "Removed 1 entries from config file." in capsys.readouterr().out


def test_run_show(capsys, tmp_path):
    save_config([Entry("a", "m"), Entry("b", "n", ["-q"])], tmp_path / "chatwith.cfg")
    run(Query("show", ["b"]), tmp_path)
    assert capsys.readouterr().out == str(Entry("b", "n", ["-q"])) + "\n"


def test_run_unknown_model(capsys, tmp_path):
    run(Query("ghost", ["hi"]), tmp_path)
    assert capsys.readouterr().out == "No model with name ghost found in config file.\n"


def test_main_help_returns_zero(capsys):
    assert main(["help"]) == 0
    assert "usage: chatwith" in capsys.readouterr().out


def test_main_reports_error(capsys):
    assert main(["entry", "onlyname"]) == 1
    assert "Error: Incomplete entry given." in capsys.readouterr().err


def test_default_config_dir_named_after_program():
    assert default_config_dir().name == "chatwith"