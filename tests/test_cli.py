import builtins
import logging

import pytest

from triedict import TrieDictionary
from triedict import cli


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("hello\nhell\nhelp\ncat\n", encoding="utf-8")
    return str(path)


def test_handle_command_add_and_find(capsys):
    d = TrieDictionary()
    assert cli.handle_command(d, "add hello")
    assert cli.handle_command(d, "ADD hello")
    assert cli.handle_command(d, "find hello")
    out = capsys.readouterr().out
    assert "Added 'hello'" in out
    assert "already present" in out
    assert "'hello' found" in out


def test_handle_command_delete_variants(capsys):
    d = TrieDictionary(["hello", "help"])
    cli.handle_command(d, "del hello")
    cli.handle_command(d, "prune help")
    cli.handle_command(d, "prune help")
    out = capsys.readouterr().out
    assert out.count("Deleted") == 2
    assert "'help' not present" in out
    assert len(d) == 0


def test_handle_command_queries(capsys):
    d = TrieDictionary(["hello", "hell", "help", "cat"])
    cli.handle_command(d, "suggest hel")
    cli.handle_command(d, "spell helo")
    cli.handle_command(d, "count")
    out = capsys.readouterr().out
    assert "-- 3 word(s)" in out
    assert "4 word(s), 9 node(s)" in out


def test_handle_command_done_and_unknown(capsys):
    d = TrieDictionary()
    assert not cli.handle_command(d, "done")
    assert cli.handle_command(d, "")
    assert cli.handle_command(d, "frobnicate x")
    assert cli.handle_command(d, "add")
    out = capsys.readouterr().out
    assert "Unknown command" in out
    assert "Format:" in out


def test_run_cli_loop(monkeypatch, capsys):
    inputs = iter(["add cat", "spell", "spell c", "words", "done"])
    monkeypatch.setattr(builtins, "input", lambda _prompt="": next(inputs))
    d = TrieDictionary()
    cli.run_cli(d)
    out = capsys.readouterr().out
    assert "Added 'cat'" in out
    assert "Format:" in out
    assert "  cat" in out
    assert d.search("cat")


def test_load_dictionary_missing_path(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="triedict"):
        d = cli.load_dictionary(str(tmp_path / "missing.txt"))
    assert len(d) == 0
    assert "Cannot read" in caplog.text


def test_load_dictionary_default_paths(monkeypatch, words_file):
    monkeypatch.setattr(cli, "WORD_LIST_PATHS", ["/nonexistent/words", words_file])
    d = cli.load_dictionary(None)
    assert len(d) == 4


def test_main_suggest(words_file, capsys):
    cli.main(["--dict", words_file, "--suggest", "hel"])
    out = capsys.readouterr().out
    assert "  hell\n" in out
    assert "  cat" not in out


def test_main_spell(words_file, capsys):
    cli.main(["--dict", words_file, "--spell", "helo"])
    assert "-- 3 word(s)" in capsys.readouterr().out


def test_main_tree(words_file, capsys):
    cli.main(["--dict", words_file, "--tree"])
    assert capsys.readouterr().out.startswith("root\n")


def test_main_spell_empty_word(words_file):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--dict", words_file, "--spell", ""])
    assert exc.value.code == 2


def test_load_dictionary_directory(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="triedict"):
        d = cli.load_dictionary(str(tmp_path))
    assert len(d) == 0
    assert "Cannot read" in caplog.text


def test_load_dictionary_bad_encoding(tmp_path, caplog):
    path = tmp_path / "words.txt"
    path.write_bytes(b"hello\nw\xff\xfeird\n")
    with caplog.at_level(logging.WARNING, logger="triedict"):
        d = cli.load_dictionary(str(path))
    assert len(d) == 0
    assert d.node_count() == 0
    assert "Cannot read" in caplog.text


def test_load_dictionary_default_path_unreadable(monkeypatch, tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"\xff\xff\n")
    monkeypatch.setattr(cli, "WORD_LIST_PATHS", [str(path)])
    assert len(cli.load_dictionary(None)) == 0
