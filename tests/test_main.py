import io
import pytest
from main import main


@pytest.fixture
def draft(tmp_path):
    path = tmp_path / "draft.md"
    path.write_text("It is very good.\nThe report was written.\n", encoding="utf-8")
    return path


def test_check_reports_issues(draft, capsys):
    assert main(["check", str(draft)]) == 1
    out = capsys.readouterr().out
    assert "Found 2 writing issues" in out
    assert "Line 1: It is **very** good." in out
    assert "Line 2: The report **was written**." in out


def test_check_no_passive(draft, capsys):
    assert main(["check", str(draft), "--no-passive", "--no-line-numbers"]) == 1
    out = capsys.readouterr().out
    assert "Passive Voice" not in out
    assert "It is **very** good." in out
    assert "Line 1" not in out


def test_check_clean_file(tmp_path, capsys):
    path = tmp_path / "clean.txt"
    path.write_text("I wrote the report myself.", encoding="utf-8")
    assert main(["check", str(path)]) == 0
    assert "No writing issues found" in capsys.readouterr().out


def test_check_invalid_pattern(draft, capsys):
    assert main(["check", str(draft), "--pattern", "(very"]) == 2
    assert "Invalid weasel-word pattern" in capsys.readouterr().err


def test_check_missing_words_file(draft, tmp_path, capsys):
    assert main(["check", str(draft), "--words-file", str(tmp_path / "nope")]) == 2
    assert "error:" in capsys.readouterr().err


def test_check_missing_input(tmp_path, capsys):
    assert main(["check", str(tmp_path / "missing.md")]) == 2


def test_check_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Quite so."))
    assert main(["check", "-"]) == 1
    assert "**Quite**" in capsys.readouterr().out


def test_check_multiple_files(draft, tmp_path, capsys):
    other = tmp_path / "other.md"
    other.write_text("Nothing here.", encoding="utf-8")
    assert main(["check", str(draft), str(other)]) == 1
    out = capsys.readouterr().out
    assert f"== {draft}" in out
    assert f"== {other}" in out


def test_check_non_utf8_input(tmp_path, capsys):
    path = tmp_path / "latin1.md"
    path.write_bytes(b"very caf\xe9\n")
    assert main(["check", str(path)]) == 2
    assert "error:" in capsys.readouterr().err


def test_check_non_utf8_words_file(draft, tmp_path, capsys):
    words = tmp_path / "words.txt"
    words.write_bytes(b"caf\xe9\n")
    assert main(["check", str(draft), "--words-file", str(words)]) == 2
    assert "Cannot read word list" in capsys.readouterr().err


def test_check_rejected_extra_word(draft, tmp_path, capsys):
    words = tmp_path / "words.txt"
    words.write_text("e.g.\n", encoding="utf-8")
    assert main(["check", str(draft), "--words-file", str(words)]) == 2
