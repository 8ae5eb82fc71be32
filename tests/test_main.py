"""Test the terminal runner and verdict messages."""

import io
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.main import load_config, play, main
from src.game import GameSession, VERDICT_MESSAGES, format_verdict
from src.verifiers import (
    WordList,
    ACCEPTED,
    REJECTED_EMPTY,
    REJECTED_DUPLICATE_OR_ROOT,
    REJECTED_IMPOSSIBLE_LETTERS,
    REJECTED_NOT_A_REAL_WORD,
    REJECTIONS,
)


def make_reader(lines):
    """Return a read_line callable that yields lines then None."""
    it = iter(lines)
    return lambda: next(it, None)


@pytest.fixture
def session():
    dictionary = WordList.from_words(["use", "sum", "some"])
    session = GameSession(is_real_word=dictionary.is_recognized)
    session.start_round(lambda: "mouse")
    return session


class TestVerdictMessages:
    """Test the verdict to message mapping."""

    def test_every_reportable_rejection_has_message(self):
        for verdict in REJECTIONS:
            if verdict != REJECTED_EMPTY:
                assert verdict in VERDICT_MESSAGES

    def test_duplicate_message(self):
        assert format_verdict(REJECTED_DUPLICATE_OR_ROOT) == ("Word used already", "Be more original.")

    def test_impossible_message_names_root(self):
        title, message = format_verdict(REJECTED_IMPOSSIBLE_LETTERS, "mouse")
        assert title == "Word not possible"
        assert "'mouse'" in message

    def test_no_message_for_accept_or_empty(self):
        assert format_verdict(ACCEPTED) is None
        assert format_verdict(REJECTED_EMPTY) is None


class TestLoadConfig:
    """Test YAML configuration loading."""

    def test_load(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("language: en\nseed: 42\nmin_root_length: 4\n")
        config = load_config(str(path))
        assert config.seed == 42
        assert config.min_root_length == 4

    def test_empty_file(self, tmp_path):
        """An empty YAML file gives the defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)).fallback_root_word == "silkworm"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("min_root_length: 0\n")
        with pytest.raises(ValidationError):
            load_config(str(path))


class TestPlay:
    """Test the interactive loop."""

    def test_accept_and_reject(self, session):
        out = io.StringIO()
        play(session, make_reader(["use", "use", "zzz", "emu", ":quit", "sum"]), out=out)
        text = out.getvalue()

        assert "=== Mouse ===" in text
        assert "Score: 3" in text
        assert "Word used already: Be more original." in text
        assert "Word not possible" in text
        assert "Word not recognized" in text
        # Input after :quit is not read
        assert session.used_words == ["use"]

    def test_empty_lines_ignored(self, session):
        out = io.StringIO()
        play(session, make_reader(["", "   "]), out=out)
        assert out.getvalue().strip() == "=== Mouse ==="
        assert session.score == 0

    def test_new_round(self, session):
        out = io.StringIO()
        play(session, make_reader(["use", ":new", "use"]), out=out)
        # The new round has no source, so the fallback root word is used
        assert session.root_word == "silkworm"
        assert session.score == 0
        assert "=== Silkworm ===" in out.getvalue()

    def test_starts_round_if_needed(self):
        session = GameSession(is_real_word=lambda word, language: True)
        out = io.StringIO()
        play(session, make_reader([]), out=out)
        assert session.root_word == "silkworm"

    def test_verbose_prints_words(self, session):
        out = io.StringIO()
        play(session, make_reader(["use", "sum"]), verbose=True, out=out)
        text = out.getvalue()
        assert "Letters: e m o s u" in text
        assert "Words: sum, use" in text


class TestMain:
    """Test the command-line entry point."""

    def test_main_summary(self, tmp_path, capsys):
        start = tmp_path / "start.txt"
        start.write_text("mouse\n")
        words = tmp_path / "words.txt"
        words.write_text("use\nsum\n")
        config = tmp_path / "config.yaml"
        config.write_text(f"start_words: {start}\nword_list: {words}\n")

        inputs = iter(["use", "sum", "zzz"])

        def fake_input(prompt=""):
            try:
                return next(inputs)
            except StopIteration:
                raise EOFError

        with patch("sys.argv", ["main", str(config)]), patch("builtins.input", fake_input):
            assert main() == 0

        out = capsys.readouterr().out
        assert "Root word: mouse" in out
        assert "Words found: 2" in out
        assert "Score: 6" in out

    def test_main_bad_config(self, tmp_path, capsys):
        with patch("sys.argv", ["main", str(tmp_path / "missing.yaml")]):
            assert main() == 1
        assert "Config file not found" in capsys.readouterr().err
