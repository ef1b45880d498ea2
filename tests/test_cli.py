"""
Tests for the command line interface, configuration, display helpers and
the commit-msg hook.

Run with:
    pytest tests/test_cli.py -v
"""

import io
import json
import os
import re

import pytest

from commitfmt.cli import main as cli_main
from commitfmt.cli.main import main
from commitfmt.cli.utils import render_chunks, render_edits, render_outline, to_json
from commitfmt.config import Config, ConfigManager
from commitfmt.formatter import TextEdit, get_chunks, split_lines
from commitfmt.git import HOOK_NAME, GitError, install_commit_msg_hook, is_commitfmt_hook
from commitfmt.views import outline

ANSI_RE = re.compile(r'\033\[[0-9;]*m')

MESSY = "  Add   flag  \n\n\n\nExplain why the flag exists and what it changes.\n"
CLEAN = "Add flag\n\nExplain why the flag exists and what it changes.\n"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)
    return _strip


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Keep user config files and env out of CLI runs."""
    monkeypatch.setattr(cli_main, "load_config", lambda: Config())
    monkeypatch.delenv("COMMITFMT_WIDTH", raising=False)


@pytest.fixture
def message_file(tmp_path):
    """Return a factory that writes a commit message file."""
    def _make(text: str):
        path = tmp_path / "COMMIT_EDITMSG"
        path.write_text(text, encoding="utf-8")
        return path
    return _make


# ---------------------------------------------------------------------------
# Formatting flow
# ---------------------------------------------------------------------------

class TestFormatCommand:

    def test_prints_formatted_message(self, capsys, message_file):
        path = message_file(MESSY)
        assert main([str(path)]) == 0
        assert capsys.readouterr().out == CLEAN
        assert path.read_text(encoding="utf-8") == MESSY

    def test_in_place(self, capsys, message_file):
        path = message_file(MESSY)
        assert main(["-i", str(path)]) == 0
        assert capsys.readouterr().out == ""
        assert path.read_text(encoding="utf-8") == CLEAN

    def test_in_place_from_config(self, capsys, message_file, monkeypatch):
        monkeypatch.setattr(cli_main, "load_config", lambda: Config(in_place=True))
        path = message_file(MESSY)
        assert main([str(path)]) == 0
        assert path.read_text(encoding="utf-8") == CLEAN

    def test_reads_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO(MESSY))
        assert main([]) == 0
        assert capsys.readouterr().out == CLEAN

    def test_falls_back_to_commit_in_progress(self, capsys, message_file, monkeypatch):
        path = message_file(MESSY)

        class TtyInput(io.StringIO):
            def isatty(self):
                return True

        class FakeRepository:
            commit_message_path = path

        monkeypatch.setattr("sys.stdin", TtyInput(""))
        monkeypatch.setattr(cli_main, "GitRepository", FakeRepository)
        assert main([]) == 0
        assert capsys.readouterr().out == CLEAN

    def test_no_repository_without_input(self, capsys, monkeypatch):
        class TtyInput(io.StringIO):
            def isatty(self):
                return True

        def no_repo():
            raise GitError("Not inside a git repository")

        monkeypatch.setattr("sys.stdin", TtyInput(""))
        monkeypatch.setattr(cli_main, "GitRepository", no_repo)
        assert main([]) == 1
        assert "Not inside a git repository" in capsys.readouterr().err

    def test_check_clean_file(self, message_file):
        assert main(["--check", str(message_file(CLEAN))]) == 0

    def test_check_messy_file(self, capsys, message_file):
        path = message_file(MESSY)
        assert main(["--check", str(path)]) == 1
        assert "would be reformatted" in capsys.readouterr().err
        assert path.read_text(encoding="utf-8") == MESSY

    def test_width_flag(self, capsys, message_file):
        path = message_file("Subject\n\naa bb cc\n")
        assert main(["-w", "5", str(path)]) == 0
        assert capsys.readouterr().out == "Subject\n\naa bb\ncc\n"

    def test_width_from_environment(self, capsys, message_file, monkeypatch):
        monkeypatch.setenv("COMMITFMT_WIDTH", "5")
        path = message_file("Subject\n\naa bb cc\n")
        assert main([str(path)]) == 0
        assert capsys.readouterr().out == "Subject\n\naa bb\ncc\n"

    def test_invalid_width_environment_ignored(self, capsys, message_file, monkeypatch):
        monkeypatch.setenv("COMMITFMT_WIDTH", "wide")
        path = message_file("Subject\n\naa bb cc\n")
        assert main([str(path)]) == 0
        captured = capsys.readouterr()
        assert captured.out == "Subject\n\naa bb cc\n"
        assert "COMMITFMT_WIDTH" in captured.err

    @pytest.mark.parametrize("width", ["0", "-3", "abc"])
    def test_invalid_width_flag(self, width):
        with pytest.raises(SystemExit):
            main(["-w", width, "msg.txt"])

    def test_trailer_prefix_flag(self, capsys, message_file):
        text = "Subject\n\nChange-Id: I1\nsome   prose\n"
        path = message_file(text)
        assert main(["--trailer-prefix", "Change-Id: ", str(path)]) == 0
        assert capsys.readouterr().out == text

    def test_missing_file(self, capsys, tmp_path):
        assert main([str(tmp_path / "nope")]) == 1
        assert "Could not read" in capsys.readouterr().err

    def test_verbose_stats(self, capsys, message_file):
        assert main(["--verbose", str(message_file(MESSY))]) == 0
        err = capsys.readouterr().err
        assert "chunks:" in err
        assert "subject=1" in err


# ---------------------------------------------------------------------------
# Inspection views
# ---------------------------------------------------------------------------

class TestViewCommands:

    def test_subject(self, capsys, message_file):
        assert main(["--subject", str(message_file("# c\nSubject\n"))]) == 0
        assert capsys.readouterr().out.strip() == "2"

    def test_subject_json(self, capsys, message_file):
        assert main(["--subject", "--json", str(message_file("Subject\n"))]) == 0
        assert json.loads(capsys.readouterr().out) == {"start_line": 0, "end_line": 0}

    def test_outline_json(self, capsys, message_file):
        text = "Subject\n\nBody\n\nSigned-off-by: A <a@x.com>\n# comment\n"
        assert main(["--outline", "--json", str(message_file(text))]) == 0
        entries = json.loads(capsys.readouterr().out)
        assert [e["label"] for e in entries] == ["Subject Line", "Paragraph", "Trailers", "Comment"]

    def test_chunks_json(self, capsys, message_file):
        assert main(["--chunks", "--json", str(message_file("Subject\n\nBody"))]) == 0
        chunks = json.loads(capsys.readouterr().out)
        assert [c["kind"] for c in chunks] == ["subject", "blank", "paragraph"]

    def test_folds(self, capsys, message_file, strip_ansi):
        assert main(["--folds", str(message_file("Subject\n# one\n# two"))]) == 0
        out = strip_ansi(capsys.readouterr().out)
        assert out.split("\n")[:2] == ["1", "2-3 comment"]

    def test_edits_json(self, capsys, message_file):
        assert main(["--edits", "--json", str(message_file(MESSY))]) == 0
        edits = json.loads(capsys.readouterr().out)
        assert edits == [
            {"start_line": 0, "end_line": 0, "new_text": "Add flag"},
            {"start_line": 1, "end_line": 3, "new_text": ""},
        ]

    def test_views_are_exclusive(self):
        with pytest.raises(SystemExit):
            main(["--outline", "--folds", "msg.txt"])


class TestRendering:

    def test_render_chunks(self, strip_ansi):
        lines = split_lines("Subject\n\nBody")
        out = strip_ansi(render_chunks(get_chunks(lines), lines))
        rows = out.split("\n")
        assert "subject" in rows[0] and "Subject" in rows[0]
        assert "blank" in rows[1]
        assert "paragraph" in rows[2]

    def test_render_outline(self, strip_ansi):
        out = strip_ansi(render_outline(outline(split_lines("Subject\n\nBody"))))
        assert "Subject Line 1" in out
        assert "Paragraph 3" in out

    def test_render_edits(self, strip_ansi):
        out = strip_ansi(render_edits([TextEdit(1, 3, ""), TextEdit(0, 0, "Subject")]))
        assert "@@ 2-4 @@\n(delete)" in out
        assert "@@ 1 @@\nSubject" in out

    def test_to_json_none(self):
        assert to_json(None) == "null"


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

class TestConfig:

    def test_defaults(self):
        config = Config()
        assert config.wrap_width == 72
        assert config.trailer_prefixes == []
        assert config.in_place is False

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"wrap_width": 60, "unknown_key": "value"})
        assert config.wrap_width == 60
        assert not hasattr(config, "unknown_key")

    @pytest.mark.parametrize("width", [0, -1, "72", True])
    def test_validate_invalid_wrap_width(self, width):
        config = Config(wrap_width=width)
        warnings = config.validate()
        assert any("wrap_width" in w for w in warnings)
        assert config.wrap_width == 72

    def test_validate_invalid_trailer_prefixes(self):
        config = Config(trailer_prefixes="Change-Id: ")
        warnings = config.validate()
        assert len(warnings) == 1
        assert config.trailer_prefixes == []

    def test_validate_valid_config_no_warnings(self):
        assert Config(trailer_prefixes=["Change-Id: "]).validate() == []

    def test_from_dict_triggers_validation(self, capsys):
        Config.from_dict({"wrap_width": -5})
        assert "Config warning" in capsys.readouterr().err


class TestConfigManager:

    def test_load_returns_defaults_when_no_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
        config = ConfigManager().load()
        assert config.wrap_width == 72

    def test_load_reads_local_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".commitfmtrc").write_text(json.dumps({"wrap_width": 50, "in_place": True}))
        manager = ConfigManager()
        config = manager.load()
        assert config.wrap_width == 50
        assert config.in_place is True
        assert manager.get_config_path() == tmp_path / ".commitfmtrc"

    def test_save_and_load_roundtrip(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path)
        ConfigManager().save(Config(wrap_width=64, trailer_prefixes=["Change-Id: "]), global_config=True)
        loaded = ConfigManager().load()
        assert loaded.wrap_width == 64
        assert loaded.trailer_prefixes == ["Change-Id: "]

    def test_malformed_json_returns_defaults(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".commitfmtrc").write_text("not valid json {{{")
        config = ConfigManager().load()
        assert config.wrap_width == 72
        assert "Could not load" in capsys.readouterr().err

    def test_non_object_json_returns_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".commitfmtrc").write_text("[1, 2]")
        assert ConfigManager().load().wrap_width == 72


# ---------------------------------------------------------------------------
# commit-msg hook
# ---------------------------------------------------------------------------

class FakeRepo:
    def __init__(self, hooks_dir):
        self.hooks_dir = hooks_dir


class TestInstallHook:

    def test_writes_executable_hook(self, tmp_path):
        path = install_commit_msg_hook(FakeRepo(tmp_path / "hooks"))
        assert path == tmp_path / "hooks" / HOOK_NAME
        assert is_commitfmt_hook(path)
        assert 'commitfmt --in-place "$1"' in path.read_text()
        if os.name != "nt":
            assert os.access(path, os.X_OK)

    def test_refuses_foreign_hook(self, tmp_path):
        hooks = tmp_path / "hooks"
        hooks.mkdir()
        (hooks / HOOK_NAME).write_text("#!/bin/sh\nexit 0\n")
        with pytest.raises(GitError):
            install_commit_msg_hook(FakeRepo(hooks))

    def test_force_overwrites_foreign_hook(self, tmp_path):
        hooks = tmp_path / "hooks"
        hooks.mkdir()
        (hooks / HOOK_NAME).write_text("#!/bin/sh\nexit 0\n")
        path = install_commit_msg_hook(FakeRepo(hooks), force=True)
        assert is_commitfmt_hook(path)

    def test_reinstall_own_hook(self, tmp_path):
        repo = FakeRepo(tmp_path / "hooks")
        install_commit_msg_hook(repo)
        assert is_commitfmt_hook(install_commit_msg_hook(repo))
