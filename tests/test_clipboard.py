"""Clipboard fallback tests (PATH lookups and subprocesses are mocked)."""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock

import pytest

from ght.adapters.clipboard import ClipboardCommand, clipboard_commands, copy_to_clipboard
from ght.core.errors import ClipboardError


def _which_only(*available: str):
    return lambda name: f"/usr/bin/{name}" if name in available else None


class TestClipboardCommands:
    def test_darwin(self):
        assert [c.name for c in clipboard_commands("darwin")] == ["pbcopy"]

    def test_windows(self):
        assert [c.name for c in clipboard_commands("win32")] == ["clip"]

    @pytest.mark.parametrize("platform", ["linux", "freebsd13", "openbsd7"])
    def test_unix_priority_order(self, platform):
        commands = clipboard_commands(platform)
        assert [c.name for c in commands] == ["wl-copy", "xclip", "xsel"]
        assert commands[1].args == ("-selection", "clipboard")
        assert commands[2].args == ("--clipboard", "--input")


class TestCopyToClipboard:
    def test_no_candidate_on_path(self, monkeypatch):
        run = MagicMock()
        monkeypatch.setattr("ght.adapters.clipboard.shutil.which", lambda name: None)
        monkeypatch.setattr("ght.adapters.clipboard.subprocess.run", run)

        with pytest.raises(ClipboardError, match="no supported clipboard command found") as exc_info:
            copy_to_clipboard("Example", platform="linux")

        run.assert_not_called()
        assert len(exc_info.value.attempts) == 3

    def test_first_available_candidate_is_used(self, monkeypatch):
        run = MagicMock()
        monkeypatch.setattr("ght.adapters.clipboard.shutil.which", _which_only("xclip", "xsel"))
        monkeypatch.setattr("ght.adapters.clipboard.subprocess.run", run)

        command = copy_to_clipboard("[Example](https://example.com)", platform="linux")

        assert command == ClipboardCommand("xclip", ("-selection", "clipboard"))
        run.assert_called_once()
        args, kwargs = run.call_args
        assert args[0] == ["/usr/bin/xclip", "-selection", "clipboard"]
        assert kwargs["input"] == b"[Example](https://example.com)"
        assert kwargs["check"] is True

    def test_failing_candidate_falls_through(self, monkeypatch):
        calls: list[str] = []

        def fake_run(argv, **kwargs):
            calls.append(argv[0])
            if argv[0].endswith("wl-copy"):
                raise subprocess.CalledProcessError(1, argv)
            return subprocess.CompletedProcess(argv, 0)

        monkeypatch.setattr("ght.adapters.clipboard.shutil.which", _which_only("wl-copy", "xclip", "xsel"))
        monkeypatch.setattr("ght.adapters.clipboard.subprocess.run", fake_run)

        command = copy_to_clipboard("text", platform="linux")

        assert command.name == "xclip"
        assert calls == ["/usr/bin/wl-copy", "/usr/bin/xclip"]

    def test_all_candidates_fail(self, monkeypatch):
        def fake_run(argv, **kwargs):
            raise OSError("exec format error")

        monkeypatch.setattr("ght.adapters.clipboard.shutil.which", _which_only("wl-copy", "xclip", "xsel"))
        monkeypatch.setattr("ght.adapters.clipboard.subprocess.run", fake_run)

        with pytest.raises(ClipboardError) as exc_info:
            copy_to_clipboard("text", platform="linux")

        assert [a.split(":")[0] for a in exc_info.value.attempts] == ["wl-copy", "xclip", "xsel"]

    def test_darwin_uses_pbcopy(self, monkeypatch):
        run = MagicMock()
        monkeypatch.setattr("ght.adapters.clipboard.shutil.which", _which_only("pbcopy", "xclip"))
        monkeypatch.setattr("ght.adapters.clipboard.subprocess.run", run)

        assert copy_to_clipboard("日本語", platform="darwin").name == "pbcopy"
        assert run.call_args.kwargs["input"] == "日本語".encode("utf-8")
