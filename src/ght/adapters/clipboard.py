"""Clipboard delivery through platform helper programs.

Candidates are tried in a fixed order; the first one that is on PATH, accepts
the text on stdin and exits with status 0 wins. The wait has no timeout: a
hung helper blocks until it is killed.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from dataclasses import dataclass, field

from ght.core.errors import ClipboardError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClipboardCommand:
    name: str
    args: tuple[str, ...] = field(default_factory=tuple)

    def argv(self, executable: str) -> list[str]:
        return [executable, *self.args]


_DARWIN = (ClipboardCommand("pbcopy"),)
_WINDOWS = (ClipboardCommand("clip"),)
_UNIX = (
    ClipboardCommand("wl-copy"),
    ClipboardCommand("xclip", ("-selection", "clipboard")),
    ClipboardCommand("xsel", ("--clipboard", "--input")),
)


def clipboard_commands(platform: str | None = None) -> tuple[ClipboardCommand, ...]:
    """Return the candidate helpers for `platform` (defaults to `sys.platform`)."""

    platform = platform or sys.platform
    if platform == "darwin":
        return _DARWIN
    if platform.startswith("win"):
        return _WINDOWS
    return _UNIX


def pipe_to_command(text: str, command: ClipboardCommand) -> None:
    """Run one helper with `text` on stdin.

    Raises `FileNotFoundError` when the helper is not on PATH, `OSError` when
    it cannot be spawned or written to, and `subprocess.CalledProcessError`
    on a non-zero exit.
    """

    executable = shutil.which(command.name)
    if executable is None:
        raise FileNotFoundError(f"{command.name}: not found on PATH")

    subprocess.run(
        command.argv(executable),
        input=text.encode("utf-8"),
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        check=True,
    )


def copy_to_clipboard(text: str, *, platform: str | None = None) -> ClipboardCommand:
    """Copy `text` with the first working helper and return it.

    Raises `ClipboardError` when no helper is available or all of them fail.
    """

    attempts: list[str] = []
    for command in clipboard_commands(platform):
        try:
            pipe_to_command(text, command)
        except (OSError, subprocess.SubprocessError) as exc:
            logger.debug("clipboard helper %s failed: %s", command.name, exc)
            attempts.append(f"{command.name}: {exc}")
            continue
        logger.debug("copied %d characters with %s", len(text), command.name)
        return command

    raise ClipboardError(
        "no supported clipboard command found (pbcopy/xclip/xsel/wl-copy/clip)",
        attempts=attempts,
    )
