"""Editor and file-browser launchers used by the TUI and CLI."""

import logging
import os
import shlex
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from config import get_user_editor

logger = logging.getLogger("stask.launch")


def resolve_editor() -> str:
    """Pick the editor command: $EDITOR, $VISUAL, user config, platform default."""
    for candidate in (os.environ.get("EDITOR"), os.environ.get("VISUAL"), get_user_editor()):
        if candidate and candidate.strip():
            return candidate.strip()
    return "notepad" if sys.platform == "win32" else "vim"


def opener_command(directory: Path, platform: Optional[str] = None) -> List[str]:
    platform = platform or sys.platform
    if platform == "win32":
        return ["explorer", str(directory).replace("/", "\\")]
    if platform == "darwin":
        return ["open", str(directory)]
    return ["xdg-open", str(directory)]


class SubprocessEditorLauncher:
    def __init__(self, command: Optional[str] = None):
        self._command = command

    @property
    def command(self) -> str:
        return self._command or resolve_editor()

    def open(self, path: Path) -> int:
        """Run the editor on ``path`` and block until it exits."""
        argv = shlex.split(self.command, posix=sys.platform != "win32") + [str(path)]
        logger.debug("Launching editor: %s", argv)
        result = subprocess.run(argv)
        return result.returncode


class SubprocessFileOpener:
    def open(self, directory: Path) -> None:
        argv = opener_command(directory)
        try:
            subprocess.Popen(argv, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        except OSError as exc:
            logger.warning("Could not open %s with %s: %s", directory, argv[0], exc)


__all__ = ["resolve_editor", "opener_command", "SubprocessEditorLauncher", "SubprocessFileOpener"]
