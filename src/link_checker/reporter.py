"""Console output for a single link check run."""
from __future__ import annotations

import sys
from typing import Optional, TextIO

_RESET = "\033[0m"
_PREFIXES = {
    "success": ("✔", "\033[0;32m"),
    "warn": (" WARN ", "\033[0;43m"),
    "error": (" ERROR ", "\033[1;41m"),
    "action": ("◐", "\033[0;95m"),
}


class ConsoleReporter:
    """Writes decorated status lines unless ``quiet`` is set.

    Built once per invocation; ``echo`` and ``error`` always print so plain
    output and fatal messages are never lost.
    """

    def __init__(
        self, quiet: bool = False, stream: TextIO | None = None, color: Optional[bool] = None
    ):
        self.quiet = quiet
        self.stream = stream or sys.stdout
        if color is None:
            isatty = getattr(self.stream, "isatty", None)
            color = bool(isatty and isatty())
        self.color = color
        self._action: Optional[str] = None

    def _prefix(self, kind: str) -> str:
        symbol, code = _PREFIXES[kind]
        return f"{code}{symbol}{_RESET}" if self.color else symbol.strip()

    def _write(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()

    def _log(self, kind: str, message: str, force: bool = False) -> None:
        if self.quiet and not force:
            return
        self._write(f"{self._prefix(kind)} {message}")

    def echo(self, text: str) -> None:
        self._write(text)

    def success(self, message: str) -> None:
        self._log("success", message)

    def warn(self, message: str) -> None:
        self._log("warn", message)

    def error(self, message: str) -> None:
        self._log("error", message, force=True)

    def start(self, action: str) -> None:
        self._action = action
        self._log("action", f"{action}...")

    def stop(self, status: str = "done") -> None:
        if self._action is None:
            return
        self._log("action", f"{self._action}... {status}")
        self._action = None
