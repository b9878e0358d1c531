"""Levelled logger writing tagged, optionally coloured lines to a stream."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Any, Optional, TextIO

_RESET = "\x1b[0m"
_GREEN = "\x1b[32m"
_MAGENTA = "\x1b[35m"
_RED = "\x1b[31m"
_WHITE = "\x1b[37m"


class Level(IntEnum):
    SILENT = 0
    ERROR = 1
    WARN = 2
    INFO = 3


class Logger:
    """Writes ``[info]``, ``[warn]`` and ``[error]`` lines up to a level."""

    def __init__(
        self,
        writer: Optional[TextIO] = None,
        level: Level = Level.INFO,
        colorful: bool = False,
    ) -> None:
        self.writer = writer if writer is not None else sys.stdout
        self.level = Level(level)
        self.colorful = colorful

    def _emit(self, threshold: Level, tag: str, color: str, msg: str, args: tuple) -> None:
        if self.level < threshold:
            return
        text = msg % args if args else msg
        if self.colorful:
            line = f"{color}{tag}{_RESET}{_WHITE}{text}{_RESET}\n"
        else:
            line = f"{tag}{text}\n"
        self.writer.write(line)

    def info(self, msg: str, *args: Any) -> None:
        self._emit(Level.INFO, "[info] ", _GREEN, msg, args)

    def warn(self, msg: str, *args: Any) -> None:
        self._emit(Level.WARN, "[warn] ", _MAGENTA, msg, args)

    def error(self, msg: str, *args: Any) -> None:
        self._emit(Level.ERROR, "[error] ", _RED, msg, args)

    def set_level(self, level: Level) -> None:
        self.level = Level(level)