"""Console logging with timestamps and colours, plus appending to a log file."""

from __future__ import annotations

import enum
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, TextIO

from orangekit.vectors import Vec3, Vec4

__all__ = [
    "ConsoleColor",
    "DEFAULT_COLORS",
    "Log",
    "log_error",
    "log_warning",
    "log_info",
    "log_message",
]


class ConsoleColor(enum.IntFlag):
    """Console text attribute flags; foreground and background combine freely."""

    FOREGROUND_BLUE = 0x0001
    FOREGROUND_GREEN = 0x0002
    FOREGROUND_RED = 0x0004
    FOREGROUND_INTENSITY = 0x0008
    BACKGROUND_BLUE = 0x0010
    BACKGROUND_GREEN = 0x0020
    BACKGROUND_RED = 0x0040
    BACKGROUND_INTENSITY = 0x0080


DEFAULT_COLORS = (
    ConsoleColor.FOREGROUND_RED | ConsoleColor.FOREGROUND_GREEN | ConsoleColor.FOREGROUND_BLUE
)

_BACKGROUND = (
    ConsoleColor.BACKGROUND_RED
    | ConsoleColor.BACKGROUND_GREEN
    | ConsoleColor.BACKGROUND_BLUE
    | ConsoleColor.BACKGROUND_INTENSITY
)


def _ansi(colors: ConsoleColor) -> str:
    """The terminal escape sequence that shows ``colors``."""
    if colors == DEFAULT_COLORS:
        return "\x1b[0m"
    fg = (
        (1 if colors & ConsoleColor.FOREGROUND_RED else 0)
        | (2 if colors & ConsoleColor.FOREGROUND_GREEN else 0)
        | (4 if colors & ConsoleColor.FOREGROUND_BLUE else 0)
    )
    codes = [str((90 if colors & ConsoleColor.FOREGROUND_INTENSITY else 30) + fg)]
    if colors & _BACKGROUND:
        bg = (
            (1 if colors & ConsoleColor.BACKGROUND_RED else 0)
            | (2 if colors & ConsoleColor.BACKGROUND_GREEN else 0)
            | (4 if colors & ConsoleColor.BACKGROUND_BLUE else 0)
        )
        codes.append(str((100 if colors & ConsoleColor.BACKGROUND_INTENSITY else 40) + bg))
    return "\x1b[" + ";".join(codes) + "m"


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:g}"
    if isinstance(value, Vec4):
        return "(" + ", ".join(_format(c) for c in value) + ")"
    if isinstance(value, Vec3):
        return ", ".join(_format(c) for c in value)
    return str(value)


def _isatty(stream: TextIO) -> bool:
    check = getattr(stream, "isatty", None)
    return bool(check and check())


class Log:
    """Writes messages to a stream, stamping the start of each message with the time."""

    def __init__(
        self,
        stream: TextIO | None = None,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._now = now
        self._output_file: Path | None = None
        self._new_message = True
        self._colors = DEFAULT_COLORS
        self.timestamps = True
        self.new_line_after_message = True

    @property
    def colors(self) -> ConsoleColor:
        """The console colours; setting them recolours a terminal stream."""
        return self._colors

    @colors.setter
    def colors(self, value: int) -> None:
        self._colors = ConsoleColor(value)
        if _isatty(self._stream):
            self._stream.write(_ansi(self._colors))

    def output_file(self) -> Path | None:
        """The file that the ``*_to_file`` methods append to."""
        return self._output_file

    def set_output_file(self, path: str | Path) -> None:
        self._output_file = Path(path)

    def print(self, value: Any) -> None:
        """Write ``value`` with no timestamp."""
        self._stream.write(_format(value))

    def print_nl(self, value: Any) -> None:
        """Write ``value`` and a newline, then flush."""
        self.print(value)
        self._stream.write("\n")
        self._stream.flush()

    def write(self, value: Any) -> Log:
        """Write part of a message, stamping it if it starts a new one."""
        self.print_timestamp()
        self._stream.write(_format(value))
        self._new_message = False
        return self

    def __lshift__(self, value: Any) -> Log:
        return self.write(value)

    def end(self) -> None:
        """Finish the current message with a newline."""
        self._new_message = True
        self._stream.write("\n")

    def print_timestamp(self) -> None:
        """Write ``[HH:MM:SS] `` if a message is starting and timestamps are on."""
        if not self._new_message or not self.timestamps:
            return
        self._stream.write(self._now().strftime("[%H:%M:%S] "))

    def _append(self, text: str) -> None:
        if self._output_file is None:
            raise ValueError("no output file has been set")
        with self._output_file.open("ab") as handle:
            handle.write(text.encode("utf-8"))

    def print_to_file(self, fmt: str, *args: Any) -> None:
        """Append the printf-style message to the output file."""
        self._append(fmt % args)

    def print_nl_to_file(self, fmt: str, *args: Any) -> None:
        """Append the printf-style message and a newline to the output file."""
        self._append(fmt % args + "\n")

    def print_if(self, msg: Any, condition: bool) -> None:
        if condition:
            self.print(msg)

    def print_nl_if(self, msg: Any, condition: bool) -> None:
        if condition:
            self.print_nl(msg)


def _emit(colors: ConsoleColor | None, fmt: str, args: tuple[Any, ...]) -> None:
    log = Log()
    if colors is not None:
        log.colors = colors
    log.print_timestamp()
    log.print(fmt % args)
    if colors is not None:
        log.colors = DEFAULT_COLORS
    log.end()


def log_error(fmt: str, *args: Any) -> None:
    """Print a timestamped line in red to standard output."""
    _emit(ConsoleColor.FOREGROUND_RED, fmt, args)


def log_warning(fmt: str, *args: Any) -> None:
    """Print a timestamped line in yellow to standard output."""
    _emit(ConsoleColor.FOREGROUND_RED | ConsoleColor.FOREGROUND_GREEN, fmt, args)


def log_info(fmt: str, *args: Any) -> None:
    """Print a timestamped line in green to standard output."""
    _emit(ConsoleColor.FOREGROUND_GREEN, fmt, args)


def log_message(fmt: str, *args: Any) -> None:
    """Print a timestamped line to standard output."""
    _emit(None, fmt, args)