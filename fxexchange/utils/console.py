from __future__ import annotations

"""Console primitives behind a small seam so the UI can be driven by tests."""
import sys
from typing import Optional, Protocol, TextIO


class SupportsConsole(Protocol):
    def write(self, value: str) -> None: ...

    def write_line(self, value: str) -> None: ...

    def read_line(self) -> Optional[str]: ...


class ConsoleHelper:
    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout

    def write(self, value: str) -> None:
        self._out.write(value)
        self._out.flush()

    def write_line(self, value: str) -> None:
        self._out.write(value + "\n")
        self._out.flush()

    def read_line(self) -> Optional[str]:
        """Next line without its terminator, or None at end of input."""
        line = self._in.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def read_key(self) -> Optional[str]:
        """Single key press on a terminal; first char of a line otherwise."""
        if self._in.isatty():
            return _read_tty_key(self._in)
        line = self._in.readline()
        if not line:
            return None
        return line[:1] or "\n"


def _read_tty_key(stream: TextIO) -> str:
    if sys.platform == "win32":
        import msvcrt

        return msvcrt.getwch()

    import termios
    import tty

    fd = stream.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return stream.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
