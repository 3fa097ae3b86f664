"""Line-oriented input/output used by the interactive session."""
from typing import Callable


class Console:
    """Reads one line per call and writes one line per message.

    Reading past the end of input raises EOFError, as built-in input() does.
    """

    def __init__(self, reader: Callable[[], str] = input, writer: Callable[[str], None] = print):
        self._reader = reader
        self._writer = writer

    def say(self, message: str = "") -> None:
        self._writer(message)

    def ask(self) -> str:
        return self._reader()
