# workforce/presentation/console_narrator.py

import sys
from typing import IO, List, Optional


class ConsoleNarrator:
    """
    Line-oriented output sink for the demo narration.
    Writes to the given stream, or to whatever sys.stdout is at call time.
    """
    def __init__(self, stream: Optional[IO[str]] = None):
        self._stream = stream
        self.lines_written = 0

    def say(self, line: str = "") -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"{line}\n")
        self.lines_written += 1

    def blank(self) -> None:
        self.say("")


class RecordingNarrator(ConsoleNarrator):
    """Keeps every narrated line in memory instead of printing it."""
    def __init__(self):
        super().__init__()
        self.lines: List[str] = []

    def say(self, line: str = "") -> None:
        self.lines.append(line)
        self.lines_written += 1
