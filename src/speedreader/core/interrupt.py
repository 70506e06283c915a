"""
Interrupt handling for a reading session.

Ctrl-C ends the session with a hint naming the last fully displayed word, so
the reader can pick up where they stopped with ``--start-index``.
"""

import os
import signal
import sys
from typing import IO, Optional

from speedreader.core.cursor import Cursor
from speedreader.utils.structured_logging import get_logger

logger = get_logger(__name__)

RESUME_HINT = "\nto resume where you finished launch with --start-index={}"
HINT_ENCODING = "utf-8"


def resume_index(cursor_value: int) -> int:
    """Index of the last fully displayed word.

    The loop increments the cursor right after rendering, so the word on
    screen is one behind. Clamped at zero when nothing was shown yet.
    """
    return max(cursor_value - 1, 0)


def write_hint(stream: IO, index: int) -> None:
    """Print the resume hint for index.

    The signal may arrive while the renderer is inside a write on the same
    stream, and buffered streams refuse reentrant calls. When the stream has
    a file descriptor the hint bypasses its buffer and goes to the descriptor
    directly.
    """
    hint = RESUME_HINT.format(index) + "\n"
    try:
        fd = stream.fileno()
    except (AttributeError, OSError):
        stream.write(hint)
        stream.flush()
        return
    os.write(fd, hint.encode(HINT_ENCODING))


class InterruptHandler:
    """Installs a SIGINT handler that prints the resume hint and exits with 0.

    Use as a context manager; the previous handler is restored on exit. Only
    the first interrupt is acted on.

    Example:
        with InterruptHandler(cursor):
            loop.main_loop()
    """

    def __init__(self, cursor: Cursor, stream: Optional[IO] = None, signum: int = signal.SIGINT):
        self.cursor = cursor
        self.stream = stream
        self.signum = signum
        self.fired = False
        self._previous = None

    def handle(self, signum, frame) -> None:
        """Signal handler body. Raises SystemExit(0) on the first call."""
        if self.fired:
            return
        self.fired = True

        index = resume_index(self.cursor.value)
        logger.info("Session interrupted", resume_index=index)

        write_hint(self.stream if self.stream is not None else sys.stdout, index)
        raise SystemExit(0)

    def install(self) -> None:
        self._previous = signal.signal(self.signum, self.handle)

    def restore(self) -> None:
        if self._previous is not None:
            signal.signal(self.signum, self._previous)
            self._previous = None

    def __enter__(self) -> "InterruptHandler":
        self.install()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.restore()
