"""
ANSI frame rendering.

A frame clears the terminal, draws one string centered on a row, then parks
the cursor in the top-left corner and prints a short status there.
"""

import io
import sys
from typing import IO, Optional

from speedreader.core.rsvp import WORD_ENCODING, WORD_ERRORS, byte_length

ESC = "\033"

# Escape sequences to clear the terminal and position the cursor
CLEAR_SCREEN = ESC + "[2J"
POSITION_CURSOR = ESC + "[{row};{col}H"

# The parking position is deliberately 0;0, terminals treat it as 1;1
PARKING_ROW = 0
PARKING_COL = 0


def position_cursor(row: int, col: int) -> str:
    return POSITION_CURSOR.format(row=row, col=col)


def start_column(col: int, center: str) -> int:
    """Column where a string must start to be centered on col.

    Words wider than the screen start at column 0, the same column the
    parking position uses, instead of going negative.
    """
    return max(col - byte_length(center) // 2, 0)


def build_frame(row: int, col: int, center: str, top_left: str = "") -> str:
    """Construct a frame for a string centered at row/col.

    Args:
        row: Center row of the terminal
        col: Center column of the terminal
        center: The string to show in the middle
        top_left: Status text printed at the parking position

    Returns:
        The full frame, beginning with the clear-screen sequence
    """
    frame = io.StringIO()
    frame.write(CLEAR_SCREEN)
    frame.write(position_cursor(row, start_column(col, center)))
    frame.write(center)
    # Position the cursor 'out of sight'
    frame.write(position_cursor(PARKING_ROW, PARKING_COL))
    frame.write(top_left)
    return frame.getvalue()


class FrameRenderer:
    """Writes frames for a fixed center point.

    Each frame goes out as one write followed by one flush so the terminal
    never shows a half-drawn screen. Streams with a binary buffer get the
    frame as bytes, so words that were not valid UTF-8 reach the terminal
    exactly as they were piped in.
    """

    def __init__(self, row: int, col: int, stream: Optional[IO] = None):
        self.row = row
        self.col = col
        self.stream = stream

    def render(self, center: str, top_left: str = "") -> str:
        """Print a frame and return what was written."""
        frame = build_frame(self.row, self.col, center, top_left)
        stream = self.stream if self.stream is not None else sys.stdout
        target = getattr(stream, "buffer", None)
        if target is None:
            stream.write(frame)
            stream.flush()
        else:
            target.write(frame.encode(WORD_ENCODING, WORD_ERRORS))
            target.flush()
        return frame
