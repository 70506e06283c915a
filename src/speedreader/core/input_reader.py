"""
Input acquisition.

Retrieves the text that has been piped in on standard input, e.g.
``echo "this is some input" | speedreader``.
"""

import os
import stat
import sys
from typing import IO, Optional

from speedreader.utils.exceptions import InputReadError, NoInputError
from speedreader.utils.structured_logging import get_logger

logger = get_logger(__name__)

# Chunk size for each read call
MAX_SINGLE_READ = 1024 * 1024

INPUT_ENCODING = "utf-8"

# Undecodable bytes survive as lone surrogates and re-encode to the same bytes
DECODE_ERRORS = "surrogateescape"


def is_pipe(stream: IO) -> bool:
    """Check whether the stream is connected to a pipe.

    Raises:
        InputReadError: If the stream cannot be inspected
    """
    try:
        mode = os.fstat(stream.fileno()).st_mode
    except (OSError, ValueError) as e:
        raise InputReadError(f"could not check stat: {e}") from e
    return stat.S_ISFIFO(mode)


def read_input(stream: Optional[IO] = None) -> str:
    """Read all piped text from standard input.

    The whole stream is read until the producer closes it; there is no size
    ceiling.

    Args:
        stream: Text or binary stream to read, defaults to sys.stdin

    Returns:
        The decoded text. Bytes that are not valid UTF-8 are kept as
        surrogate escapes, so encoding with "surrogateescape" gives back the
        exact input

    Raises:
        NoInputError: If the stream is not a pipe (a terminal or a file)
        InputReadError: If reading fails
    """
    if stream is None:
        stream = sys.stdin

    if not is_pipe(stream):
        raise NoInputError()

    source = getattr(stream, "buffer", stream)
    chunks = []
    try:
        while True:
            chunk = source.read(MAX_SINGLE_READ)
            if not chunk:
                break
            chunks.append(chunk)
    except OSError as e:
        raise InputReadError(f"could not read from stdin: {e}") from e

    data = b"".join(chunks)
    logger.debug("Read piped input", bytes=len(data), chunks=len(chunks))
    return data.decode(INPUT_ENCODING, errors=DECODE_ERRORS)
