"""Error codes and messages for the Speed Reader command line."""

from typing import Dict, Tuple

# Error code format: CATEGORY_SPECIFIC_ERROR
# Categories: INPUT, CORPUS, CFG (Configuration)

ERROR_CODES: Dict[str, Tuple[str, str]] = {
    # Input Errors
    "INPUT_NOT_PIPED": (
        "No input",
        "Pipe some text into the reader, e.g. 'cat book.txt | speedreader --wpm=400'."
    ),
    "INPUT_READ_FAILED": (
        "Could not read input",
        "Reading from standard input failed. Check that the producing command is still running."
    ),

    # Corpus Errors
    "CORPUS_EMPTY": (
        "Nothing to read",
        "The piped input contains only whitespace."
    ),

    # Configuration Errors
    "CFG_INVALID_OPTIONS": (
        "Invalid options",
        "Flags take non-negative integers and --wpm must be at least 1. See 'speedreader --help'."
    ),

    # Generic fallback
    "UNKNOWN_ERROR": (
        "Unexpected error occurred",
        "An unexpected error occurred. Run again with SPEEDREADER_LOG_LEVEL=DEBUG for details."
    )
}


def get_error_message(error_code: str, details: str = "") -> Tuple[str, str]:
    """Get formatted error title and message with troubleshooting hints.

    Args:
        error_code: The error code from ERROR_CODES
        details: Additional error details

    Returns:
        Tuple of (title, message)
    """
    if error_code not in ERROR_CODES:
        error_code = "UNKNOWN_ERROR"

    title, hint = ERROR_CODES[error_code]

    message_parts = [hint]

    if details:
        message_parts.append(f"Details: {details}")

    if error_code != "UNKNOWN_ERROR":
        message_parts.append(f"Error code: {error_code}")

    return title, "\n".join(message_parts)


def format_error_for_console(error_code: str, details: str = "") -> str:
    """Render an error as plain text suitable for standard error.

    Args:
        error_code: The error code from ERROR_CODES
        details: Additional error details

    Returns:
        Multi-line string starting with the error title
    """
    title, message = get_error_message(error_code, details)
    return f"{title}\n{message}"
