"""
Custom exception hierarchy for Speed Reader.
"""


class SpeedReaderError(Exception):
    """Base exception class for Speed Reader."""
    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class InputError(SpeedReaderError):
    """Exceptions related to acquiring text from standard input."""
    pass


class NoInputError(InputError):
    """Raised when standard input is not connected to a pipe."""
    def __init__(self, message: str = "no input", **kwargs):
        kwargs.setdefault("error_code", "INPUT_NOT_PIPED")
        super().__init__(message, **kwargs)


class InputReadError(InputError):
    """Raised when reading from standard input fails."""
    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("error_code", "INPUT_READ_FAILED")
        super().__init__(message, **kwargs)


class EmptyCorpusError(SpeedReaderError):
    """Raised when the input contains no words to present."""
    def __init__(self, message: str = "input contains no words", **kwargs):
        kwargs.setdefault("error_code", "CORPUS_EMPTY")
        super().__init__(message, **kwargs)


class ConfigurationError(SpeedReaderError):
    """Raised when reader options are invalid."""
    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("error_code", "CFG_INVALID_OPTIONS")
        super().__init__(message, **kwargs)
