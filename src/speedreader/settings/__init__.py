"""
Settings package for Speed Reader.

Reader options are collected from the command line and validated with
Pydantic before a session starts.
"""

from speedreader.settings.settings_models import (
    ReaderOptions,
    ValidationResult,
    validate_options,
)

__all__ = [
    "ReaderOptions",
    "ValidationResult",
    "validate_options",
]
