"""
Pydantic Reader Options Models

This module validates the options of a reading session using Pydantic. It
catches invalid values (negative counts, a zero pace) before the terminal is
taken over and provides clear error messages.

Usage:
    from speedreader.settings.settings_models import validate_options

    options, result = validate_options({"wpm": 400, "loop": 0})
    for warning in result.warnings:
        logger.info(f"Options: {warning}")
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError


# =============================================================================
# Defaults
# =============================================================================

# We need to know the terminal size to center the text
DEFAULT_LINES = 30
DEFAULT_COLS = 80

DEFAULT_WORDS_PER_MINUTE = 200
DEFAULT_LOOP_COUNT = 1
DEFAULT_START_INDEX = 0

RECOMMENDED_MIN_WPM = 300
RECOMMENDED_MAX_WPM = 700


# =============================================================================
# Validation Result
# =============================================================================

@dataclass
class ValidationResult:
    """Result of options validation."""
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


# =============================================================================
# Pydantic Models
# =============================================================================

class ReaderOptions(BaseModel):
    """Options for one reading session. Immutable once built."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    lines: int = Field(default=DEFAULT_LINES, ge=0)
    cols: int = Field(default=DEFAULT_COLS, ge=0)
    wpm: int = Field(default=DEFAULT_WORDS_PER_MINUTE, ge=1)
    loop: int = Field(default=DEFAULT_LOOP_COUNT, ge=0)
    start_index: int = Field(default=DEFAULT_START_INDEX, ge=0)

    @property
    def middle_row(self) -> int:
        return self.lines // 2

    @property
    def middle_col(self) -> int:
        return self.cols // 2

    @property
    def is_infinite(self) -> bool:
        """True when the word list repeats until interrupted."""
        return self.loop == 0


# =============================================================================
# Validation Functions
# =============================================================================

def _format_pydantic_errors(error: ValidationError) -> List[str]:
    """Turn Pydantic error entries into 'field: message' strings."""
    messages = []
    for entry in error.errors():
        location = ".".join(str(part) for part in entry.get("loc", ())) or "options"
        messages.append(f"{location}: {entry.get('msg', 'invalid value')}")
    return messages


def validate_options(raw: Dict[str, Any]) -> Tuple[Optional[ReaderOptions], ValidationResult]:
    """
    Validate a raw options dictionary against ReaderOptions.

    Args:
        raw: Option names mapped to values; missing keys take defaults

    Returns:
        Tuple of (ReaderOptions or None when invalid, ValidationResult)
    """
    result = ValidationResult()

    try:
        options = ReaderOptions(**raw)
    except ValidationError as e:
        result.is_valid = False
        result.errors.extend(_format_pydantic_errors(e))
        return None, result

    if not RECOMMENDED_MIN_WPM <= options.wpm <= RECOMMENDED_MAX_WPM:
        result.warnings.append(
            f"wpm={options.wpm} is outside the recommended range "
            f"{RECOMMENDED_MIN_WPM}-{RECOMMENDED_MAX_WPM}"
        )

    return options, result
