"""
RSVP Core Engine

Core RSVP (Rapid Serial Visual Presentation) functionality:
- Text parsing into whitespace-delimited words
- Timing calculations based on WPM, word length and trailing punctuation
- Wrap-around indexing so a session can loop over the text

Durations are exact fractions of a second. The reference cadence is defined
with integer percentages, and rational arithmetic reproduces it to the
millisecond while keeping every lower bound exact.
"""

import re
from fractions import Fraction
from typing import List

# The word length which we consider we can read in a normal time.
# The average word length is actually 5.1 letters.
AVERAGE_WORD_LENGTH = 5

# For each letter over the average, the percentage increase in display time
PERCENTAGE_INCREASE_PER_LETTER = 20

# Extra display time for words ending a clause or sentence
PERCENTAGE_INCREASE_PAUSE = 50

PAUSE_CHARACTERS = b".,:"

# Words arrive as bytes; invalid UTF-8 is carried as surrogate escapes
WORD_ENCODING = "utf-8"
WORD_ERRORS = "surrogateescape"

SECONDS_PER_MINUTE = 60

# Unicode White_Space. str.split() also breaks on the \x1c-\x1f separators,
# which are part of a word here.
WHITESPACE = re.compile(
    "[\t\n\v\f\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


def tokenize(text: str) -> List[str]:
    """Split text into the ordered list of maximal non-whitespace runs."""
    return [word for word in WHITESPACE.split(text) if word]


def byte_length(word: str) -> int:
    """Length of the word in bytes as it arrived, used for both timing and centering."""
    return len(word.encode(WORD_ENCODING, WORD_ERRORS))


def should_pause(word: str) -> bool:
    """For a given word, works out if there should be an additional pause."""
    encoded = word.encode(WORD_ENCODING, WORD_ERRORS)
    return bool(encoded) and encoded[-1] in PAUSE_CHARACTERS


def base_period(wpm: int) -> Fraction:
    """Seconds per word at the given pace, before any scaling."""
    if wpm <= 0:
        raise ValueError(f"wpm must be positive, got {wpm}")
    return Fraction(SECONDS_PER_MINUTE, wpm)


def display_duration(word: str, wpm: int) -> Fraction:
    """Calculate how long a word stays on screen.

    The time is the base period for the pace, scaled up for words longer than
    the average so there is a bit more time to read them, then stretched
    again if the word ends in a pause character. Both factors compound.

    Args:
        word: The displayed word
        wpm: Words per minute setting

    Returns:
        Display time in seconds
    """
    duration = base_period(wpm)

    length = byte_length(word)
    if length > AVERAGE_WORD_LENGTH:
        increase = 100 + (length - AVERAGE_WORD_LENGTH) * PERCENTAGE_INCREASE_PER_LETTER
        duration = duration * increase / 100

    if should_pause(word):
        duration = duration * (100 + PERCENTAGE_INCREASE_PAUSE) / 100

    return duration


class RSVPEngine:
    """Core engine for RSVP text processing and timing.

    Indexes passed to the engine are absolute positions in the virtual
    infinite repetition of the word list, so ``word_at(N)`` is the first word
    again and ``loop_of(N)`` is 1.
    """

    def __init__(self):
        self.words: List[str] = []

    def parse_text(self, text: str) -> None:
        """Parse text into words.

        Args:
            text: Raw text to parse
        """
        self.words = tokenize(text)

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def is_empty(self) -> bool:
        return not self.words

    def word_at(self, index: int) -> str:
        """Get the word shown at an absolute index."""
        return self.words[index % len(self.words)]

    def loop_of(self, index: int) -> int:
        """Number of completed passes over the word list before index."""
        return index // len(self.words)

    def status_text(self, index: int) -> str:
        """Progress string shown in the top-left corner, e.g. ``"12/340"``."""
        return f"{index}/{len(self.words)}"

    def calculate_delay(self, index: int, wpm: int) -> Fraction:
        """Calculate display time in seconds for the word at an absolute index."""
        return display_duration(self.word_at(index), wpm)

    @staticmethod
    def calculate_time_remaining(words_remaining: int, wpm: int) -> str:
        """Estimate reading time left at the base pace.

        Args:
            words_remaining: Number of words left
            wpm: Words per minute

        Returns:
            Formatted time string
        """
        if wpm <= 0:
            return "..."

        seconds_remaining = (words_remaining * SECONDS_PER_MINUTE) / wpm

        if seconds_remaining < 60:
            return f"~{int(seconds_remaining)} sec remaining"
        else:
            minutes = int(seconds_remaining // 60)
            seconds = int(seconds_remaining % 60)
            return f"~{minutes}:{seconds:02d} remaining"


__all__ = [
    'RSVPEngine',
    'tokenize',
    'byte_length',
    'should_pause',
    'base_period',
    'display_duration',
]
