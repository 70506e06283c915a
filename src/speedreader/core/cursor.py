"""
Shared word cursor.

The presentation loop is the only writer; the interrupt handler is the only
reader. Python runs signal handlers on the main thread between bytecodes, so
the handler can fire while the loop holds the lock. The lock is therefore
reentrant: the handler acquires it in the same thread and still observes
either the value before or after an increment, never a torn one.
"""

import threading


class Cursor:
    """Absolute index into the virtual infinite repetition of the word list."""

    def __init__(self, start: int = 0):
        if start < 0:
            raise ValueError(f"cursor start must be non-negative, got {start}")
        self._value = start
        self._lock = threading.RLock()

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def increment(self) -> int:
        """Advance by one word and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    def __repr__(self) -> str:
        return f"Cursor({self.value})"
