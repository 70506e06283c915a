"""
Presentation Loop

Runs a reading session: a short countdown, then every word in turn at the
center of the terminal, looping over the text as configured. Ctrl-C during
playback is handled by InterruptHandler, which prints a resume hint.
"""

import time
from typing import Callable, Optional

from speedreader.core.cursor import Cursor
from speedreader.core.interrupt import InterruptHandler
from speedreader.core.rsvp import RSVPEngine
from speedreader.settings.settings_models import ReaderOptions
from speedreader.ui.renderer import FrameRenderer
from speedreader.utils.exceptions import EmptyCorpusError
from speedreader.utils.structured_logging import get_logger, log_operation

logger = get_logger(__name__)

COUNTDOWN_FROM = 3
COUNTDOWN_STEP_SECONDS = 1


class PresentationLoop:
    """Orchestrates one reading session.

    Collaborators are injectable so the loop can be driven without a real
    terminal or real time:

    Args:
        engine: Parsed word list
        options: Validated reader options
        renderer: Frame output, defaults to a FrameRenderer on stdout
        sleep: Called with a duration in seconds, defaults to time.sleep
        interrupt_handler_factory: Called with the cursor, must return a
            context manager that is active during playback
    """

    def __init__(
        self,
        engine: RSVPEngine,
        options: ReaderOptions,
        renderer: Optional[FrameRenderer] = None,
        sleep: Optional[Callable[[float], None]] = None,
        interrupt_handler_factory: Callable[[Cursor], InterruptHandler] = InterruptHandler,
    ):
        self.engine = engine
        self.options = options
        self.renderer = renderer or FrameRenderer(options.middle_row, options.middle_col)
        self.sleep = sleep or time.sleep
        self.interrupt_handler_factory = interrupt_handler_factory
        self.cursor: Optional[Cursor] = None

    def countdown(self, start: int = COUNTDOWN_FROM) -> None:
        """Counts down from start to 1, one second per step."""
        for remaining in range(start, 0, -1):
            self.renderer.render(str(remaining), "")
            self.sleep(COUNTDOWN_STEP_SECONDS)

    def should_stop(self, index: int) -> bool:
        """True once the configured number of passes is complete."""
        return not self.options.is_infinite and self.engine.loop_of(index) >= self.options.loop

    def step(self) -> None:
        """Show the word under the cursor, advance, then wait its display time."""
        index = self.cursor.value
        word = self.engine.word_at(index)

        self.renderer.render(word, self.engine.status_text(index))
        self.cursor.increment()

        delay = self.engine.calculate_delay(index, self.options.wpm)
        self.sleep(float(delay))

    def main_loop(self) -> int:
        """Play words until the loop count is reached. Returns the final cursor."""
        while not self.should_stop(self.cursor.value):
            self.step()
        return self.cursor.value

    def run(self) -> int:
        """Run the full session.

        Returns:
            Final cursor value; the end of the last pass after a normal
            finish

        Raises:
            EmptyCorpusError: If there are no words, before anything is drawn
        """
        if self.engine.is_empty:
            raise EmptyCorpusError()

        self.cursor = Cursor(self.options.start_index)

        with log_operation(
            logger,
            "presentation",
            words=self.engine.word_count,
            wpm=self.options.wpm,
            loop=self.options.loop,
            start_index=self.options.start_index,
        ):
            self.countdown()
            with self.interrupt_handler_factory(self.cursor):
                return self.main_loop()
