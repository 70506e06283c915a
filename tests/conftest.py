"""Shared pytest fixtures and configuration."""
import io
import os
import sys
import contextlib
import pytest
from pathlib import Path
from unittest.mock import Mock

# Add src directory to path (matches main.py behavior for imports)
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / 'src'))

from speedreader.core.rsvp import RSVPEngine
from speedreader.settings.settings_models import ReaderOptions
from speedreader.ui.renderer import FrameRenderer


class SleepRecorder:
    """Stands in for time.sleep and remembers every requested duration."""

    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def frame_stream():
    """In-memory stdout replacement for renderer output."""
    return io.StringIO()


@pytest.fixture
def fake_sleep():
    """Sleep replacement that records durations instead of waiting."""
    return SleepRecorder()


@pytest.fixture
def mock_renderer():
    """Renderer double recording (center, top_left) calls."""
    return Mock(spec=FrameRenderer)


@pytest.fixture
def no_interrupt_handler():
    """Interrupt handler factory that installs nothing."""
    return lambda cursor: contextlib.nullcontext()


@pytest.fixture
def make_engine():
    """Build an RSVPEngine from raw text."""
    def _make(text):
        engine = RSVPEngine()
        engine.parse_text(text)
        return engine
    return _make


@pytest.fixture
def make_options():
    """Build ReaderOptions for an 80x30 terminal at 600 wpm unless overridden."""
    def _make(**overrides):
        values = {"lines": 30, "cols": 80, "wpm": 600, "loop": 1, "start_index": 0}
        values.update(overrides)
        return ReaderOptions(**values)
    return _make


@pytest.fixture
def make_pipe():
    """Create a real OS pipe pre-filled with data; returns the read end.

    Data must fit in the pipe buffer since nothing drains it concurrently.
    """
    opened = []

    def _make(data: bytes, binary: bool = False):
        read_fd, write_fd = os.pipe()
        with os.fdopen(write_fd, "wb") as writer:
            writer.write(data)
        reader = os.fdopen(read_fd, "rb" if binary else "r")
        opened.append(reader)
        return reader

    yield _make

    for reader in opened:
        reader.close()
