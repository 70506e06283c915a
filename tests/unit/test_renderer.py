"""
Unit tests for ANSI frame rendering.
"""

import io
import pytest
from unittest.mock import Mock

from speedreader.core.input_reader import read_input
from speedreader.ui.renderer import (
    CLEAR_SCREEN,
    FrameRenderer,
    build_frame,
    start_column,
)


class TestBuildFrame:
    """Test frame layout."""

    def test_exact_layout(self):
        frame = build_frame(15, 40, "hello", "3/10")
        assert frame == "\033[2J\033[15;38Hhello\033[0;0H3/10"

    def test_begins_with_clear_sequence(self):
        assert build_frame(15, 40, "word", "0/1").startswith(CLEAR_SCREEN)

    def test_single_letter_is_not_shifted(self):
        assert build_frame(15, 40, "a", "") == "\033[2J\033[15;40Ha\033[0;0H"

    def test_empty_status(self):
        assert build_frame(15, 40, "3", "").endswith("\033[0;0H")

    def test_same_arguments_give_identical_output(self):
        assert build_frame(15, 40, "again", "1/2") == build_frame(15, 40, "again", "1/2")

    def test_centering_uses_byte_length(self):
        """'naïve' is 6 bytes, so it starts 3 columns left of center."""
        assert "\033[15;37Hnaïve" in build_frame(15, 40, "naïve", "")

    def test_latin1_word_centered_on_its_piped_length(self, make_pipe):
        """A Latin-1 word keeps its 5-byte length and starts 2 columns left of center."""
        word = read_input(make_pipe(b"caf\xe9s"))
        assert "\033[15;38H" in build_frame(15, 40, word, "")


class TestStartColumn:
    """Test horizontal centering."""

    @pytest.mark.parametrize("word,expected", [
        ("a", 40),
        ("ab", 39),
        ("abc", 39),
        ("abcdefghij", 35),
    ])
    def test_start_column(self, word, expected):
        assert start_column(40, word) == expected

    def test_word_wider_than_screen_starts_at_column_zero(self):
        assert start_column(10, "x" * 50) == 0

    def test_one_column_terminal(self):
        """--cols=1 puts the center at column 0, where a single letter starts."""
        assert start_column(0, "a") == 0

    def test_result_of_zero_is_kept(self):
        assert start_column(1, "ab") == 0


class TestFrameRenderer:
    """Test frame output."""

    def test_render_writes_frame(self, frame_stream):
        renderer = FrameRenderer(15, 40, stream=frame_stream)
        written = renderer.render("hi", "0/1")
        assert frame_stream.getvalue() == written
        assert written == "\033[2J\033[15;39Hhi\033[0;0H0/1"

    def test_render_is_one_write_and_one_flush(self):
        stream = Mock(spec=["write", "flush"])
        renderer = FrameRenderer(15, 40, stream=stream)
        renderer.render("word", "1/3")
        assert stream.write.call_count == 1
        assert stream.flush.call_count == 1

    def test_consecutive_frames_each_start_with_clear(self, frame_stream):
        renderer = FrameRenderer(15, 40, stream=frame_stream)
        renderer.render("one", "0/2")
        renderer.render("two", "1/2")
        output = frame_stream.getvalue()
        assert output.count(CLEAR_SCREEN) == 2
        assert output.startswith(CLEAR_SCREEN)

    def test_binary_buffer_gets_one_write_and_one_flush(self):
        stream = Mock(spec=["write", "flush", "buffer"])
        FrameRenderer(15, 40, stream=stream).render("word", "1/3")
        assert stream.buffer.write.call_count == 1
        assert stream.buffer.flush.call_count == 1
        stream.write.assert_not_called()

    def test_invalid_utf8_reaches_terminal_unchanged(self, make_pipe):
        word = read_input(make_pipe(b"caf\xe9s"))
        raw = io.BytesIO()
        terminal = io.TextIOWrapper(raw, encoding="utf-8")

        FrameRenderer(15, 40, stream=terminal).render(word, "0/1")

        assert raw.getvalue() == b"\033[2J\033[15;38Hcaf\xe9s\033[0;0H0/1"

    def test_defaults_to_stdout(self, capsys):
        FrameRenderer(1, 1).render("x", "")
        assert capsys.readouterr().out.startswith(CLEAR_SCREEN)
