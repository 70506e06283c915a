"""
Unit tests for reader options validation.
"""

import pytest
from pydantic import ValidationError

from speedreader.settings.settings_models import (
    DEFAULT_COLS,
    DEFAULT_LINES,
    DEFAULT_LOOP_COUNT,
    DEFAULT_WORDS_PER_MINUTE,
    ReaderOptions,
    validate_options,
)


class TestReaderOptions:
    """Test the options model."""

    def test_defaults(self):
        options = ReaderOptions()
        assert options.lines == DEFAULT_LINES == 30
        assert options.cols == DEFAULT_COLS == 80
        assert options.wpm == DEFAULT_WORDS_PER_MINUTE == 200
        assert options.loop == DEFAULT_LOOP_COUNT == 1
        assert options.start_index == 0

    def test_center_point(self):
        options = ReaderOptions(lines=31, cols=81)
        assert options.middle_row == 15
        assert options.middle_col == 40

    def test_infinite(self):
        assert ReaderOptions(loop=0).is_infinite
        assert not ReaderOptions(loop=2).is_infinite

    def test_frozen(self):
        options = ReaderOptions()
        with pytest.raises(ValidationError):
            options.wpm = 500

    @pytest.mark.parametrize("field,value", [
        ("lines", -1),
        ("cols", -1),
        ("wpm", 0),
        ("loop", -3),
        ("start_index", -1),
    ])
    def test_rejects_out_of_range(self, field, value):
        with pytest.raises(ValidationError):
            ReaderOptions(**{field: value})

    def test_rejects_unknown_option(self):
        with pytest.raises(ValidationError):
            ReaderOptions(speed=3)


class TestValidateOptions:
    """Test validate_options result reporting."""

    def test_valid_options(self):
        options, result = validate_options({"wpm": 400, "loop": 0})
        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []
        assert options.wpm == 400

    def test_invalid_options_collect_errors(self):
        options, result = validate_options({"wpm": 0, "lines": -2})
        assert options is None
        assert not result.is_valid
        assert any(error.startswith("wpm:") for error in result.errors)
        assert any(error.startswith("lines:") for error in result.errors)

    @pytest.mark.parametrize("wpm", [200, 299, 701, 1500])
    def test_warns_outside_recommended_range(self, wpm):
        options, result = validate_options({"wpm": wpm})
        assert result.is_valid
        assert len(result.warnings) == 1
        assert "recommended range" in result.warnings[0]

    @pytest.mark.parametrize("wpm", [300, 500, 700])
    def test_no_warning_inside_recommended_range(self, wpm):
        _, result = validate_options({"wpm": wpm})
        assert result.warnings == []
