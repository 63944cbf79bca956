"""Unit tests for StepCountPair and pattern parsing."""

import pytest

from moment_of_symmetry.errors import InvalidInputError
from moment_of_symmetry.pattern import StepCountPair, mos_pattern_string, parse_mos_pattern


class TestStepCountPair:
    """Tests for the StepCountPair value type."""

    def test_single_period(self):
        counts = StepCountPair(5, 2)
        assert counts.size == 7
        assert counts.number_of_periods == 1
        assert counts.is_single_period
        assert counts.period == 7

    def test_multi_period(self):
        """Periods are the gcd of the counts."""
        counts = StepCountPair(4, 2)
        assert counts.number_of_periods == 2
        assert not counts.is_single_period
        assert counts.period == 3
        assert counts.primitive() == StepCountPair(2, 1)

    def test_one_kind_of_step(self):
        """A pattern may lack one kind of step, but not both."""
        assert StepCountPair(0, 3).number_of_periods == 3
        with pytest.raises(InvalidInputError):
            StepCountPair(0, 0)

    def test_negative_rejected(self):
        with pytest.raises(InvalidInputError):
            StepCountPair(-1, 2)

    def test_whole_floats_become_ints(self):
        """Whole floats are stored as ints so gcd-based properties work."""
        counts = StepCountPair(4.0, 2.0)
        assert type(counts.number_of_large_steps) is int
        assert type(counts.number_of_small_steps) is int
        assert counts.number_of_periods == 2
        assert counts == StepCountPair(4, 2)
        assert str(counts) == "4L 2s"
        with pytest.raises(InvalidInputError):
            StepCountPair(4.5, 2)

    def test_str(self):
        assert str(StepCountPair(5, 2)) == "5L 2s"

    def test_constructors_agree(self):
        """String and integer entry points give the same value."""
        assert StepCountPair.from_pattern("5L 2s") == StepCountPair.from_counts(5, 2)

    def test_hashable(self):
        """Frozen pairs can key dictionaries."""
        assert {StepCountPair(5, 2): "diatonic"}[StepCountPair(5, 2)] == "diatonic"


class TestParsing:
    """Tests for parse_mos_pattern."""

    def test_parse(self):
        assert parse_mos_pattern("4L 3s") == StepCountPair(4, 3)

    def test_whitespace(self):
        assert parse_mos_pattern(" 10L 2s ") == StepCountPair(10, 2)

    @pytest.mark.parametrize("text", ["", "5L2", "5s 2L", "L s", "5L 2s 1"])
    def test_invalid(self, text):
        with pytest.raises(InvalidInputError):
            parse_mos_pattern(text)

    def test_format_round_trip(self):
        assert mos_pattern_string(7, 5) == "7L 5s"
        assert str(parse_mos_pattern(mos_pattern_string(7, 5))) == "7L 5s"
