"""Unit tests for the name table."""

import pytest

from moment_of_symmetry.errors import InvalidInputError
from moment_of_symmetry.names import NameTable, mode_name, names_for, tamnams_info
from moment_of_symmetry.pattern import StepCountPair


class TestPatternNames:
    """Tests for tamnams_info."""

    def test_smitonic(self):
        assert tamnams_info("4L 3s").name == "smitonic"

    def test_abbreviation(self):
        """Explicit abbreviations override the prefix."""
        assert tamnams_info("2L 4s").abbreviation == "alem"

    def test_prefix_fills_abbreviation(self):
        info = tamnams_info("5L 2s")
        assert info.prefix == info.abbreviation == info.family_prefix == "dia"

    def test_subset(self):
        assert not tamnams_info("7L 1s").subset
        assert tamnams_info("1L 6s").subset

    def test_unknown_pattern(self):
        """Missing names are None, not an error."""
        assert tamnams_info("1L 30s") is None

    def test_invalid_pattern(self):
        with pytest.raises(InvalidInputError):
            tamnams_info("diatonic")

    def test_names_for(self):
        assert names_for(StepCountPair(5, 2)).name == "diatonic"


class TestDerivedNames:
    """Names derived from ancestors."""

    def test_wood(self):
        assert tamnams_info("11L 11s").name == "11-wood"

    def test_chromatic(self):
        """Children of a named pattern get a -chromic suffix."""
        assert tamnams_info("7L 9s").name == "armpechromic"
        assert tamnams_info("9L 7s").name == "armmechromic"

    def test_enharmonic(self):
        """Grandchildren get an -enharmic suffix."""
        assert tamnams_info("3L 13s").name == "sephsenharmic"

    def test_derived_names_have_no_prefix(self):
        assert tamnams_info("7L 9s").prefix is None


class TestModeNames:
    """Tests for mode_name."""

    def test_dorian(self):
        assert mode_name("LsLLLsL") == "Dorian"

    def test_major(self):
        assert mode_name("LLsLLLs", True) == "Ionian (Major)"
        assert mode_name("LLsLLLs") == "Ionian"

    def test_other_families(self):
        assert mode_name("LssLsLs") == "Kleeth"
        assert mode_name("LLLLLsL") == "Karakalian"

    def test_unknown(self):
        assert mode_name("LLLLLLL") is None


class TestCustomTable:
    """A NameTable can be built from other data."""

    @pytest.fixture
    def empty(self):
        return NameTable(mos_names={}, mode_names={})

    def test_empty_table(self, empty):
        """Without data nothing is named except woods."""
        assert empty.lookup(5, 2) is None
        assert empty.mode_name("LLsLLLs") is None
        assert empty.lookup(3, 3).name == "3-wood"

    def test_one_entry(self):
        from moment_of_symmetry.info import TamnamsInfo

        table = NameTable(mos_names={"5L 2s": TamnamsInfo("heptatonic", prefix="hep")})
        assert table.lookup(5, 2).name == "heptatonic"
        assert table.lookup(7, 5).name == "hepmechromic"
