"""Unit tests for EDO searches."""

import math

import pytest

from moment_of_symmetry.edo import all_for_edo, any_for_edo, make_edo_map
from moment_of_symmetry.errors import InvalidInputError, OutOfRangeSearchError


@pytest.fixture(scope="module")
def edo_map():
    return make_edo_map(12)


class TestMakeEdoMap:
    """Tests for make_edo_map."""

    def test_size(self, edo_map):
        assert len(edo_map) == 88

    def test_12edo_diatonic(self, edo_map):
        """Basic diatonic lands on 12-EDO."""
        diatonic = [
            info for info in edo_map[12]
            if (info.number_of_large_steps, info.number_of_small_steps) == (5, 2)
        ]
        assert len(diatonic) == 1
        assert diatonic[0].mos_pattern == "5L 2s"
        assert (diatonic[0].size_of_large_step, diatonic[0].size_of_small_step) == (2, 1)
        assert diatonic[0].hardness == "basic"

    def test_31edo_diatonic(self, edo_map):
        """Semisoft diatonic lands on 31-EDO."""
        patterns = {(info.mos_pattern, info.hardness) for info in edo_map[31]}
        assert ("5L 2s", "semisoft") in patterns

    def test_every_entry_lands_on_its_edo(self, edo_map):
        for edo, infos in edo_map.items():
            for info in infos:
                assert info.edo == edo


class TestAnyForEdo:
    """Tests for any_for_edo."""

    def test_12edo(self):
        info = any_for_edo(12)
        assert info.edo == 12
        assert info.mos_pattern == "5L 2s"
        assert info.period <= 12

    def test_2edo(self):
        """The smallest EDO only has the trivial pattern."""
        info = any_for_edo(2)
        assert info.mos_pattern == "1L 1s"
        assert (info.size_of_large_step, info.size_of_small_step) == (1, 1)
        assert info.hardness == "equalized"
        assert info.name == "trivial"
        assert info.subset is False

    def test_too_small(self):
        with pytest.raises(InvalidInputError):
            any_for_edo(1)

    def test_something_reasonable_for_every_edo(self):
        """Every EDO from 3 to 999 has a pattern between soft-ish and hard."""
        for edo in range(3, 1000):
            info = any_for_edo(edo)
            assert info.edo == edo
            assert info.size_of_large_step <= 3 * info.size_of_small_step
            assert 3 * info.size_of_small_step <= 2 * info.size_of_large_step


class TestAllForEdo:
    """Tests for all_for_edo."""

    def test_12edo(self):
        scales = all_for_edo(12)
        assert len(scales) == 21
        assert all(scale.edo == 12 for scale in scales)

    def test_31edo_reasonable(self):
        scales = all_for_edo(31, 5, 12, 4.5)
        assert len(scales) == 29
        for scale in scales:
            size = scale.number_of_large_steps + scale.number_of_small_steps
            assert 5 <= size <= 12
            assert scale.size_of_large_step / scale.size_of_small_step <= 4.5

    def test_size_constraints(self):
        for scale in all_for_edo(12, 5, 7):
            assert 5 <= scale.number_of_large_steps + scale.number_of_small_steps <= 7

    def test_hardness_constraint(self):
        allowed = {
            "equalized", "supersoft", "soft", "semisoft", "basic",
            "semihard", "hard", "parasoft", "quasisoft", "minisoft",
            "minihard", "quasihard", "parahard", "ultrasoft",
        }
        for scale in all_for_edo(12, 2, 12, 2):
            assert scale.size_of_large_step <= 2 * scale.size_of_small_step
            assert scale.hardness in allowed

    def test_out_of_range(self):
        with pytest.raises(OutOfRangeSearchError):
            all_for_edo(9, 1, 9)
        with pytest.raises(OutOfRangeSearchError):
            all_for_edo(9, 2, 10)

    def test_53edo_smitonic(self):
        """4L 3s with steps 11 and 3."""
        scales = all_for_edo(53, 5, 12)
        assert 4 * 11 + 3 * 3 == 53
        assert "4L 3s" in [scale.mos_pattern for scale in scales]

    def test_steps_are_coprime(self):
        """Each pattern appears once per reduced step ratio."""
        seen = set()
        for scale in all_for_edo(24):
            key = (scale.mos_pattern, scale.size_of_large_step, scale.size_of_small_step)
            assert key not in seen
            seen.add(key)
            assert scale.size_of_large_step > scale.size_of_small_step
            assert math.gcd(scale.size_of_large_step, scale.size_of_small_step) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
