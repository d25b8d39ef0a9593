"""
Tests for frequency mapping.

Tests cover:
- calculate_frequency for both tuning variants and index mappings
- calculate_cents
- get_note_name cycling
- ratio_label
"""

import math

import pytest

from chuk_mcp_microtonal.core import (
    EqualDivision,
    IndexOutOfRange,
    JustIntonation,
    calculate_cents,
    calculate_frequency,
    cyclic_index,
    get_note_name,
    map_step,
    parse_tuning,
    ratio_label,
)


class TestCyclicIndex:
    """Tests for floored-modulo wrapping."""

    def test_positive(self) -> None:
        assert cyclic_index(0, 3) == 0
        assert cyclic_index(4, 3) == 1

    def test_negative(self) -> None:
        assert cyclic_index(-1, 3) == 2
        assert cyclic_index(-3, 3) == 0
        assert cyclic_index(-4, 3) == 2

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError):
            cyclic_index(1, 0)


class TestEqualDivisionFrequency:
    """Tests for equal-division frequencies."""

    def test_octave(self) -> None:
        tuning = parse_tuning("12ed2")
        assert calculate_frequency(12, tuning, 440.0) == pytest.approx(880.0)
        assert calculate_frequency(0, tuning, 440.0) == pytest.approx(440.0)
        assert calculate_frequency(-12, tuning, 440.0) == pytest.approx(220.0)

    def test_fifth(self) -> None:
        tuning = EqualDivision(12, 2.0)
        assert calculate_frequency(7, tuning, 440.0) == pytest.approx(659.2551, abs=1e-3)

    def test_tritave(self) -> None:
        tuning = parse_tuning("13ed3")
        assert calculate_frequency(13, tuning, 100.0) == pytest.approx(300.0)

    @pytest.mark.parametrize("divisions,interval", [(12, 2.0), (19, 2.0), (13, 3.0), (7, 1.5)])
    def test_full_period_multiplies_by_interval(self, divisions: int, interval: float) -> None:
        """Stepping a full division count multiplies by the interval."""
        tuning = EqualDivision(divisions, interval)
        for step in range(-25, 25):
            low = calculate_frequency(step, tuning, 261.63)
            high = calculate_frequency(step + divisions, tuning, 261.63)
            assert high == pytest.approx(low * interval)


class TestJustIntonationFrequency:
    """Tests for just-intonation frequencies (cyclic, no octave compounding)."""

    def test_steps_within_table(self) -> None:
        tuning = parse_tuning("5-limit")
        assert calculate_frequency(0, tuning, 100.0) == pytest.approx(100.0)
        assert calculate_frequency(1, tuning, 100.0) == pytest.approx(120.0)
        assert calculate_frequency(4, tuning, 100.0) == pytest.approx(150.0)

    def test_wraps_without_octave(self) -> None:
        tuning = parse_tuning("5-limit")
        size = tuning.step_count
        assert calculate_frequency(size, tuning, 100.0) == pytest.approx(100.0)
        assert calculate_frequency(size + 4, tuning, 100.0) == pytest.approx(150.0)

    def test_negative_wraps_backwards(self) -> None:
        tuning = parse_tuning("5-limit")
        assert calculate_frequency(-1, tuning, 100.0) == pytest.approx(500.0 / 3)
        assert calculate_frequency(-7, tuning, 100.0) == pytest.approx(100.0)

    def test_three_limit(self) -> None:
        tuning = JustIntonation.from_limit(3)
        freqs = [calculate_frequency(s, tuning, 300.0) for s in range(3)]
        assert freqs == pytest.approx([300.0, 400.0, 450.0])


class TestIndexMapping:
    """Tests for index mapping."""

    def test_map_step(self) -> None:
        assert map_step(1, [0, 2, 4]) == 2

    def test_map_step_out_of_range(self) -> None:
        with pytest.raises(IndexOutOfRange):
            map_step(3, [0, 2, 4])
        with pytest.raises(IndexOutOfRange):
            map_step(-1, [0, 2, 4])

    def test_mapping_substitutes_step(self) -> None:
        tuning = parse_tuning("12ed2")
        mapping = [0, 2, 4]
        assert calculate_frequency(1, tuning, 440.0, mapping) == pytest.approx(
            440.0 * 2 ** (2 / 12)
        )
        assert calculate_frequency(2, tuning, 440.0, mapping) == pytest.approx(
            440.0 * 2 ** (4 / 12)
        )

    def test_out_of_range_is_silent(self) -> None:
        """A step past the mapping gives no tone, not a number."""
        tuning = parse_tuning("12ed2")
        assert calculate_frequency(3, tuning, 440.0, [0, 2, 4]) is None
        assert calculate_frequency(-1, tuning, 440.0, [0, 2, 4]) is None

    def test_mapping_with_just_intonation(self) -> None:
        tuning = parse_tuning("5-limit")
        # mapped value 8 wraps to index 1 (6/5)
        assert calculate_frequency(0, tuning, 100.0, [8]) == pytest.approx(120.0)

    def test_empty_mapping_silences_everything(self) -> None:
        tuning = parse_tuning("12ed2")
        assert calculate_frequency(0, tuning, 440.0, []) is None

    def test_overflowing_entry_is_silent(self) -> None:
        """2 ** (100000 / 12) does not fit in a float."""
        tuning = parse_tuning("12ed2")
        assert calculate_frequency(1, tuning, 440.0, [0, 100000]) is None
        assert calculate_frequency(0, tuning, 440.0, [0, 100000]) == pytest.approx(440.0)

    def test_underflowing_entry_is_silent(self) -> None:
        tuning = parse_tuning("12ed2")
        assert calculate_frequency(1, tuning, 440.0, [0, -20000]) is None


class TestFrequencyRange:
    """Tests for frequencies beyond float range."""

    def test_huge_base_does_not_raise(self) -> None:
        freq = calculate_frequency(12, parse_tuning("12ed2"), 1e308)
        assert freq is None

    def test_huge_interval_steps_are_silent(self) -> None:
        tuning = EqualDivision(1, 1e300)
        assert calculate_frequency(0, tuning, 440.0) == pytest.approx(440.0)
        assert calculate_frequency(2, tuning, 440.0) is None
        assert calculate_frequency(-2, tuning, 440.0) is None


class TestCents:
    """Tests for cents calculation."""

    def test_same_frequency(self) -> None:
        for f in [1.0, 261.63, 440.0, 12345.6]:
            assert calculate_cents(f, f) == 0

    def test_octave_and_semitone(self) -> None:
        assert calculate_cents(880.0, 440.0) == 1200
        assert calculate_cents(220.0, 440.0) == -1200
        assert calculate_cents(440.0 * 2 ** (1 / 12), 440.0) == 100

    def test_just_fifth(self) -> None:
        assert calculate_cents(660.0, 440.0) == 702

    def test_non_positive_rejected(self) -> None:
        with pytest.raises(ValueError):
            calculate_cents(0.0, 440.0)

    def test_rounds(self) -> None:
        assert calculate_cents(440.0 * 2 ** (0.4 / 1200), 440.0) == 0
        assert isinstance(calculate_cents(500.0, 440.0), int)
        assert calculate_cents(500.0, 440.0) == round(1200 * math.log2(500 / 440))


class TestNoteNames:
    """Tests for note-name cycling."""

    def test_cycles_forward(self) -> None:
        assert get_note_name(0, ["A", "B", "C"]) == "A"
        assert get_note_name(3, ["A", "B", "C"]) == "A"
        assert get_note_name(5, ["A", "B", "C"]) == "C"

    def test_cycles_backward(self) -> None:
        assert get_note_name(-1, ["A", "B", "C"]) == "C"
        assert get_note_name(-4, ["A", "B", "C"]) == "C"

    def test_empty_synthesizes(self) -> None:
        assert get_note_name(5, []) == "Key 5"
        assert get_note_name(-2, ()) == "Key -2"


class TestRatioLabel:
    """Tests for interval labels."""

    def test_just_intonation(self) -> None:
        tuning = parse_tuning("5-limit")
        assert ratio_label(0, tuning) == "1/1"
        assert ratio_label(1, tuning) == "6/5"
        assert ratio_label(-1, tuning) == "5/3"

    def test_equal_division(self) -> None:
        assert ratio_label(7, parse_tuning("12ed2")) == "7\\12"

    def test_silent(self) -> None:
        assert ratio_label(5, parse_tuning("12ed2"), [0, 1]) is None
