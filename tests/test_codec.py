"""Unit tests for the digit codec."""

import pytest
from propsudoku.core.codec import digit_to_char, char_to_digit, is_puzzle_char


class TestDigitToChar:
    """Tests for digit_to_char."""

    def test_decimal_digits(self):
        assert [digit_to_char(n) for n in range(1, 10)] == list("123456789")

    def test_letters_above_nine(self):
        assert digit_to_char(10) == 'A'
        assert digit_to_char(16) == 'G'
        assert digit_to_char(35) == 'Z'


class TestCharToDigit:
    """Tests for char_to_digit."""

    def test_decimal_digits(self):
        assert char_to_digit('1') == 1
        assert char_to_digit('9') == 9

    def test_blanks(self):
        """Dots, spaces, zeros and punctuation all decode to blank."""
        for c in ['.', ' ', '0', '-', '|', '\n']:
            assert char_to_digit(c) == 0

    def test_letters_case_insensitive(self):
        assert char_to_digit('A', size=16) == 10
        assert char_to_digit('a', size=16) == 10
        assert char_to_digit('G', size=16) == 16
        assert char_to_digit('g', size=16) == 16

    def test_clamped_to_grid_size(self):
        """Digits beyond the grid size decode to blank instead of failing."""
        assert char_to_digit('A') == 0
        assert char_to_digit('5', size=4) == 0
        assert char_to_digit('H', size=16) == 0

    @pytest.mark.parametrize("size", [4, 9, 16, 25])
    def test_round_trip(self, size):
        """Every digit of a grid survives encoding and decoding."""
        for n in range(1, size + 1):
            assert char_to_digit(digit_to_char(n), size) == n


class TestPuzzleChar:
    """Tests for the input character filter."""

    def test_accepted(self):
        for c in "09azAZ. ":
            assert is_puzzle_char(c)

    def test_rejected(self):
        for c in "\n\t|-+_,*":
            assert not is_puzzle_char(c)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
