"""Conversion between puzzle characters and digit numbers."""

# Largest digit that has a character: 'Z' encodes 35.
MAX_DIGIT = 35

BLANK = '.'


def digit_to_char(n: int) -> str:
    """
    Convert a digit number to its printable character.

    1-9 map to '1'-'9', 10 and above map to 'A', 'B', ...
    Callers substitute their own glyph for 0.
    """
    if n > 9:
        return chr(ord('A') + n - 10)
    return chr(ord('0') + n)


def char_to_digit(c: str, size: int = 9) -> int:
    """
    Convert an input character to a digit number.

    Args:
        c: A single character.
        size: Grid size; decoded values above it are treated as blank.

    Returns:
        The digit (1 to size), or 0 for blanks and anything unrecognised.
    """
    if '1' <= c <= '9':
        n = ord(c) - ord('0')
    elif 'A' <= c <= 'Z':
        n = ord(c) - ord('A') + 10
    elif 'a' <= c <= 'z':
        n = ord(c) - ord('a') + 10
    else:
        n = 0

    if n > size:
        n = 0
    return n


def is_puzzle_char(c: str) -> bool:
    """Check whether c counts as a cell in an input stream (digit, letter, '.' or ' ')."""
    return (
        c == '.' or c == ' '
        or 'a' <= c <= 'z'
        or 'A' <= c <= 'Z'
        or '0' <= c <= '9'
    )
