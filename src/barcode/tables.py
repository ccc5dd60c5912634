"""
Fixed EAN-13 encoding tables and symbol layout.

Bit strings use '1' for a bar module and '0' for a space module.
"""

from enum import IntEnum


class Parity(IntEnum):
    """Encoding table used for a left-hand digit."""

    ODD = 0
    EVEN = 1


LEFT_ODD: tuple[str, ...] = (
    "0001101", "0011001", "0010011", "0111101", "0100011",
    "0110001", "0101111", "0111011", "0110111", "0001011",
)

LEFT_EVEN: tuple[str, ...] = (
    "0100111", "0110011", "0011011", "0100001", "0011101",
    "0111001", "0000101", "0010001", "0001001", "0010111",
)

RIGHT: tuple[str, ...] = (
    "1110010", "1100110", "1101100", "1000010", "1011100",
    "1001110", "1010000", "1000100", "1001000", "1110100",
)

_O, _E = Parity.ODD, Parity.EVEN

# Indexed by the leading digit; governs digits 2-7
FIRST_DIGIT_PARITY: tuple[tuple[Parity, ...], ...] = (
    (_O, _O, _O, _O, _O, _O),
    (_O, _O, _E, _O, _E, _E),
    (_O, _O, _E, _E, _O, _E),
    (_O, _O, _E, _E, _E, _O),
    (_O, _E, _O, _O, _E, _E),
    (_O, _E, _E, _O, _O, _E),
    (_O, _E, _E, _E, _O, _O),
    (_O, _E, _O, _E, _O, _E),
    (_O, _E, _O, _E, _E, _O),
    (_O, _E, _E, _O, _E, _O),
)

START_GUARD = "101"
MIDDLE_GUARD = "01010"
END_GUARD = "101"

DIGIT_WIDTH = 7
DIGITS_PER_SIDE = 6

LEFT_QUIET_ZONE = 11
RIGHT_QUIET_ZONE = 7
START_GUARD_WIDTH = len(START_GUARD)
LEFT_BLOCK_WIDTH = DIGIT_WIDTH * DIGITS_PER_SIDE
MIDDLE_GUARD_WIDTH = len(MIDDLE_GUARD)
RIGHT_BLOCK_WIDTH = DIGIT_WIDTH * DIGITS_PER_SIDE
END_GUARD_WIDTH = len(END_GUARD)

SEGMENT_WIDTHS: tuple[tuple[str, int], ...] = (
    ("left_quiet", LEFT_QUIET_ZONE),
    ("start_guard", START_GUARD_WIDTH),
    ("left_block", LEFT_BLOCK_WIDTH),
    ("middle_guard", MIDDLE_GUARD_WIDTH),
    ("right_block", RIGHT_BLOCK_WIDTH),
    ("end_guard", END_GUARD_WIDTH),
    ("right_quiet", RIGHT_QUIET_ZONE),
)

PATTERN_LENGTH = sum(width for _, width in SEGMENT_WIDTHS)


def segment_span(name: str) -> range:
    """
    Module positions occupied by a named segment of the symbol.

    Args:
        name: One of the names in SEGMENT_WIDTHS

    Returns:
        Range of pattern indices for that segment
    """
    offset = 0
    for segment, width in SEGMENT_WIDTHS:
        if segment == name:
            return range(offset, offset + width)
        offset += width
    raise KeyError(f"Unknown segment: {name}")


START_GUARD_POSITIONS = frozenset(segment_span("start_guard"))
MIDDLE_GUARD_POSITIONS = frozenset(segment_span("middle_guard"))
END_GUARD_POSITIONS = frozenset(segment_span("end_guard"))
GUARD_POSITIONS = START_GUARD_POSITIONS | MIDDLE_GUARD_POSITIONS | END_GUARD_POSITIONS
