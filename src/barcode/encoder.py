"""
EAN-13 module pattern encoding and decoding.
"""

from src.barcode.exceptions import InvalidInputError
from src.barcode.tables import (
    DIGIT_WIDTH,
    DIGITS_PER_SIDE,
    END_GUARD,
    FIRST_DIGIT_PARITY,
    LEFT_EVEN,
    LEFT_ODD,
    LEFT_QUIET_ZONE,
    MIDDLE_GUARD,
    PATTERN_LENGTH,
    RIGHT,
    RIGHT_QUIET_ZONE,
    START_GUARD,
    Parity,
    segment_span,
)
from src.barcode.validator import is_valid_ean13

_LEFT_ODD_DIGITS = {bits: digit for digit, bits in enumerate(LEFT_ODD)}
_LEFT_EVEN_DIGITS = {bits: digit for digit, bits in enumerate(LEFT_EVEN)}
_RIGHT_DIGITS = {bits: digit for digit, bits in enumerate(RIGHT)}


def encode_module_pattern(code: str) -> str:
    """
    Encode an EAN-13 code as a string of bar ('1') and space ('0') modules.

    Layout: quiet zone, start guard, six left digits (odd/even parity chosen
    by the leading digit), middle guard, six right digits, end guard, quiet zone.

    Args:
        code: 13-digit EAN code. The check digit is encoded as given.

    Returns:
        Module pattern, always PATTERN_LENGTH characters long

    Raises:
        InvalidInputError: If code is not exactly 13 ASCII digits
    """
    if not is_valid_ean13(code):
        raise InvalidInputError(f"Cannot encode, expected 13 digits: {code!r}")

    digits = [int(c) for c in code]
    parity = FIRST_DIGIT_PARITY[digits[0]]

    left = []
    for i in range(1, DIGITS_PER_SIDE + 1):
        table = LEFT_ODD if parity[i - 1] == Parity.ODD else LEFT_EVEN
        left.append(table[digits[i]])

    right = [RIGHT[digit] for digit in digits[DIGITS_PER_SIDE + 1:]]

    return "".join(
        [
            "0" * LEFT_QUIET_ZONE,
            START_GUARD,
            *left,
            MIDDLE_GUARD,
            *right,
            END_GUARD,
            "0" * RIGHT_QUIET_ZONE,
        ]
    )


def _slice(pattern: str, segment: str) -> str:
    span = segment_span(segment)
    return pattern[span.start:span.stop]


def _chunks(block: str) -> list[str]:
    return [block[i:i + DIGIT_WIDTH] for i in range(0, len(block), DIGIT_WIDTH)]


def decode_module_pattern(pattern: str) -> str:
    """
    Recover the 13 digits from a module pattern produced by encode_module_pattern.

    The leading digit is not encoded directly; it is inferred from the
    parity sequence of the six left-hand digits.

    Raises:
        InvalidInputError: If the pattern is malformed or contains an
            unknown digit encoding
    """
    if not isinstance(pattern, str) or len(pattern) != PATTERN_LENGTH:
        raise InvalidInputError(f"Module pattern must be {PATTERN_LENGTH} symbols long")
    if set(pattern) - {"0", "1"}:
        raise InvalidInputError("Module pattern may only contain '0' and '1'")

    expected = {
        "left_quiet": "0" * LEFT_QUIET_ZONE,
        "start_guard": START_GUARD,
        "middle_guard": MIDDLE_GUARD,
        "end_guard": END_GUARD,
        "right_quiet": "0" * RIGHT_QUIET_ZONE,
    }
    for segment, bits in expected.items():
        if _slice(pattern, segment) != bits:
            raise InvalidInputError(f"Malformed {segment.replace('_', ' ')}")

    digits: list[int] = []
    parity: list[Parity] = []
    for bits in _chunks(_slice(pattern, "left_block")):
        if bits in _LEFT_ODD_DIGITS:
            digits.append(_LEFT_ODD_DIGITS[bits])
            parity.append(Parity.ODD)
        elif bits in _LEFT_EVEN_DIGITS:
            digits.append(_LEFT_EVEN_DIGITS[bits])
            parity.append(Parity.EVEN)
        else:
            raise InvalidInputError(f"Unknown left-hand digit encoding: {bits}")

    try:
        first_digit = FIRST_DIGIT_PARITY.index(tuple(parity))
    except ValueError:
        raise InvalidInputError("Left-hand parity does not match any leading digit") from None

    for bits in _chunks(_slice(pattern, "right_block")):
        if bits not in _RIGHT_DIGITS:
            raise InvalidInputError(f"Unknown right-hand digit encoding: {bits}")
        digits.append(_RIGHT_DIGITS[bits])

    return str(first_digit) + "".join(str(d) for d in digits)
