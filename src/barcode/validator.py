"""
Barcode validation utilities for EAN/UPC codes.
"""

import re

from src.barcode.exceptions import InvalidInputError

EAN13_LENGTH = 13

_ASCII_DIGITS = re.compile(r"[0-9]+")


def is_ascii_numeric(code: object) -> bool:
    """Check that a value is a non-empty string of ASCII digits only."""
    return isinstance(code, str) and _ASCII_DIGITS.fullmatch(code) is not None


def is_valid_ean13(code: object) -> bool:
    """
    Check the EAN-13 format: exactly 13 ASCII digits.

    The check digit is not verified here; see validate_ean13_checksum.
    """
    return is_ascii_numeric(code) and len(code) == EAN13_LENGTH  # type: ignore[arg-type]


def calculate_gtin_check_digit(body: str) -> int:
    """
    Calculate the GS1 mod-10 check digit for any GTIN body.

    Algorithm:
    1. Starting from the rightmost body digit, multiply by 3, 1, 3, 1, ...
    2. Sum all results
    3. Checksum = (10 - (sum mod 10)) mod 10

    Works for EAN-8 (7 digits), UPC-A (11), EAN-13 (12) and GTIN-14 (13) bodies.
    """
    if not is_ascii_numeric(body):
        raise InvalidInputError(f"GTIN body must be ASCII digits: {body!r}")

    total = 0
    for i, digit in enumerate(reversed(body)):
        weight = 3 if i % 2 == 0 else 1
        total += int(digit) * weight

    return (10 - (total % 10)) % 10


def compute_check_digit(first12: str) -> int:
    """
    Calculate EAN-13 checksum digit.

    Algorithm:
    1. Multiply digits at odd positions (1, 3, 5, ...) by 1
    2. Multiply digits at even positions (2, 4, 6, ...) by 3
    3. Sum all results
    4. Checksum = (10 - (sum mod 10)) mod 10

    Args:
        first12: The first 12 digits of an EAN-13 code

    Raises:
        InvalidInputError: If the input is not exactly 12 ASCII digits
    """
    if not is_ascii_numeric(first12) or len(first12) != EAN13_LENGTH - 1:
        raise InvalidInputError(f"Expected 12 digits for EAN-13 check digit: {first12!r}")

    return calculate_gtin_check_digit(first12)


def validate_ean13_checksum(code: str) -> bool:
    """
    Validate EAN-13 checksum.

    Args:
        code: 13-digit EAN code

    Returns:
        True if checksum is valid
    """
    if not is_valid_ean13(code):
        return False

    return compute_check_digit(code[:12]) == int(code[-1])


def ensure_valid_ean13(code: object, strict: bool = False) -> str:
    """
    Accept a captured value as an EAN-13 code or reject it.

    Args:
        code: Candidate value from a scanner or manual entry
        strict: Also require a correct check digit

    Returns:
        The accepted code

    Raises:
        InvalidInputError: If the value is not 13 digits, or the checksum
            is wrong while strict
    """
    if code is None:
        raise InvalidInputError("No barcode value supplied")
    if not is_valid_ean13(code):
        raise InvalidInputError(f"Invalid EAN-13 format, must be 13 digits: {code!r}")
    if strict and not validate_ean13_checksum(code):  # type: ignore[arg-type]
        raise InvalidInputError(f"Invalid EAN-13 checksum: {code}")
    return code  # type: ignore[return-value]


def format_grouped(code: str) -> str:
    """
    Format an EAN-13 code for display as D-DDDDDD-DDDDD-D.

    Values that are not 13-character strings are returned unchanged.
    """
    if not isinstance(code, str) or len(code) != EAN13_LENGTH:
        return code
    return f"{code[0]}-{code[1:7]}-{code[7:12]}-{code[12]}"


def calculate_ean8_checksum(code: str) -> int:
    """
    Calculate EAN-8 checksum digit.

    Algorithm is similar to EAN-13 but with 7 digits.
    """
    if len(code) < 7:
        raise InvalidInputError("Code must have at least 7 digits for EAN-8")

    return calculate_gtin_check_digit(code[:7])


def validate_ean8_checksum(code: str) -> bool:
    """
    Validate EAN-8 checksum.

    Args:
        code: 8-digit EAN code

    Returns:
        True if checksum is valid
    """
    if len(code) != 8 or not is_ascii_numeric(code):
        return False

    return calculate_ean8_checksum(code) == int(code[-1])


def validate_upc_checksum(code: str) -> bool:
    """
    Validate UPC-A checksum.

    UPC-A uses the same algorithm as EAN-13 (UPC-A is essentially EAN-13 with leading 0).

    Args:
        code: 12-digit UPC-A code

    Returns:
        True if checksum is valid
    """
    if len(code) != 12 or not is_ascii_numeric(code):
        return False

    return calculate_gtin_check_digit(code[:11]) == int(code[-1])
