"""
EAN-13 codec: validation, check digits, module patterns and rasterization.
"""

from src.barcode.encoder import decode_module_pattern, encode_module_pattern
from src.barcode.exceptions import BarcodeError, InvalidGeometryError, InvalidInputError
from src.barcode.renderer import Bar, Bitmap, RenderGeometry, rasterize, render_ean13
from src.barcode.tables import PATTERN_LENGTH, Parity
from src.barcode.validator import (
    calculate_gtin_check_digit,
    compute_check_digit,
    ensure_valid_ean13,
    format_grouped,
    is_valid_ean13,
    validate_ean8_checksum,
    validate_ean13_checksum,
    validate_upc_checksum,
)

__all__ = [
    # Errors
    "BarcodeError",
    "InvalidInputError",
    "InvalidGeometryError",
    # Validation
    "is_valid_ean13",
    "compute_check_digit",
    "calculate_gtin_check_digit",
    "ensure_valid_ean13",
    "format_grouped",
    "validate_ean13_checksum",
    "validate_ean8_checksum",
    "validate_upc_checksum",
    # Encoding
    "PATTERN_LENGTH",
    "Parity",
    "encode_module_pattern",
    "decode_module_pattern",
    # Rendering
    "Bar",
    "Bitmap",
    "RenderGeometry",
    "rasterize",
    "render_ean13",
]
