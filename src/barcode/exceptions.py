"""
Exceptions raised by the barcode codec and renderer.
"""


class BarcodeError(Exception):
    """Base class for codec and rendering errors."""


class InvalidInputError(BarcodeError, ValueError):
    """Input is not a well-formed EAN-13 value or module pattern."""


class InvalidGeometryError(BarcodeError, ValueError):
    """Rendering geometry would produce an empty or negative raster."""
