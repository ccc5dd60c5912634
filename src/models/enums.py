"""
Enumerations shared by the codec and the storage layer.
"""

from enum import Enum


class BarcodeSymbology(str, Enum):
    """Supported barcode symbologies."""

    EAN_13 = "EAN-13"
    EAN_8 = "EAN-8"
    UPC_A = "UPC-A"


class CaptureSource(str, Enum):
    """How a barcode value was captured."""

    SCANNER = "scanner"
    MANUAL = "manual"
