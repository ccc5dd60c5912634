"""
Pydantic models and enumerations.
"""

from src.models.base import utc_now
from src.models.enums import BarcodeSymbology, CaptureSource
from src.models.record import BarcodeRecord

__all__ = [
    "BarcodeRecord",
    "BarcodeSymbology",
    "CaptureSource",
    "utc_now",
]
