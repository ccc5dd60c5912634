"""
Stored barcode model.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.models.base import utc_now
from src.models.enums import BarcodeSymbology, CaptureSource


class BarcodeRecord(BaseModel):
    """
    A validated EAN-13 value as persisted by a barcode store.

    Immutable once created; replacing the stored barcode creates a new record.
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="13-digit EAN code")
    source: CaptureSource = Field(default=CaptureSource.MANUAL)
    checksum_valid: bool = Field(False, description="Whether the check digit matched")
    saved_at: datetime = Field(default_factory=utc_now)

    @field_validator("code")
    @classmethod
    def validate_code(cls, v: str) -> str:
        from src.barcode.validator import is_valid_ean13

        if not is_valid_ean13(v):
            raise ValueError("code must be exactly 13 ASCII digits")
        return v

    @property
    def symbology(self) -> BarcodeSymbology:
        """Symbology of the stored code."""
        return BarcodeSymbology.EAN_13

    @property
    def formatted(self) -> str:
        """Code grouped for display as D-DDDDDD-DDDDD-D."""
        from src.barcode.validator import format_grouped

        return format_grouped(self.code)
