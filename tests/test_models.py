"""
Tests for pydantic models.
"""

import pytest
from pydantic import ValidationError

from src.models import BarcodeRecord, BarcodeSymbology, CaptureSource


class TestBarcodeRecord:
    """Tests for BarcodeRecord model."""

    def test_create_record(self):
        """Test creating a BarcodeRecord with defaults."""
        record = BarcodeRecord(code="4006381333931")

        assert record.code == "4006381333931"
        assert record.source == CaptureSource.MANUAL
        assert record.checksum_valid is False
        assert record.saved_at.tzinfo is not None
        assert record.symbology == BarcodeSymbology.EAN_13

    def test_formatted(self):
        """Test grouped display of the stored code."""
        record = BarcodeRecord(code="0123456789012")
        assert record.formatted == "0-123456-78901-2"

    def test_rejects_invalid_code(self):
        """Test that only 13 ASCII digits are accepted."""
        for code in ["12345", "12345678901a3", ""]:
            with pytest.raises(ValidationError):
                BarcodeRecord(code=code)

    def test_immutable(self):
        """Test that records cannot be modified after creation."""
        record = BarcodeRecord(code="4006381333931")
        with pytest.raises(ValidationError):
            record.code = "5901234123457"

    def test_json_serialization(self):
        """Test the persisted JSON form."""
        record = BarcodeRecord(
            code="4006381333931",
            source=CaptureSource.SCANNER,
            checksum_valid=True,
        )
        restored = BarcodeRecord.model_validate_json(record.model_dump_json())

        assert restored == record
        assert '"source":"scanner"' in record.model_dump_json()
