"""
Barcode store holding the single saved EAN-13 value.

Observers subscribe to change events instead of relying on a global
notification centre.
"""

from collections.abc import Callable
from enum import Enum
from pathlib import Path

import structlog
from pydantic import ValidationError

from src.barcode.validator import ensure_valid_ean13, validate_ean13_checksum
from src.config import get_settings
from src.models import BarcodeRecord, CaptureSource

logger = structlog.get_logger(__name__)


class StoreEvent(str, Enum):
    """Change events emitted by a barcode store."""

    SAVED = "saved"
    DELETED = "deleted"


StoreListener = Callable[[StoreEvent, BarcodeRecord | None], None]


class BarcodeStore:
    """
    Base class for barcode stores.

    Subclasses implement _read, _write and _clear; validation and event
    delivery live here.
    """

    def __init__(self, strict_checksum: bool = False):
        self.strict_checksum = strict_checksum
        self._listeners: list[StoreListener] = []

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """
        Register a listener for store changes.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def save(self, code: str, source: CaptureSource = CaptureSource.MANUAL) -> BarcodeRecord:
        """
        Validate and persist a barcode, replacing any stored one.

        Raises:
            InvalidInputError: If the code is rejected by the EAN-13 gate
        """
        accepted = ensure_valid_ean13(code, strict=self.strict_checksum)
        record = BarcodeRecord(
            code=accepted,
            source=source,
            checksum_valid=validate_ean13_checksum(accepted),
        )
        self._write(record)
        logger.info(
            "Barcode saved",
            code=record.code,
            source=record.source.value,
            checksum_valid=record.checksum_valid,
        )
        self._notify(StoreEvent.SAVED, record)
        return record

    def get(self) -> BarcodeRecord | None:
        """Get the stored barcode, or None if nothing is stored."""
        return self._read()

    def has_barcode(self) -> bool:
        """Check if a barcode is currently stored."""
        return self.get() is not None

    def delete(self) -> bool:
        """
        Delete the stored barcode.

        Returns:
            True if a barcode was removed
        """
        removed = self._clear()
        if removed:
            logger.info("Barcode deleted")
            self._notify(StoreEvent.DELETED, None)
        return removed

    def _notify(self, event: StoreEvent, record: BarcodeRecord | None) -> None:
        for listener in list(self._listeners):
            listener(event, record)

    def _read(self) -> BarcodeRecord | None:
        raise NotImplementedError

    def _write(self, record: BarcodeRecord) -> None:
        raise NotImplementedError

    def _clear(self) -> bool:
        raise NotImplementedError


class InMemoryBarcodeStore(BarcodeStore):
    """Store kept in process memory."""

    def __init__(self, strict_checksum: bool = False):
        super().__init__(strict_checksum=strict_checksum)
        self._record: BarcodeRecord | None = None

    def _read(self) -> BarcodeRecord | None:
        return self._record

    def _write(self, record: BarcodeRecord) -> None:
        self._record = record

    def _clear(self) -> bool:
        removed = self._record is not None
        self._record = None
        return removed


class JsonFileBarcodeStore(BarcodeStore):
    """Store persisted as a single JSON document on disk."""

    def __init__(self, path: str | Path, strict_checksum: bool = False):
        super().__init__(strict_checksum=strict_checksum)
        self.path = Path(path)

    def _read(self) -> BarcodeRecord | None:
        if not self.path.exists():
            return None
        try:
            return BarcodeRecord.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (ValidationError, UnicodeDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable barcode file", path=str(self.path), error=str(e))
            return None

    def _write(self, record: BarcodeRecord) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            tmp_path.write_text(record.model_dump_json(), encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise

    def _clear(self) -> bool:
        if not self.path.exists():
            return False
        self.path.unlink()
        return True


def get_store() -> BarcodeStore:
    """Build the file-backed store configured in settings."""
    settings = get_settings()
    return JsonFileBarcodeStore(settings.store_path, strict_checksum=settings.strict_checksum)
