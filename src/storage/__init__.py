"""
Barcode persistence at the edge of the codec.
"""

from src.storage.store import (
    BarcodeStore,
    InMemoryBarcodeStore,
    JsonFileBarcodeStore,
    StoreEvent,
    get_store,
)

__all__ = [
    "BarcodeStore",
    "InMemoryBarcodeStore",
    "JsonFileBarcodeStore",
    "StoreEvent",
    "get_store",
]
