"""Persistence for valuation history, comparison set and reports."""

from assetval.store.store import JsonFileBackend
from assetval.store.store import MemoryBackend
from assetval.store.store import StorageBackend
from assetval.store.store import ValuationStore

__all__ = [
    'JsonFileBackend',
    'MemoryBackend',
    'StorageBackend',
    'ValuationStore',
]
