"""
Persistence store for valuation history.

Holds three append-only collections: saved valuations, the comparison set
and generated report records. Collections are serialized as JSON under a
key in a StorageBackend, so a file-backed store survives restarts.
"""

from abc import ABC, abstractmethod
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from assetval.domain.types import ReportRecord
from assetval.domain.types import ValuationResult

logger = logging.getLogger(__name__)

VALUATIONS_KEY = 'valuations'
COMPARISON_KEY = 'comparison_assets'
REPORTS_KEY = 'reports'


class StorageBackend(ABC):
  """
  Interface for a string key-value store.

  Responsibilities:
  - Return the stored text for a key, or None
  - Replace the stored text for a key
  """

  @abstractmethod
  def get(self, key: str) -> Optional[str]:
    """Return stored text for key, or None if never set."""

  @abstractmethod
  def set(self, key: str, value: str) -> None:
    """Store text under key, replacing any previous value."""


class MemoryBackend(StorageBackend):
  """In-process backend, lost on exit."""

  def __init__(self):
    self._data: Dict[str, str] = {}

  def get(self, key: str) -> Optional[str]:
    return self._data.get(key)

  def set(self, key: str, value: str) -> None:
    self._data[key] = value


class JsonFileBackend(StorageBackend):
  """One UTF-8 JSON file per key under a root directory."""

  def __init__(self, root: Path):
    """
    Initialize file backend.

    Args:
      root: Directory holding <key>.json files (created on first write)
    """
    self.root = Path(root)

  def _path(self, key: str) -> Path:
    return self.root / f'{key}.json'

  def get(self, key: str) -> Optional[str]:
    path = self._path(key)
    if not path.exists():
      return None
    return path.read_text(encoding='utf-8')

  def set(self, key: str, value: str) -> None:
    path = self._path(key)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + '.tmp')
    tmp_path.write_text(value, encoding='utf-8')
    tmp_path.replace(path)


class ValuationStore:
  """
  Valuation history, comparison set and report records.

  Lists are kept newest first, except the comparison set which keeps
  insertion order (it drives column order in comparison tables).
  """

  def __init__(self, backend: Optional[StorageBackend] = None):
    """
    Initialize store.

    Args:
      backend: StorageBackend (default: MemoryBackend)
    """
    self.backend = backend if backend is not None else MemoryBackend()

  def _load(self, key: str) -> List[Dict[str, Any]]:
    raw = self.backend.get(key)
    if raw is None:
      return []
    records = json.loads(raw)
    if not isinstance(records, list):
      raise ValueError(f'Corrupt store entry {key!r}: expected a list')
    return records

  def _save(self, key: str, records: List[Dict[str, Any]]) -> None:
    self.backend.set(key, json.dumps(records, ensure_ascii=False, indent=2))

  def save_valuation(self, result: ValuationResult) -> None:
    """Prepend a valuation to the history."""
    records = self._load(VALUATIONS_KEY)
    records.insert(0, result.to_dict())
    self._save(VALUATIONS_KEY, records)
    logger.info('Saved valuation %s (%s)', result.id, result.asset_name)

  def list_valuations(self) -> List[ValuationResult]:
    """Return saved valuations, newest first."""
    return [
        ValuationResult.from_dict(r) for r in self._load(VALUATIONS_KEY)
    ]

  def get_valuation(self, result_id: str) -> ValuationResult:
    """
    Return the saved valuation with the given id.

    Raises:
      KeyError: If no valuation has that id
    """
    for record in self._load(VALUATIONS_KEY):
      if str(record.get('id')) == result_id:
        return ValuationResult.from_dict(record)
    raise KeyError(f'No valuation with id {result_id!r}')

  def add_to_comparison(self, result: ValuationResult) -> bool:
    """
    Append a valuation to the comparison set.

    Returns:
      False (and leaves the set unchanged) if it is already present
    """
    records = self._load(COMPARISON_KEY)
    if any(str(r.get('id')) == result.id for r in records):
      logger.info('Asset already in comparison: %s', result.asset_name)
      return False
    records.append(result.to_dict())
    self._save(COMPARISON_KEY, records)
    return True

  def list_comparison(self) -> List[ValuationResult]:
    """Return the comparison set in insertion order."""
    return [
        ValuationResult.from_dict(r) for r in self._load(COMPARISON_KEY)
    ]

  def clear_comparison(self) -> None:
    """Empty the comparison set."""
    self._save(COMPARISON_KEY, [])

  def save_report(self, record: ReportRecord) -> None:
    """Prepend a report record."""
    records = self._load(REPORTS_KEY)
    records.insert(0, record.to_dict())
    self._save(REPORTS_KEY, records)

  def list_reports(self) -> List[ReportRecord]:
    """Return report records, newest first."""
    return [ReportRecord.from_dict(r) for r in self._load(REPORTS_KEY)]
