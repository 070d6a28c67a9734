"""
Export of valuation tables.

ParquetWriter stores a valuations DataFrame as Parquet next to a
.meta.json sidecar describing when, for which instant and under which
scenarios the rows were produced.
"""

from datetime import datetime
from datetime import timezone
import json
from pathlib import Path
from typing import Any, Dict, Optional

import pandas as pd

# Columns summed into the sidecar when present.
VALUE_COLUMNS = ('acquisition_cost', 'market_value', 'liquidation_value')


def _utc_now_iso() -> str:
  return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def _value_totals(df: pd.DataFrame) -> Dict[str, float]:
  return {
      column: round(float(df[column].sum()), 2)
      for column in VALUE_COLUMNS
      if column in df.columns
  }


class ParquetWriter:
  """Write valuation DataFrames to Parquet with a metadata sidecar."""

  def write(
      self,
      df: pd.DataFrame,
      out_path: Path,
      *,
      metadata: Optional[Dict[str, Any]] = None,
      as_of: Optional[str] = None,
  ) -> Path:
    """
    Write DataFrame to Parquet with sidecar metadata.

    Nested fields (breakdown, diagnostics) cannot be stored; pass frames
    built by assetval.analysis.frames.

    Args:
      df: DataFrame to write
      out_path: Output path
      metadata: Extra keys merged into the sidecar
      as_of: Evaluation instant the rows refer to (ISO format)

    Returns:
      Path of the sidecar metadata file
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_parquet(out_path, index=False)

    meta: Dict[str, Any] = {
        'generated_at_utc': _utc_now_iso(),
        'output': str(out_path),
        'nrows': int(len(df)),
        'ncols': int(df.shape[1]),
        'columns': [str(c) for c in df.columns],
        'totals': _value_totals(df),
    }
    if 'scenario' in df.columns:
      meta['scenarios'] = sorted(str(s) for s in df['scenario'].unique())
    if as_of:
      meta['as_of'] = as_of
    if metadata:
      meta.update(metadata)

    meta_path = out_path.with_suffix(out_path.suffix + '.meta.json')
    meta_path.write_text(json.dumps(meta, ensure_ascii=False, indent=2),
                         encoding='utf-8')
    return meta_path
