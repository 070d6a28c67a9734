'''
Tabular views of valuation results.

Flattens ValuationResult objects into pandas DataFrames for aggregation,
comparison and export.
'''

from typing import Iterable, List

import pandas as pd

from assetval.domain.types import ValuationResult

COLUMNS: List[str] = [
    'id',
    'asset_name',
    'category',
    'acquisition_date',
    'acquisition_cost',
    'condition',
    'useful_life',
    'market_comparable',
    'liquidation_factor',
    'market_demand',
    'economic_condition',
    'years_owned',
    'market_value',
    'liquidation_value',
    'scenario',
    'calculated_at',
]


def result_row(result: ValuationResult) -> dict:
  '''Convert ValuationResult to a flat dictionary for a DataFrame row.'''
  row = result.to_dict()
  return {column: row[column] for column in COLUMNS}


def valuations_frame(results: Iterable[ValuationResult]) -> pd.DataFrame:
  '''
  Build a DataFrame with one row per valuation.

  Nested fields (breakdown, diagnostics) are dropped; notes are omitted.

  Args:
    results: Valuation results in display order

  Returns:
    DataFrame with COLUMNS (empty with those columns if no results)
  '''
  rows = [result_row(r) for r in results]
  return pd.DataFrame(rows, columns=COLUMNS)
