'''
Side-by-side comparison of valued assets.

Produces the attribute-by-asset table shown in the comparison view and
used by the comparison report, plus portfolio totals.
'''

from typing import Any, Dict, List, Sequence, Tuple

import pandas as pd

from assetval.domain.types import ValuationResult

# (label, attribute) in display order
COMPARISON_ROWS: List[Tuple[str, str]] = [
    ('Category', 'category'),
    ('Acquisition Cost', 'acquisition_cost'),
    ('Condition', 'condition'),
    ('Years Owned', 'years_owned'),
    ('Market Value', 'market_value'),
    ('Liquidation Value', 'liquidation_value'),
]


def comparison_table(results: Sequence[ValuationResult]) -> pd.DataFrame:
  '''
  Build the comparison table.

  Args:
    results: Valuations in comparison order

  Returns:
    DataFrame indexed by attribute label with one column per asset
    (column labels are asset names, in input order)
  '''
  data = {
      label: [getattr(r, attribute) for r in results]
      for label, attribute in COMPARISON_ROWS
  }
  df = pd.DataFrame.from_dict(data,
                              orient='index',
                              columns=[r.asset_name for r in results])
  df.index.name = 'Attribute'
  return df


def portfolio_summary(results: Sequence[ValuationResult]) -> Dict[str, Any]:
  '''
  Portfolio totals for a comparison set.

  Returns:
    Dictionary with total_assets, combined_market_value,
    combined_liquidation_value and average_market_value (0.0 when empty)
  '''
  market = pd.Series([r.market_value for r in results], dtype='float64')
  liquidation = pd.Series([r.liquidation_value for r in results],
                          dtype='float64')
  return {
      'total_assets': len(results),
      'combined_market_value': float(market.sum()),
      'combined_liquidation_value': float(liquidation.sum()),
      'average_market_value': float(market.mean()) if len(results) else 0.0,
  }
