'''
Row builders for valuation reports.

Pure functions turning results into rows of display strings. The PDF
writer lays these out; tests and other front ends can use them directly.
'''

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Sequence

from assetval.analysis.comparison import comparison_table
from assetval.analysis.comparison import portfolio_summary
from assetval.domain.types import ValuationResult

Row = List[str]

CURRENCY_LABELS = ('Acquisition Cost', 'Market Value', 'Liquidation Value')


def format_currency(value: float) -> str:
  '''Format as whole US dollars, e.g. -$1,235.'''
  dollars = Decimal(repr(float(value))).quantize(Decimal('1'),
                                                 rounding=ROUND_HALF_UP)
  if dollars == 0:
    return '$0'
  sign = '-' if dollars < 0 else ''
  return f'{sign}${abs(dollars):,}'


def format_date(value: date) -> str:
  '''Format as e.g. Mar 5, 2024.'''
  return f'{value:%b} {value.day}, {value.year}'


def asset_info_rows(result: ValuationResult) -> List[Row]:
  asset = result.asset
  return [
      ['Asset Name', asset.asset_name],
      ['Category', asset.category],
      ['Acquisition Date', format_date(asset.acquisition_date)],
      ['Acquisition Cost', format_currency(asset.acquisition_cost)],
      ['Condition', asset.condition.capitalize()],
      ['Useful Life', f'{asset.useful_life} years'],
  ]


def result_rows(result: ValuationResult) -> List[Row]:
  return [
      [
          'Market Value',
          format_currency(result.market_value),
          'Comparable Sales & Depreciation',
      ],
      [
          'Liquidation Value',
          format_currency(result.liquidation_value),
          'Quick Sale Estimate',
      ],
  ]


def breakdown_rows(result: ValuationResult) -> List[Row]:
  '''Breakdown lines verbatim, in the order the engine produced them.'''
  return [[item.label, format_currency(item.amount)]
          for item in result.breakdown]


def comparison_rows(results: Sequence[ValuationResult]) -> List[Row]:
  '''
  Comparison table as rows, header first.

  Returns:
    [['Attribute', name1, name2, ...], ['Category', ...], ...]
  '''
  df = comparison_table(results)
  rows: List[Row] = [['Attribute'] + [r.asset_name for r in results]]
  for label, values in df.iterrows():
    if label in CURRENCY_LABELS:
      cells = [format_currency(v) for v in values]
    elif label == 'Years Owned':
      cells = [f'{float(v):.1f}' for v in values]
    else:
      cells = [str(v) for v in values]
    rows.append([str(label)] + cells)
  return rows


def portfolio_rows(results: Sequence[ValuationResult]) -> List[Row]:
  summary = portfolio_summary(results)
  return [
      ['Total Assets', str(summary['total_assets'])],
      ['Combined Market Value',
       format_currency(summary['combined_market_value'])],
      ['Combined Liquidation Value',
       format_currency(summary['combined_liquidation_value'])],
      ['Average Market Value',
       format_currency(summary['average_market_value'])],
  ]
