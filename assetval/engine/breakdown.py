"""
Breakdown construction for valuation results.

The breakdown explains how market value was derived. Every entry is built
from quantities the engine already computed; nothing is recomputed here.
Demand and economic entries back out a marginal amount against the final
market value, so the entries do not sum exactly to market value.
"""

from typing import List, Tuple

from assetval.domain.types import BreakdownItem
from assetval.domain.types import NEGATIVE
from assetval.domain.types import NEUTRAL
from assetval.domain.types import POSITIVE


def _direction(amount: float) -> str:
  return POSITIVE if amount > 0 else NEGATIVE


def build_breakdown(
    acquisition_cost: float,
    total_depreciation: float,
    depreciated_value: float,
    condition: str,
    condition_adjusted_value: float,
    market_value: float,
    comparable_used: bool,
    demand: str,
    demand_adjustment: float,
    economic: str,
    economic_adjustment: float,
) -> Tuple[BreakdownItem, ...]:
  """
  Build the ordered breakdown.

  Args:
    acquisition_cost: Original cost
    total_depreciation: Depreciation fraction applied
    depreciated_value: Cost after depreciation
    condition: Resolved condition tag (for the label)
    condition_adjusted_value: Depreciated value times condition factor
    market_value: Final market value at full precision (unrounded)
    comparable_used: Whether a market comparable entered the blend
    demand: Resolved demand tag (for the label)
    demand_adjustment: Signed demand adjustment fraction
    economic: Resolved economy tag (for the label)
    economic_adjustment: Signed economic adjustment fraction

  Returns:
    Tuple of BreakdownItem in presentation order
  """
  items: List[BreakdownItem] = [
      BreakdownItem('Original Acquisition Cost', acquisition_cost, NEUTRAL),
      BreakdownItem(f'Depreciation ({total_depreciation * 100:.1f}%)',
                    -acquisition_cost * total_depreciation, NEGATIVE),
      BreakdownItem('Depreciated Value', depreciated_value, NEUTRAL),
      BreakdownItem(
          f'Condition Adjustment ({condition})',
          condition_adjusted_value - depreciated_value,
          POSITIVE
          if condition_adjusted_value > depreciated_value else NEGATIVE),
  ]

  if comparable_used:
    without_comparable = (condition_adjusted_value * (1 + demand_adjustment) *
                          (1 + economic_adjustment))
    items.append(
        BreakdownItem('Market Comparable Adjustment',
                      market_value - without_comparable, NEUTRAL))

  if demand_adjustment != 0:
    items.append(
        BreakdownItem(f'Market Demand ({demand})',
                      market_value * demand_adjustment /
                      (1 + demand_adjustment), _direction(demand_adjustment)))

  if economic_adjustment != 0:
    items.append(
        BreakdownItem(f'Economic Conditions ({economic})',
                      market_value * economic_adjustment /
                      (1 + economic_adjustment),
                      _direction(economic_adjustment)))

  return tuple(items)
