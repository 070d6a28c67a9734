'''
Depreciation policies.

These policies determine the fraction of acquisition cost lost to age.
Both variants cap the total at 90% so very old assets keep a residual.
'''

from abc import ABC, abstractmethod
from typing import Dict, Optional

from assetval.domain.types import PolicyOutput
from assetval.policies._tables import lookup

DEPRECIATION_RATES: Dict[str, float] = {
    'machinery': 0.10,
    'vehicle': 0.15,
    'property': 0.02,
    'inventory': 0.05,
    'electronics': 0.20,
    'furniture': 0.10,
    'other': 0.10,
}

MAX_DEPRECIATION = 0.90


class DepreciationPolicy(ABC):
  '''
  Base class for depreciation policies.

  Subclasses implement compute() to return the total depreciation fraction.
  '''

  def __init__(self,
               cap: float = MAX_DEPRECIATION,
               rates: Optional[Dict[str, float]] = None,
               default_category: str = 'other'):
    '''
    Initialize depreciation policy.

    Args:
      cap: Maximum total depreciation fraction (default: 90%)
      rates: Annual depreciation rate per category
      default_category: Category whose rate applies to unknown categories
    '''
    self.cap = cap
    self.rates = dict(rates) if rates is not None else dict(DEPRECIATION_RATES)
    self.default_category = default_category

  @abstractmethod
  def compute(self, years_owned: float, useful_life: int,
              category: str) -> PolicyOutput[float]:
    '''
    Compute total depreciation fraction.

    Args:
      years_owned: Elapsed ownership in fractional years
      useful_life: Useful life in years (must be > 0)
      category: Asset category tag

    Returns:
      PolicyOutput with depreciation fraction and diagnostics
    '''


class StraightLineDepreciation(DepreciationPolicy):
  '''
  Straight-line depreciation over the useful life.

  fraction = min(years_owned / useful_life, cap). The category rate is
  looked up and reported in diagnostics but does not enter the formula.
  '''

  def compute(self, years_owned: float, useful_life: int,
              category: str) -> PolicyOutput[float]:
    resolved, rate, defaulted = lookup(self.rates, category,
                                       self.default_category)
    fraction = min(years_owned / useful_life, self.cap)
    return PolicyOutput(value=fraction,
                        diag={
                            'depreciation_method': 'straight_line',
                            'depreciation_category': resolved,
                            'depreciation_rate': rate,
                            'depreciation_defaulted': defaulted,
                            'depreciation_capped': fraction == self.cap,
                        })


class CategoryRateDepreciation(DepreciationPolicy):
  '''
  Depreciation at the category's annual rate.

  fraction = min(years_owned * rate, cap). Useful life is ignored.
  '''

  def compute(self, years_owned: float, useful_life: int,
              category: str) -> PolicyOutput[float]:
    resolved, rate, defaulted = lookup(self.rates, category,
                                       self.default_category)
    fraction = min(years_owned * rate, self.cap)
    return PolicyOutput(value=fraction,
                        diag={
                            'depreciation_method': 'category_rate',
                            'depreciation_category': resolved,
                            'depreciation_rate': rate,
                            'depreciation_defaulted': defaulted,
                            'depreciation_capped': fraction == self.cap,
                        })
