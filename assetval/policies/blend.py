'''
Market blending policies.

These policies combine the condition-adjusted cost value with an external
market comparable, when one is available.
'''

from abc import ABC, abstractmethod

from assetval.domain.types import PolicyOutput


class BlendPolicy(ABC):
  '''
  Base class for blending policies.

  Subclasses implement compute() to return the pre-adjustment market value.
  '''

  @abstractmethod
  def compute(self, cost_value: float,
              market_comparable: float) -> PolicyOutput[float]:
    '''
    Compute market value before demand/economic adjustments.

    Args:
      cost_value: Condition-adjusted depreciated value
      market_comparable: Comparable market price, <= 0 when unavailable

    Returns:
      PolicyOutput with blended value; diag['comparable_used'] tells
      whether the comparable contributed
    '''


class WeightedComparableBlend(BlendPolicy):
  '''
  Weighted average of cost value and market comparable.

  value = cost_value * (1 - w) + comparable * w when comparable > 0,
  otherwise cost_value unchanged.
  '''

  def __init__(self, comparable_weight: float = 0.6):
    '''
    Initialize weighted blend policy.

    Args:
      comparable_weight: Weight given to the comparable (default: 60%)
    '''
    self.comparable_weight = comparable_weight

  def compute(self, cost_value: float,
              market_comparable: float) -> PolicyOutput[float]:
    if market_comparable > 0:
      cost_weight = 1 - self.comparable_weight
      value = (cost_value * cost_weight) + (market_comparable *
                                            self.comparable_weight)
      return PolicyOutput(value=value,
                          diag={
                              'blend_method': 'weighted',
                              'comparable_used': True,
                              'comparable_weight': self.comparable_weight,
                          })
    return PolicyOutput(value=cost_value,
                        diag={
                            'blend_method': 'weighted',
                            'comparable_used': False,
                            'comparable_weight': self.comparable_weight,
                        })


class CostOnlyBlend(BlendPolicy):
  '''Ignore comparables and use the cost value as-is.'''

  def compute(self, cost_value: float,
              market_comparable: float) -> PolicyOutput[float]:
    return PolicyOutput(value=cost_value,
                        diag={
                            'blend_method': 'cost_only',
                            'comparable_used': False,
                        })
