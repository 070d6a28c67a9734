'''
Market adjustment policies.

Used for both the market demand and the economic condition adjustments:
each maps a tag to a signed fractional change applied multiplicatively
to market value.
'''

from abc import ABC, abstractmethod
from typing import Dict

from assetval.domain.types import PolicyOutput
from assetval.policies._tables import lookup

DEMAND_ADJUSTMENTS: Dict[str, float] = {
    'high': 0.10,
    'normal': 0.0,
    'low': -0.10,
}

ECONOMIC_ADJUSTMENTS: Dict[str, float] = {
    'boom': 0.05,
    'stable': 0.0,
    'recession': -0.10,
}


class AdjustmentPolicy(ABC):
  '''
  Base class for adjustment policies.

  Subclasses implement compute() to return a signed adjustment fraction.
  '''

  @abstractmethod
  def compute(self, tag: str) -> PolicyOutput[float]:
    '''
    Compute adjustment for a tag.

    Args:
      tag: Demand or economy tag

    Returns:
      PolicyOutput with adjustment fraction and diagnostics
    '''


class TableAdjustment(AdjustmentPolicy):
  '''
  Fixed adjustment per tag.

  Unknown tags resolve to the neutral tag.
  '''

  def __init__(self, kind: str, adjustments: Dict[str, float],
               neutral: str):
    '''
    Initialize table adjustment policy.

    Args:
      kind: Diagnostic prefix, e.g. 'demand' or 'economic'
      adjustments: Signed adjustment per tag
      neutral: Tag used for unknown input
    '''
    if neutral not in adjustments:
      raise ValueError(f'Neutral tag {neutral!r} missing from adjustments')
    self.kind = kind
    self.adjustments = dict(adjustments)
    self.neutral = neutral

  def compute(self, tag: str) -> PolicyOutput[float]:
    resolved, adjustment, defaulted = lookup(self.adjustments, tag,
                                             self.neutral)
    return PolicyOutput(value=adjustment,
                        diag={
                            f'{self.kind}_tag': resolved,
                            f'{self.kind}_adjustment': adjustment,
                            f'{self.kind}_defaulted': defaulted,
                        })
