'''
Condition policies.

These policies map the physical/operational condition of an asset to the
fraction of its depreciated value that is retained.
'''

from abc import ABC, abstractmethod
from typing import Dict, Optional

from assetval.domain.types import PolicyOutput
from assetval.policies._tables import lookup

CONDITION_FACTORS: Dict[str, float] = {
    'excellent': 0.95,
    'good': 0.80,
    'fair': 0.60,
    'poor': 0.40,
    'salvage': 0.20,
}


class ConditionPolicy(ABC):
  '''
  Base class for condition policies.

  Subclasses implement compute() to return a value-retention factor.
  '''

  @abstractmethod
  def compute(self, condition: str) -> PolicyOutput[float]:
    '''
    Compute condition factor.

    Args:
      condition: Condition tag

    Returns:
      PolicyOutput with factor in (0, 1] and diagnostics
    '''


class TableCondition(ConditionPolicy):
  '''Fixed factor per condition tag.'''

  def __init__(self,
               factors: Optional[Dict[str, float]] = None,
               default_condition: str = 'fair'):
    '''
    Initialize table condition policy.

    Args:
      factors: Factor per condition tag (default: CONDITION_FACTORS)
      default_condition: Tag used for unknown conditions (default: 'fair')
    '''
    self.factors = (dict(factors)
                    if factors is not None else dict(CONDITION_FACTORS))
    self.default_condition = default_condition

  def compute(self, condition: str) -> PolicyOutput[float]:
    resolved, factor, defaulted = lookup(self.factors, condition,
                                         self.default_condition)
    return PolicyOutput(value=factor,
                        diag={
                            'condition_method': 'table',
                            'condition': resolved,
                            'condition_factor': factor,
                            'condition_defaulted': defaulted,
                        })
