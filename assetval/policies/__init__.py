"""
Valuation policies for the steps of the asset valuation.

Each policy computes one step (depreciation, condition, market blend,
demand/economic adjustment) and returns both a value and diagnostic
information.

To add a new policy:
1. Create a new class inheriting from the appropriate base
   (e.g., DepreciationPolicy)
2. Implement the compute() method returning PolicyOutput
3. Register in scenarios/registry.py

Example:
  class DecliningBalance(DepreciationPolicy):
    def compute(self, years_owned, useful_life, category):
      fraction = ...  # your calculation
      return PolicyOutput(value=fraction, diag={'depreciation_method': 'db'})
"""

from assetval.policies.adjustment import AdjustmentPolicy
from assetval.policies.adjustment import DEMAND_ADJUSTMENTS
from assetval.policies.adjustment import ECONOMIC_ADJUSTMENTS
from assetval.policies.adjustment import TableAdjustment
from assetval.policies.blend import BlendPolicy
from assetval.policies.blend import CostOnlyBlend
from assetval.policies.blend import WeightedComparableBlend
from assetval.policies.condition import CONDITION_FACTORS
from assetval.policies.condition import ConditionPolicy
from assetval.policies.condition import TableCondition
from assetval.policies.depreciation import CategoryRateDepreciation
from assetval.policies.depreciation import DEPRECIATION_RATES
from assetval.policies.depreciation import DepreciationPolicy
from assetval.policies.depreciation import StraightLineDepreciation

__all__ = [
  'DepreciationPolicy', 'StraightLineDepreciation', 'CategoryRateDepreciation',
  'ConditionPolicy', 'TableCondition',
  'BlendPolicy', 'WeightedComparableBlend', 'CostOnlyBlend',
  'AdjustmentPolicy', 'TableAdjustment',
  'DEPRECIATION_RATES', 'CONDITION_FACTORS',
  'DEMAND_ADJUSTMENTS', 'ECONOMIC_ADJUSTMENTS',
]
