"""
Policy registry for mapping string names to policy factories.

This enables scenarios to be configured with string names (JSON friendly)
while still instantiating the correct policy classes.

To add a new policy:
1. Implement the policy class in the appropriate module
   (e.g., policies/depreciation.py)
2. Add a factory here that creates the policy instance
3. Register it in the appropriate registry dictionary

Example:
  DEPRECIATION_POLICIES['straight_line_cap80'] = (
      lambda: StraightLineDepreciation(cap=0.80))
"""

from collections.abc import Callable
from typing import Any, cast

from assetval.policies.adjustment import AdjustmentPolicy
from assetval.policies.adjustment import DEMAND_ADJUSTMENTS
from assetval.policies.adjustment import ECONOMIC_ADJUSTMENTS
from assetval.policies.adjustment import TableAdjustment
from assetval.policies.blend import BlendPolicy
from assetval.policies.blend import CostOnlyBlend
from assetval.policies.blend import WeightedComparableBlend
from assetval.policies.condition import ConditionPolicy
from assetval.policies.condition import TableCondition
from assetval.policies.depreciation import CategoryRateDepreciation
from assetval.policies.depreciation import DepreciationPolicy
from assetval.policies.depreciation import StraightLineDepreciation
from assetval.scenarios.config import ScenarioConfig

DEPRECIATION_POLICIES: dict[str, Callable[[], DepreciationPolicy]] = {
    'straight_line': lambda: StraightLineDepreciation(cap=0.90),
    'category_rate': lambda: CategoryRateDepreciation(cap=0.90),
}

CONDITION_POLICIES: dict[str, Callable[[], ConditionPolicy]] = {
    'standard': lambda: TableCondition(default_condition='fair'),
}

BLEND_POLICIES: dict[str, Callable[[], BlendPolicy]] = {
    'comparable_60': lambda: WeightedComparableBlend(comparable_weight=0.6),
    'comparable_50': lambda: WeightedComparableBlend(comparable_weight=0.5),
    'cost_only': CostOnlyBlend,
}

DEMAND_POLICIES: dict[str, Callable[[], AdjustmentPolicy]] = {
    'standard':
        lambda: TableAdjustment('demand', DEMAND_ADJUSTMENTS, neutral='normal'),
    'none':
        lambda: TableAdjustment('demand', {'normal': 0.0}, neutral='normal'),
}

ECONOMIC_POLICIES: dict[str, Callable[[], AdjustmentPolicy]] = {
    'standard':
        lambda: TableAdjustment(
            'economic', ECONOMIC_ADJUSTMENTS, neutral='stable'),
    'none':
        lambda: TableAdjustment('economic', {'stable': 0.0}, neutral='stable'),
}

POLICY_REGISTRY = {
    'depreciation': DEPRECIATION_POLICIES,
    'condition': CONDITION_POLICIES,
    'blend': BLEND_POLICIES,
    'demand': DEMAND_POLICIES,
    'economic': ECONOMIC_POLICIES,
}


def create_policies(config: ScenarioConfig) -> dict[str, Any]:
  """
  Create policy instances from scenario configuration.

  Args:
    config: ScenarioConfig with policy names

  Returns:
    Dictionary with instantiated policy objects:
    - depreciation: DepreciationPolicy
    - condition: ConditionPolicy
    - blend: BlendPolicy
    - demand: AdjustmentPolicy
    - economic: AdjustmentPolicy

  Raises:
    KeyError: If a policy name is not found in the registry
  """
  policies: dict[str, Any] = {}
  for category, factories in POLICY_REGISTRY.items():
    name = getattr(config, category)
    factory_dict = cast(dict[str, Callable[[], Any]], factories)
    try:
      factory = factory_dict[name]
    except KeyError as e:
      raise KeyError(f"Unknown {category} policy: '{name}'. "
                     f'Available: {list(factory_dict.keys())}') from e
    policies[category] = factory()
  return policies


def list_policies() -> dict[str, list[str]]:
  """
  List all available policies by category.

  Returns:
    Dictionary mapping category names to list of policy names
  """
  result: dict[str, list[str]] = {}
  for category, policies_dict in POLICY_REGISTRY.items():
    policy_dict = cast(dict[str, object], policies_dict)
    result[category] = list(policy_dict.keys())
  return result
