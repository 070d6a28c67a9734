import pytest

from assetval.policies.adjustment import AdjustmentPolicy
from assetval.policies.blend import BlendPolicy
from assetval.policies.blend import CostOnlyBlend
from assetval.policies.condition import ConditionPolicy
from assetval.policies.depreciation import DepreciationPolicy
from assetval.policies.depreciation import StraightLineDepreciation
from assetval.scenarios.config import ScenarioConfig
from assetval.scenarios.registry import create_policies
from assetval.scenarios.registry import list_policies


class TestCreatePolicies:
  """Tests for create_policies."""

  def test_default(self):
    policies = create_policies(ScenarioConfig.default())

    assert isinstance(policies['depreciation'], StraightLineDepreciation)
    assert policies['depreciation'].cap == 0.90
    assert isinstance(policies['condition'], ConditionPolicy)
    assert isinstance(policies['blend'], BlendPolicy)
    assert isinstance(policies['demand'], AdjustmentPolicy)
    assert isinstance(policies['economic'], AdjustmentPolicy)

  def test_cost_only(self):
    policies = create_policies(ScenarioConfig.cost_only())

    assert isinstance(policies['blend'], CostOnlyBlend)

  def test_fresh_instances(self):
    first = create_policies(ScenarioConfig.default())
    second = create_policies(ScenarioConfig.default())

    assert first['depreciation'] is not second['depreciation']

  def test_unknown_name(self):
    with pytest.raises(KeyError, match="Unknown blend policy: 'median'"):
      create_policies(ScenarioConfig(blend='median'))

  def test_unknown_lists_available(self):
    with pytest.raises(KeyError, match='straight_line'):
      create_policies(ScenarioConfig(depreciation='double_declining'))


class TestListPolicies:

  def test_categories(self):
    policies = list_policies()

    assert set(policies) == {
        'depreciation', 'condition', 'blend', 'demand', 'economic'
    }
    assert 'straight_line' in policies['depreciation']
    assert 'category_rate' in policies['depreciation']
    assert 'cost_only' in policies['blend']

  def test_every_policy_builds(self):
    for category, names in list_policies().items():
      for name in names:
        policy = create_policies(ScenarioConfig(**{category: name}))[category]
        if category == 'depreciation':
          assert isinstance(policy, DepreciationPolicy)
