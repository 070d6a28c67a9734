import pytest

from assetval.policies.adjustment import DEMAND_ADJUSTMENTS
from assetval.policies.adjustment import ECONOMIC_ADJUSTMENTS
from assetval.policies.adjustment import TableAdjustment


class TestTableAdjustment:
  """Tests for TableAdjustment policy."""

  @pytest.mark.parametrize('tag,adjustment', [
      ('high', 0.10),
      ('normal', 0.0),
      ('low', -0.10),
  ])
  def test_demand(self, tag, adjustment):
    policy = TableAdjustment('demand', DEMAND_ADJUSTMENTS, neutral='normal')
    result = policy.compute(tag)

    assert result.value == adjustment
    assert result.diag['demand_tag'] == tag
    assert result.diag['demand_adjustment'] == adjustment

  @pytest.mark.parametrize('tag,adjustment', [
      ('boom', 0.05),
      ('stable', 0.0),
      ('recession', -0.10),
  ])
  def test_economic(self, tag, adjustment):
    policy = TableAdjustment('economic', ECONOMIC_ADJUSTMENTS,
                             neutral='stable')
    result = policy.compute(tag)

    assert result.value == adjustment
    assert result.diag['economic_tag'] == tag

  def test_unknown_tag_is_neutral(self):
    policy = TableAdjustment('economic', ECONOMIC_ADJUSTMENTS,
                             neutral='stable')
    result = policy.compute('depression')

    assert result.value == 0.0
    assert result.diag['economic_tag'] == 'stable'
    assert result.diag['economic_defaulted'] is True

  def test_neutral_must_exist(self):
    with pytest.raises(ValueError, match='Neutral'):
      TableAdjustment('demand', DEMAND_ADJUSTMENTS, neutral='average')
