import pytest

from assetval.policies.blend import CostOnlyBlend
from assetval.policies.blend import WeightedComparableBlend


class TestWeightedComparableBlend:
  """Tests for WeightedComparableBlend policy."""

  def test_blends_40_60(self):
    """4000 * 0.4 + 6000 * 0.6 = 5200."""
    result = WeightedComparableBlend().compute(4000.0, 6000.0)

    assert result.value == pytest.approx(5200.0)
    assert result.diag['comparable_used'] is True
    assert result.diag['comparable_weight'] == 0.6

  def test_no_comparable_is_identity(self):
    """Zero comparable leaves the cost value untouched."""
    result = WeightedComparableBlend().compute(4000.0, 0.0)

    assert result.value == 4000.0
    assert result.diag['comparable_used'] is False

  def test_negative_comparable_ignored(self):
    result = WeightedComparableBlend().compute(4000.0, -10.0)

    assert result.value == 4000.0

  def test_custom_weight(self):
    result = WeightedComparableBlend(comparable_weight=0.5).compute(
        4000.0, 6000.0)

    assert result.value == pytest.approx(5000.0)


class TestCostOnlyBlend:

  def test_ignores_comparable(self):
    result = CostOnlyBlend().compute(4000.0, 6000.0)

    assert result.value == 4000.0
    assert result.diag['comparable_used'] is False
