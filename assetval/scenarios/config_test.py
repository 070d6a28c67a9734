import json

import pytest

from assetval.scenarios.config import SCENARIO_PRESETS
from assetval.scenarios.config import ScenarioConfig


class TestScenarioConfig:
  """Tests for ScenarioConfig."""

  def test_default(self):
    config = ScenarioConfig.default()

    assert config.name == 'default'
    assert config.depreciation == 'straight_line'
    assert config.condition == 'standard'
    assert config.blend == 'comparable_60'
    assert config.demand == 'standard'
    assert config.economic == 'standard'
    assert config == ScenarioConfig()

  def test_presets(self):
    assert ScenarioConfig.category_rate().depreciation == 'category_rate'
    assert ScenarioConfig.cost_only().blend == 'cost_only'
    assert sorted(SCENARIO_PRESETS) == [
        'category_rate', 'cost_only', 'default'
    ]
    for name, factory in SCENARIO_PRESETS.items():
      assert factory().name == name

  def test_json_round_trip(self):
    config = ScenarioConfig.cost_only()
    text = config.to_json()

    assert json.loads(text)['blend'] == 'cost_only'
    assert ScenarioConfig.from_json(text) == config

  def test_from_dict_unknown_field(self):
    with pytest.raises(TypeError):
      ScenarioConfig.from_dict({'name': 'x', 'discount': 'fixed'})
