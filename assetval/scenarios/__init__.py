"""Scenario configuration and policy registry."""

from assetval.scenarios.config import SCENARIO_PRESETS
from assetval.scenarios.config import ScenarioConfig
from assetval.scenarios.registry import create_policies
from assetval.scenarios.registry import list_policies
from assetval.scenarios.registry import POLICY_REGISTRY

__all__ = [
  'ScenarioConfig',
  'SCENARIO_PRESETS',
  'POLICY_REGISTRY',
  'create_policies',
  'list_policies',
]
