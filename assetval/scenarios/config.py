"""
Scenario configuration for asset valuations.

ScenarioConfig is a serializable (JSON-friendly) configuration class
that specifies which policy to use for each step of the valuation.
"""

from dataclasses import asdict
from dataclasses import dataclass
import json
from typing import Any


@dataclass(frozen=True)
class ScenarioConfig:
  """
  Configuration for a valuation scenario.

  All fields are strings (policy names) that map to factories in the registry.
  This makes the config serializable to JSON for reproducibility.

  Attributes:
    name: Human-readable scenario name
    depreciation: Depreciation policy name (e.g., 'straight_line')
    condition: Condition policy name (e.g., 'standard')
    blend: Market blend policy name (e.g., 'comparable_60')
    demand: Market demand policy name (e.g., 'standard')
    economic: Economic condition policy name (e.g., 'standard')
  """
  name: str = 'default'
  depreciation: str = 'straight_line'
  condition: str = 'standard'
  blend: str = 'comparable_60'
  demand: str = 'standard'
  economic: str = 'standard'

  @classmethod
  def default(cls) -> 'ScenarioConfig':
    """
    Create default scenario configuration.

    Uses:
      - Straight-line depreciation over useful life, capped at 90%
      - Standard condition factors (unknown -> fair)
      - 40/60 blend of cost value and market comparable
      - Standard demand (+10%/0/-10%) and economic (+5%/0/-10%) tables
    """
    return cls()

  @classmethod
  def category_rate(cls) -> 'ScenarioConfig':
    """Scenario depreciating at the category's annual rate."""
    return cls(name='category_rate', depreciation='category_rate')

  @classmethod
  def cost_only(cls) -> 'ScenarioConfig':
    """Scenario ignoring market comparables."""
    return cls(name='cost_only', blend='cost_only')

  def to_dict(self) -> dict[str, Any]:
    """Convert to dictionary."""
    return asdict(self)

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> 'ScenarioConfig':
    """Create from dictionary."""
    return cls(**data)

  @classmethod
  def from_json(cls, json_str: str) -> 'ScenarioConfig':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))


SCENARIO_PRESETS = {
    'default': ScenarioConfig.default,
    'category_rate': ScenarioConfig.category_rate,
    'cost_only': ScenarioConfig.cost_only,
}
