"""
Pure asset valuation engine.

No I/O and no clock reads: the evaluation instant is passed in, so the same
asset, instant and scenario always produce the same result.

Key functions:
  evaluate: Main entry point, values an asset as of an instant
  compute_years_owned: Elapsed ownership in fractional years
  round_money: Half-up rounding to cents
"""

from datetime import date, datetime, time, timezone
from decimal import Decimal, ROUND_HALF_UP
import json
import logging
from typing import Any, Dict, List, Optional, Union
import uuid

from assetval.domain.types import AssetDescription
from assetval.domain.types import DivisionError
from assetval.domain.types import ValuationResult
from assetval.engine.breakdown import build_breakdown
from assetval.scenarios.config import ScenarioConfig
from assetval.scenarios.registry import create_policies

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365.25
SECONDS_PER_YEAR = DAYS_PER_YEAR * 24 * 60 * 60

RESULT_NAMESPACE = uuid.UUID('6f1c2b4e-8a57-4d0e-9a43-2f6a9d1c7e10')

Instant = Union[datetime, date]


def to_utc(now: Instant) -> datetime:
  """
  Normalize an instant to an aware UTC datetime.

  Naive datetimes are taken as UTC; a plain date is midnight UTC.
  """
  if not isinstance(now, datetime):
    return datetime.combine(now, time(), tzinfo=timezone.utc)
  if now.tzinfo is None:
    return now.replace(tzinfo=timezone.utc)
  return now.astimezone(timezone.utc)


def compute_years_owned(acquisition_date: date, now: Instant) -> float:
  """
  Compute elapsed ownership in fractional years of 365.25 days.

  Args:
    acquisition_date: Acquisition day (taken as midnight UTC)
    now: Evaluation instant

  Returns:
    Years owned; negative for acquisition dates after now
  """
  elapsed = to_utc(now) - to_utc(acquisition_date)
  return elapsed.total_seconds() / SECONDS_PER_YEAR


def round_money(value: float) -> float:
  """Round to cents, halves away from zero."""
  quantized = Decimal(repr(value)).quantize(Decimal('0.01'),
                                            rounding=ROUND_HALF_UP)
  return float(quantized)


def result_id(asset: AssetDescription, now: datetime, scenario: str) -> str:
  """Deterministic id for a valuation of asset at now under scenario."""
  key = json.dumps(
      {
          'asset': asset.to_dict(),
          'now': now.isoformat(),
          'scenario': scenario,
      },
      sort_keys=True,
  )
  return str(uuid.uuid5(RESULT_NAMESPACE, key))


def evaluate(
    asset: AssetDescription,
    now: Instant,
    config: Optional[ScenarioConfig] = None,
) -> ValuationResult:
  """
  Value an asset as of an instant.

  Steps: depreciation (capped), condition factor, blend with market
  comparable, demand and economic adjustments, liquidation factor, then
  rounding of both headline values to cents.

  Args:
    asset: Asset to value
    now: Evaluation instant
    config: ScenarioConfig (default: ScenarioConfig.default())

  Returns:
    ValuationResult with rounded values, breakdown and diagnostics

  Raises:
    DivisionError: If asset.useful_life <= 0
    KeyError: If config names an unknown policy
  """
  if asset.useful_life <= 0:
    raise DivisionError(
        f'useful_life must be positive, got {asset.useful_life} '
        f'for {asset.asset_name!r}')

  if config is None:
    config = ScenarioConfig.default()

  evaluated_at = to_utc(now)
  policies = create_policies(config)
  all_diag: Dict[str, Any] = {'scenario': config.name}

  years_owned = compute_years_owned(asset.acquisition_date, evaluated_at)

  depreciation_result = policies['depreciation'].compute(
      years_owned, asset.useful_life, asset.category)
  all_diag.update(depreciation_result.diag)
  total_depreciation = depreciation_result.value
  depreciated_value = asset.acquisition_cost * (1 - total_depreciation)

  condition_result = policies['condition'].compute(asset.condition)
  all_diag.update(condition_result.diag)
  condition_adjusted_value = depreciated_value * condition_result.value

  blend_result = policies['blend'].compute(condition_adjusted_value,
                                           asset.market_comparable)
  all_diag.update(blend_result.diag)
  market_value = blend_result.value

  demand_result = policies['demand'].compute(asset.market_demand)
  all_diag.update(demand_result.diag)
  demand_adjustment = demand_result.value
  market_value *= (1 + demand_adjustment)

  economic_result = policies['economic'].compute(asset.economic_condition)
  all_diag.update(economic_result.diag)
  economic_adjustment = economic_result.value
  market_value *= (1 + economic_adjustment)

  liquidation_value = market_value * asset.liquidation_factor

  defaulted: List[str] = [
      kind for kind in ('depreciation', 'condition', 'demand', 'economic')
      if all_diag.get(f'{kind}_defaulted')
  ]
  all_diag['defaulted_tags'] = tuple(defaulted)
  if defaulted:
    logger.warning('%s: unknown %s, using defaults', asset.asset_name,
                   ', '.join(defaulted))

  breakdown = build_breakdown(
      acquisition_cost=asset.acquisition_cost,
      total_depreciation=total_depreciation,
      depreciated_value=depreciated_value,
      condition=condition_result.diag['condition'],
      condition_adjusted_value=condition_adjusted_value,
      market_value=market_value,
      comparable_used=bool(blend_result.diag.get('comparable_used')),
      demand=demand_result.diag['demand_tag'],
      demand_adjustment=demand_adjustment,
      economic=economic_result.diag['economic_tag'],
      economic_adjustment=economic_adjustment,
  )

  return ValuationResult(
      id=result_id(asset, evaluated_at, config.name),
      asset=asset,
      years_owned=years_owned,
      market_value=round_money(market_value),
      liquidation_value=round_money(liquidation_value),
      breakdown=breakdown,
      calculated_at=evaluated_at,
      scenario=config.name,
      diag=all_diag,
  )
