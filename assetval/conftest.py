from dataclasses import replace
from datetime import date
from datetime import datetime
from datetime import timezone

import pytest

from assetval.domain.types import AssetDescription

# 1826.25 days after 2015-01-01, i.e. exactly 5 years of 365.25 days.
FIVE_YEARS_LATER = datetime(2020, 1, 1, 6, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
  """Evaluation instant five years after the lathe was acquired."""
  return FIVE_YEARS_LATER


@pytest.fixture
def lathe() -> AssetDescription:
  """Machinery asset half-way through a 10-year life, no comparable."""
  return AssetDescription(
      asset_name='CNC Lathe',
      category='machinery',
      acquisition_date=date(2015, 1, 1),
      acquisition_cost=10000.0,
      condition='good',
      useful_life=10,
      market_comparable=0.0,
      liquidation_factor=0.5,
      market_demand='normal',
      economic_condition='stable',
      notes='Serviced annually.',
  )


@pytest.fixture
def lathe_with_comparable(lathe: AssetDescription) -> AssetDescription:
  """Same lathe with a 6000 market comparable."""
  return replace(lathe, market_comparable=6000.0)


@pytest.fixture
def forklift() -> AssetDescription:
  """Vehicle in fair condition with a comparable and weak market."""
  return AssetDescription(
      asset_name='Forklift',
      category='vehicle',
      acquisition_date=date(2017, 7, 1),
      acquisition_cost=25000.0,
      condition='fair',
      useful_life=8,
      market_comparable=12000.0,
      liquidation_factor=0.6,
      market_demand='low',
      economic_condition='boom',
  )
