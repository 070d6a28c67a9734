'''
Dashboard statistics over the valuation history.
'''

from dataclasses import dataclass, field
from typing import List

from assetval.analysis.frames import valuations_frame
from assetval.domain.types import ValuationResult
from assetval.store.store import ValuationStore

RECENT_LIMIT = 5


@dataclass
class DashboardSummary:
  '''
  Headline numbers for the dashboard.

  Attributes:
    total_valuations: Number of saved valuations
    total_market_value: Sum of market values
    total_liquidation_value: Sum of liquidation values
    reports_generated: Number of report records
    recent: Most recent valuations, newest first
  '''
  total_valuations: int
  total_market_value: float
  total_liquidation_value: float
  reports_generated: int
  recent: List[ValuationResult] = field(default_factory=list)


def summarize(store: ValuationStore,
              recent: int = RECENT_LIMIT) -> DashboardSummary:
  '''
  Summarize the store's valuation history and reports.

  Args:
    store: ValuationStore to read
    recent: Number of recent valuations to include

  Returns:
    DashboardSummary
  '''
  valuations = store.list_valuations()
  df = valuations_frame(valuations)

  return DashboardSummary(
      total_valuations=len(df),
      total_market_value=float(df['market_value'].sum()),
      total_liquidation_value=float(df['liquidation_value'].sum()),
      reports_generated=len(store.list_reports()),
      recent=valuations[:recent],
  )
