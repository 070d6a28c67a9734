'''Asset valuation engine with pure functions.'''

from assetval.engine.breakdown import build_breakdown
from assetval.engine.valuation import compute_years_owned
from assetval.engine.valuation import evaluate
from assetval.engine.valuation import round_money

__all__ = [
    'build_breakdown',
    'compute_years_owned',
    'evaluate',
    'round_money',
]
