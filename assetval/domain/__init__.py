"""Domain types for the asset valuation engine."""

from assetval.domain.types import AssetDescription
from assetval.domain.types import BreakdownItem
from assetval.domain.types import DivisionError
from assetval.domain.types import PolicyOutput
from assetval.domain.types import ReportRecord
from assetval.domain.types import ValuationResult

__all__ = [
    'AssetDescription',
    'BreakdownItem',
    'DivisionError',
    'PolicyOutput',
    'ReportRecord',
    'ValuationResult',
]
