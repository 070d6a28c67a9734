'''
Domain types for the asset valuation engine.

These dataclasses provide typed interfaces between the engine and its
collaborators (store, report writer, analysis), so none of them depends on
raw form fields or persisted JSON shapes.
'''

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, Generic, Mapping, Tuple, TypeVar

T = TypeVar('T')

POSITIVE = 'positive'
NEGATIVE = 'negative'
NEUTRAL = 'neutral'
SIGNS = (POSITIVE, NEGATIVE, NEUTRAL)


class DivisionError(ZeroDivisionError):
  '''Raised when an asset cannot be depreciated (useful life <= 0).'''


@dataclass
class PolicyOutput(Generic[T]):
  '''
  Standard output from any policy.

  Every policy returns both a computed value and diagnostic information
  explaining how the value was computed.

  Attributes:
    value: The computed value (type depends on policy)
    diag: Dictionary of diagnostic information
  '''
  value: T
  diag: Dict[str, Any] = field(default_factory=dict)


def _parse_date(value: Any) -> date:
  if isinstance(value, datetime):
    return value.date()
  if isinstance(value, date):
    return value
  return date.fromisoformat(str(value)[:10])


def _parse_datetime(value: Any) -> datetime:
  if isinstance(value, datetime):
    parsed = value
  else:
    parsed = datetime.fromisoformat(str(value))
  if parsed.tzinfo is None:
    parsed = parsed.replace(tzinfo=timezone.utc)
  return parsed


@dataclass(frozen=True)
class AssetDescription:
  '''
  Description of the asset being valued.

  Constructed once from form or file input and never mutated. Enumerated
  fields are plain lowercase tags; unknown tags are tolerated and resolved
  to defaults by the policies.

  Attributes:
    asset_name: Label shown in reports
    category: Asset category tag (machinery, vehicle, ...)
    acquisition_date: Date the asset was acquired
    acquisition_cost: Original cost in the base currency
    condition: Condition tag (excellent, good, fair, poor, salvage)
    useful_life: Useful life in years
    market_comparable: Comparable market price, 0 when none is available
    liquidation_factor: Fraction of market value realizable in a quick sale
    market_demand: Demand tag (high, normal, low)
    economic_condition: Economy tag (boom, stable, recession)
    notes: Free text, not used in calculation
  '''
  asset_name: str
  category: str
  acquisition_date: date
  acquisition_cost: float
  condition: str
  useful_life: int
  market_comparable: float = 0.0
  liquidation_factor: float = 0.5
  market_demand: str = 'normal'
  economic_condition: str = 'stable'
  notes: str = ''

  def to_dict(self) -> Dict[str, Any]:
    '''Convert to a JSON-friendly dictionary.'''
    return {
        'asset_name': self.asset_name,
        'category': self.category,
        'acquisition_date': self.acquisition_date.isoformat(),
        'acquisition_cost': self.acquisition_cost,
        'condition': self.condition,
        'useful_life': self.useful_life,
        'market_comparable': self.market_comparable,
        'liquidation_factor': self.liquidation_factor,
        'market_demand': self.market_demand,
        'economic_condition': self.economic_condition,
        'notes': self.notes,
    }

  @classmethod
  def from_dict(cls, data: Mapping[str, Any]) -> 'AssetDescription':
    '''
    Create from a dictionary produced by to_dict().

    Raises:
      ValueError: If a required field is missing
    '''
    try:
      return cls(
          asset_name=str(data['asset_name']),
          category=str(data['category']),
          acquisition_date=_parse_date(data['acquisition_date']),
          acquisition_cost=float(data['acquisition_cost']),
          condition=str(data['condition']),
          useful_life=int(data['useful_life']),
          market_comparable=float(data.get('market_comparable') or 0.0),
          liquidation_factor=float(data.get('liquidation_factor', 0.5)),
          market_demand=str(data.get('market_demand', 'normal')),
          economic_condition=str(data.get('economic_condition', 'stable')),
          notes=str(data.get('notes') or ''),
      )
    except KeyError as e:
      raise ValueError(f'Missing asset field: {e.args[0]}') from e

  @classmethod
  def from_form(cls, fields: Mapping[str, Any]) -> 'AssetDescription':
    '''
    Create from raw form fields.

    Numbers arrive as strings, a blank comparable means "no comparable",
    and the liquidation factor is entered as a percentage.

    Args:
      fields: Mapping with the same keys as to_dict(), except
        'liquidation_pct' replaces 'liquidation_factor'

    Returns:
      AssetDescription with normalized values
    '''
    comparable = str(fields.get('market_comparable') or '').strip()
    try:
      market_comparable = float(comparable) if comparable else 0.0
    except ValueError:
      market_comparable = 0.0

    return cls(
        asset_name=str(fields.get('asset_name', '')).strip(),
        category=str(fields.get('category', 'other')).strip().lower(),
        acquisition_date=_parse_date(fields['acquisition_date']),
        acquisition_cost=float(fields['acquisition_cost']),
        condition=str(fields.get('condition', '')).strip().lower(),
        useful_life=int(fields['useful_life']),
        market_comparable=market_comparable,
        liquidation_factor=float(fields['liquidation_pct']) / 100,
        market_demand=str(fields.get('market_demand',
                                     'normal')).strip().lower(),
        economic_condition=str(fields.get('economic_condition',
                                          'stable')).strip().lower(),
        notes=str(fields.get('notes') or ''),
    )


@dataclass(frozen=True)
class BreakdownItem:
  '''
  One line of the valuation breakdown.

  Attributes:
    label: Human-readable description
    amount: Signed amount at full precision
    sign: 'positive', 'negative' or 'neutral' (presentation hint)
  '''
  label: str
  amount: float
  sign: str = NEUTRAL

  def to_dict(self) -> Dict[str, Any]:
    return {'label': self.label, 'amount': self.amount, 'sign': self.sign}

  @classmethod
  def from_dict(cls, data: Mapping[str, Any]) -> 'BreakdownItem':
    sign = str(data.get('sign', NEUTRAL))
    if sign not in SIGNS:
      raise ValueError(f'Unknown breakdown sign: {sign!r}')
    return cls(label=str(data['label']), amount=float(data['amount']),
               sign=sign)


@dataclass(frozen=True)
class ValuationResult:
  '''
  Complete valuation result with breakdown and diagnostics.

  Attributes:
    id: Identifier assigned when the result was created
    asset: The AssetDescription that was valued
    years_owned: Elapsed ownership in fractional years
    market_value: Estimated market value, rounded to cents
    liquidation_value: Estimated quick-sale value, rounded to cents
    breakdown: Ordered explanation of how market value was derived
    calculated_at: Evaluation instant (UTC)
    scenario: Name of the scenario configuration used
    diag: Merged diagnostics from all policies (read-only; list values
      are stored as tuples)
  '''
  id: str
  asset: AssetDescription
  years_owned: float
  market_value: float
  liquidation_value: float
  breakdown: Tuple[BreakdownItem, ...]
  calculated_at: datetime
  scenario: str = 'default'
  diag: Mapping[str, Any] = field(default_factory=dict, compare=False)

  def __post_init__(self):
    frozen = {
        key: tuple(value) if isinstance(value, list) else value
        for key, value in self.diag.items()
    }
    object.__setattr__(self, 'diag', MappingProxyType(frozen))

  @property
  def asset_name(self) -> str:
    return self.asset.asset_name

  @property
  def category(self) -> str:
    return self.asset.category

  @property
  def condition(self) -> str:
    return self.asset.condition

  @property
  def acquisition_cost(self) -> float:
    return self.asset.acquisition_cost

  @property
  def notes(self) -> str:
    return self.asset.notes

  def to_dict(self) -> Dict[str, Any]:
    '''Flatten to a JSON-friendly dictionary for persistence.'''
    result: Dict[str, Any] = {'id': self.id}
    result.update(self.asset.to_dict())
    result.update({
        'years_owned': self.years_owned,
        'market_value': self.market_value,
        'liquidation_value': self.liquidation_value,
        'breakdown': [item.to_dict() for item in self.breakdown],
        'calculated_at': self.calculated_at.isoformat(),
        'scenario': self.scenario,
        'diag': dict(self.diag),
    })
    return result

  @classmethod
  def from_dict(cls, data: Mapping[str, Any]) -> 'ValuationResult':
    '''
    Rebuild a result persisted with to_dict().

    Raises:
      ValueError: If the record is missing fields
    '''
    try:
      return cls(
          id=str(data['id']),
          asset=AssetDescription.from_dict(data),
          years_owned=float(data['years_owned']),
          market_value=float(data['market_value']),
          liquidation_value=float(data['liquidation_value']),
          breakdown=tuple(
              BreakdownItem.from_dict(item) for item in data['breakdown']),
          calculated_at=_parse_datetime(data['calculated_at']),
          scenario=str(data.get('scenario', 'default')),
          diag=dict(data.get('diag') or {}),
      )
    except KeyError as e:
      raise ValueError(f'Missing valuation field: {e.args[0]}') from e


@dataclass(frozen=True)
class ReportRecord:
  '''
  Record of a generated valuation report.

  Attributes:
    id: Report identifier
    valuation_id: Id of the ValuationResult the report was built from
    asset_name: Asset label at generation time
    market_value: Headline market value
    liquidation_value: Headline liquidation value
    filename: Name of the written document
    generated_at: Generation instant (UTC)
  '''
  id: str
  valuation_id: str
  asset_name: str
  market_value: float
  liquidation_value: float
  filename: str
  generated_at: datetime

  def to_dict(self) -> Dict[str, Any]:
    return {
        'id': self.id,
        'valuation_id': self.valuation_id,
        'asset_name': self.asset_name,
        'market_value': self.market_value,
        'liquidation_value': self.liquidation_value,
        'filename': self.filename,
        'generated_at': self.generated_at.isoformat(),
    }

  @classmethod
  def from_dict(cls, data: Mapping[str, Any]) -> 'ReportRecord':
    try:
      return cls(
          id=str(data['id']),
          valuation_id=str(data['valuation_id']),
          asset_name=str(data['asset_name']),
          market_value=float(data['market_value']),
          liquidation_value=float(data['liquidation_value']),
          filename=str(data['filename']),
          generated_at=_parse_datetime(data['generated_at']),
      )
    except KeyError as e:
      raise ValueError(f'Missing report field: {e.args[0]}') from e

