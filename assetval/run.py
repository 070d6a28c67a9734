'''
Single-asset valuation entrypoint.

This module provides the command-line entry point for valuing one asset. It:
1. Builds an AssetDescription from command-line options
2. Runs the valuation engine at the current (or given) instant
3. Saves the result to the persistent store
4. Optionally adds it to the comparison set and writes PDF reports

Usage:
  python -m assetval.run \
    --name "CNC Lathe" --category machinery \
    --acquired 2019-03-01 --cost 10000 --condition good \
    --useful-life 10 --liquidation-pct 50 --pdf
'''

import argparse
from datetime import datetime
from datetime import timezone
import logging
from pathlib import Path
from typing import Optional

from assetval.analysis.dashboard import summarize
from assetval.domain.types import AssetDescription
from assetval.domain.types import ValuationResult
from assetval.engine.valuation import evaluate
from assetval.engine.valuation import to_utc
from assetval.report.pdf import PdfReportWriter
from assetval.report.tables import format_currency
from assetval.scenarios.config import SCENARIO_PRESETS
from assetval.scenarios.config import ScenarioConfig
from assetval.store.store import JsonFileBackend
from assetval.store.store import ValuationStore

logger = logging.getLogger(__name__)

DEFAULT_STORE_DIR = Path('.assetval')
DEFAULT_REPORTS_DIR = Path('reports')


def run_valuation(
    asset: AssetDescription,
    store: ValuationStore,
    now: Optional[datetime] = None,
    config: Optional[ScenarioConfig] = None,
    add_to_comparison: bool = False,
    writer: Optional[PdfReportWriter] = None,
) -> ValuationResult:
  '''
  Value an asset and record the outcome.

  Args:
    asset: Asset to value
    store: ValuationStore receiving the result
    now: Evaluation instant (default: current UTC time)
    config: ScenarioConfig (default: ScenarioConfig.default())
    add_to_comparison: Also add the result to the comparison set
    writer: If given, write a PDF report and save its record

  Returns:
    The saved ValuationResult

  Raises:
    DivisionError: If asset.useful_life <= 0 (nothing is saved)
  '''
  if now is None:
    now = datetime.now(timezone.utc)

  result = evaluate(asset, now, config)
  store.save_valuation(result)

  if add_to_comparison:
    store.add_to_comparison(result)

  if writer is not None:
    record = writer.write_valuation_report(result, generated_at=now)
    store.save_report(record)

  return result


def _log_result(result: ValuationResult) -> None:
  separator = '=' * 70
  logger.info('\n%s', separator)
  logger.info('Asset Valuation - %s as of %s', result.asset_name,
              result.calculated_at.date())
  logger.info('Scenario: %s', result.scenario)
  logger.info(separator)

  logger.info('\nBreakdown:')
  for item in result.breakdown:
    logger.info('  %-40s %14s', item.label, format_currency(item.amount))

  logger.info('\nValuation Result:')
  logger.info('  Years Owned: %.1f', result.years_owned)
  logger.info('  Market Value: $%.2f', result.market_value)
  logger.info('  Liquidation Value: $%.2f', result.liquidation_value)
  if result.diag.get('defaulted_tags'):
    logger.info('  Defaulted: %s', ', '.join(result.diag['defaulted_tags']))
  logger.info('%s\n', separator)


def main() -> None:
  '''CLI entrypoint.'''
  parser = argparse.ArgumentParser(description='Run asset valuation')
  parser.add_argument('--name', type=str, required=True, help='Asset name')
  parser.add_argument('--category',
                      type=str,
                      default='other',
                      help='machinery, vehicle, property, inventory, '
                      'electronics, furniture or other')
  parser.add_argument('--acquired',
                      type=str,
                      required=True,
                      help='Acquisition date (YYYY-MM-DD)')
  parser.add_argument('--cost',
                      type=float,
                      required=True,
                      help='Acquisition cost')
  parser.add_argument('--condition',
                      type=str,
                      default='good',
                      help='excellent, good, fair, poor or salvage')
  parser.add_argument('--useful-life',
                      type=int,
                      required=True,
                      help='Useful life in years')
  parser.add_argument('--comparable',
                      type=str,
                      default='',
                      help='Market comparable price (blank: none)')
  parser.add_argument('--liquidation-pct',
                      type=float,
                      default=50.0,
                      help='Liquidation factor in percent')
  parser.add_argument('--demand',
                      type=str,
                      default='normal',
                      help='high, normal or low')
  parser.add_argument('--economy',
                      type=str,
                      default='stable',
                      help='boom, stable or recession')
  parser.add_argument('--notes', type=str, default='', help='Free text')
  parser.add_argument('--as-of',
                      type=str,
                      default=None,
                      help='Evaluation date/time, ISO format (default: now)')
  parser.add_argument('--scenario',
                      type=str,
                      default='default',
                      choices=sorted(SCENARIO_PRESETS),
                      help='Scenario preset')
  parser.add_argument('--store-dir',
                      type=Path,
                      default=DEFAULT_STORE_DIR,
                      help='Directory of the valuation store')
  parser.add_argument('--compare',
                      action='store_true',
                      help='Add the result to the comparison set')
  parser.add_argument('--pdf',
                      action='store_true',
                      help='Write a PDF valuation report')
  parser.add_argument('--comparison-pdf',
                      action='store_true',
                      help='Write a PDF report of the comparison set')
  parser.add_argument('--reports-dir',
                      type=Path,
                      default=DEFAULT_REPORTS_DIR,
                      help='Directory for PDF reports')
  parser.add_argument('-v',
                      '--verbose',
                      action='store_true',
                      help='Verbose output')
  args = parser.parse_args()

  logging.basicConfig(
      level=logging.DEBUG if args.verbose else logging.INFO,
      format='%(message)s',
  )

  asset = AssetDescription.from_form({
      'asset_name': args.name,
      'category': args.category,
      'acquisition_date': args.acquired,
      'acquisition_cost': args.cost,
      'condition': args.condition,
      'useful_life': args.useful_life,
      'market_comparable': args.comparable,
      'liquidation_pct': args.liquidation_pct,
      'market_demand': args.demand,
      'economic_condition': args.economy,
      'notes': args.notes,
  })

  if args.as_of:
    now = to_utc(datetime.fromisoformat(args.as_of))
  else:
    now = datetime.now(timezone.utc)

  store = ValuationStore(JsonFileBackend(args.store_dir))
  writer = PdfReportWriter(args.reports_dir)

  result = run_valuation(
      asset,
      store,
      now=now,
      config=SCENARIO_PRESETS[args.scenario](),
      add_to_comparison=args.compare,
      writer=writer if args.pdf else None,
  )
  _log_result(result)

  if args.comparison_pdf:
    comparison = store.list_comparison()
    if comparison:
      path = writer.write_comparison_report(comparison, generated_at=now)
      logger.info('Comparison report: %s', path)
    else:
      logger.info('Comparison set is empty, no report written')

  summary = summarize(store)
  logger.info('Store: %d valuations, $%.2f market, $%.2f liquidation, '
              '%d reports', summary.total_valuations,
              summary.total_market_value, summary.total_liquidation_value,
              summary.reports_generated)


if __name__ == '__main__':
  main()
