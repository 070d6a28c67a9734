'''
Batch valuation for many assets at a single point in time.

This module provides tools to:
1. Load asset descriptions from CSV
2. Value every asset with one scenario and one evaluation instant
3. Export results to CSV or Parquet for further analysis

Usage (CLI):
  python -m assetval.analysis.batch_valuation \
    --assets-file data/assets.csv \
    --as-of 2024-12-31 \
    --output results/assets_valuation.csv

  python -m assetval.analysis.batch_valuation \
    --assets-file data/assets.csv \
    --as-of 2024-12-31 \
    --scenario cost_only \
    --output results/assets_valuation.parquet \
    -v

Usage (Python API):
  from assetval.analysis.batch_valuation import batch_valuation

  df = batch_valuation(assets, now=datetime(2024, 12, 31, tzinfo=timezone.utc))
  df.to_csv('results.csv', index=False)

The CSV has one column per AssetDescription field; liquidation_factor is a
fraction in [0, 1].
'''

import argparse
import logging
import traceback
from datetime import datetime
from datetime import timezone
from pathlib import Path
from typing import List, Optional, Sequence

import pandas as pd

from assetval.analysis.frames import result_row
from assetval.domain.types import AssetDescription
from assetval.engine.valuation import Instant
from assetval.engine.valuation import evaluate
from assetval.engine.valuation import to_utc
from assetval.scenarios.config import SCENARIO_PRESETS
from assetval.scenarios.config import ScenarioConfig
from assetval.store.io import ParquetWriter

logger = logging.getLogger(__name__)


def batch_valuation(
    assets: Sequence[AssetDescription],
    now: Instant,
    config: Optional[ScenarioConfig] = None,
    verbose: bool = False,
) -> pd.DataFrame:
  '''
  Value multiple assets at a single instant.

  Args:
    assets: Assets to value
    now: Evaluation instant shared by all assets
    config: ScenarioConfig (default: ScenarioConfig.default())
    verbose: Enable per-asset logging

  Returns:
    DataFrame with one row per successfully valued asset
    (see frames.COLUMNS)

  Raises:
    ValueError: If no asset could be valued
  '''
  if config is None:
    config = ScenarioConfig.default()

  rows = []

  for i, asset in enumerate(assets, 1):
    if verbose:
      logger.info('[%d/%d] Processing %s...', i, len(assets), asset.asset_name)

    try:
      result = evaluate(asset, now, config)
      rows.append(result_row(result))

      if verbose:
        logger.info('  Market: $%.2f, Liquidation: $%.2f',
                    result.market_value, result.liquidation_value)

    except Exception as e:  # pylint: disable=broad-except
      logger.warning('Failed to value %s: %s', asset.asset_name, str(e))
      if verbose:
        logger.debug('%s', traceback.format_exc())

  if not rows:
    raise ValueError(f'No successful valuations for {len(assets)} assets')

  return pd.DataFrame(rows)


def load_assets_csv(file_path: Path) -> List[AssetDescription]:
  '''Load asset descriptions from CSV (one asset per row).'''
  df = pd.read_csv(file_path, dtype={'notes': str}, keep_default_na=False)
  return [AssetDescription.from_dict(row) for row in df.to_dict('records')]


def _print_summary(df: pd.DataFrame) -> None:
  '''Print summary statistics for batch valuation results.'''
  logger.info('')
  logger.info('=' * 70)
  logger.info('Summary Statistics')
  logger.info('=' * 70)
  logger.info('Total assets: %d', len(df))
  logger.info('Combined market value: $%.2f', df['market_value'].sum())
  logger.info('Combined liquidation value: $%.2f',
              df['liquidation_value'].sum())
  logger.info('')

  logger.info('Market Value:')
  logger.info('  Mean:   $%.2f', df['market_value'].mean())
  logger.info('  Median: $%.2f', df['market_value'].median())
  logger.info('  Min:    $%.2f (%s)', df['market_value'].min(),
              df.loc[df['market_value'].idxmin(), 'asset_name'])
  logger.info('  Max:    $%.2f (%s)', df['market_value'].max(),
              df.loc[df['market_value'].idxmax(), 'asset_name'])
  logger.info('')

  by_category = df.groupby('category')['market_value'].agg(['count', 'sum'])
  logger.info('By category:')
  for category, row in by_category.iterrows():
    logger.info('  %-12s %3d  $%.2f', category, row['count'], row['sum'])


def main() -> None:
  '''CLI entrypoint.'''
  parser = argparse.ArgumentParser(description='Batch asset valuation')
  parser.add_argument('--assets-file',
                      type=Path,
                      required=True,
                      help='CSV file with one asset per row')
  parser.add_argument('--as-of',
                      type=str,
                      default=None,
                      help='Evaluation date/time, ISO format (default: now)')
  parser.add_argument('--scenario',
                      type=str,
                      default='default',
                      choices=sorted(SCENARIO_PRESETS),
                      help='Scenario preset')
  parser.add_argument('--output',
                      type=Path,
                      required=True,
                      help='Output file (.csv or .parquet)')
  parser.add_argument('-v',
                      '--verbose',
                      action='store_true',
                      help='Verbose output')
  args = parser.parse_args()

  logging.basicConfig(
      level=logging.DEBUG if args.verbose else logging.INFO,
      format='%(message)s',
  )

  if args.as_of:
    now = to_utc(datetime.fromisoformat(args.as_of))
  else:
    now = datetime.now(timezone.utc)

  config = SCENARIO_PRESETS[args.scenario]()
  assets = load_assets_csv(args.assets_file)
  logger.info('Loaded %d assets from %s', len(assets), args.assets_file)

  df = batch_valuation(assets, now, config, verbose=args.verbose)

  if args.output.suffix == '.parquet':
    ParquetWriter().write(df,
                          args.output,
                          metadata={
                              'scenario': config.name,
                              'assets_file': str(args.assets_file),
                          },
                          as_of=now.isoformat())
  else:
    args.output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.output, index=False)

  logger.info('Saved %d valuations to %s', len(df), args.output)
  _print_summary(df)


if __name__ == '__main__':
  main()
