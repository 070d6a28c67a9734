from dataclasses import replace
import json
import logging
import sys

import pandas as pd
import pytest

from assetval.analysis.batch_valuation import batch_valuation
from assetval.analysis.batch_valuation import load_assets_csv
from assetval.analysis.batch_valuation import main
from assetval.scenarios.config import ScenarioConfig


class TestBatchValuation:
  """Tests for batch_valuation function."""

  def test_values_all_assets(self, lathe, forklift, now):
    df = batch_valuation([lathe, forklift], now)

    assert list(df['asset_name']) == ['CNC Lathe', 'Forklift']
    assert df.loc[0, 'market_value'] == 4000.0
    assert set(df['scenario']) == {'default'}

  def test_scenario(self, lathe_with_comparable, now):
    df = batch_valuation([lathe_with_comparable], now,
                         ScenarioConfig.cost_only())

    assert df.loc[0, 'market_value'] == 4000.0
    assert df.loc[0, 'scenario'] == 'cost_only'

  def test_skips_failures(self, lathe, forklift, now, caplog):
    broken = replace(lathe, asset_name='Broken', useful_life=0)

    with caplog.at_level(logging.WARNING):
      df = batch_valuation([lathe, broken, forklift], now)

    assert list(df['asset_name']) == ['CNC Lathe', 'Forklift']
    assert 'Failed to value Broken' in caplog.text

  def test_nothing_valued(self, lathe, now):
    broken = replace(lathe, useful_life=0)

    with pytest.raises(ValueError, match='No successful valuations'):
      batch_valuation([broken], now)


class TestLoadAssetsCsv:

  def test_round_trip(self, tmp_path, lathe, forklift):
    path = tmp_path / 'assets.csv'
    pd.DataFrame([lathe.to_dict(), forklift.to_dict()]).to_csv(path,
                                                               index=False)

    assert load_assets_csv(path) == [lathe, forklift]

  def test_blank_comparable(self, tmp_path):
    path = tmp_path / 'assets.csv'
    path.write_text(
        'asset_name,category,acquisition_date,acquisition_cost,condition,'
        'useful_life,market_comparable\n'
        'Desk,furniture,2020-05-01,800,good,7,\n',
        encoding='utf-8')

    (asset,) = load_assets_csv(path)

    assert asset.market_comparable == 0.0
    assert asset.liquidation_factor == 0.5
    assert asset.notes == ''


class TestMain:
  """Tests for the batch CLI."""

  def _write_assets(self, path, *assets):
    pd.DataFrame([a.to_dict() for a in assets]).to_csv(path, index=False)

  def _run(self, monkeypatch, *argv):
    monkeypatch.setattr(sys, 'argv', ['assetval-batch', *argv])
    main()

  def test_csv_output(self, tmp_path, monkeypatch, caplog, lathe, forklift):
    assets_file = tmp_path / 'assets.csv'
    self._write_assets(assets_file, lathe, forklift)
    out = tmp_path / 'results' / 'valuations.csv'
    caplog.set_level(logging.INFO)

    self._run(monkeypatch, '--assets-file', str(assets_file), '--as-of',
              '2020-01-01T06:00:00+00:00', '--output', str(out))

    df = pd.read_csv(out)
    assert list(df['asset_name']) == ['CNC Lathe', 'Forklift']
    assert df.loc[0, 'market_value'] == 4000.0
    assert 'Summary Statistics' in caplog.text
    assert 'Total assets: 2' in caplog.text
    assert 'By category:' in caplog.text

  def test_parquet_output(self, tmp_path, monkeypatch, lathe, forklift):
    assets_file = tmp_path / 'assets.csv'
    self._write_assets(assets_file, lathe, forklift)
    out = tmp_path / 'valuations.parquet'

    self._run(monkeypatch, '--assets-file', str(assets_file), '--as-of',
              '2020-01-01T06:00:00+00:00', '--scenario', 'cost_only',
              '--output', str(out))

    df = pd.read_parquet(out)
    assert set(df['scenario']) == {'cost_only'}

    meta = json.loads(
        (tmp_path / 'valuations.parquet.meta.json').read_text(
            encoding='utf-8'))
    assert meta['scenario'] == 'cost_only'
    assert meta['as_of'] == '2020-01-01T06:00:00+00:00'
    assert meta['assets_file'] == str(assets_file)
    assert meta['nrows'] == 2

  @pytest.mark.parametrize('flags, level', [
      ([], logging.INFO),
      (['-v'], logging.DEBUG),
  ])
  def test_configures_logging(self, tmp_path, monkeypatch, lathe, flags,
                              level):
    assets_file = tmp_path / 'assets.csv'
    self._write_assets(assets_file, lathe)
    calls = []
    monkeypatch.setattr(logging, 'basicConfig',
                        lambda **kwargs: calls.append(kwargs))

    self._run(monkeypatch, '--assets-file', str(assets_file), '--as-of',
              '2020-01-01', '--output', str(tmp_path / 'out.csv'), *flags)

    assert [c['level'] for c in calls] == [level]
