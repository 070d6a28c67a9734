import json

import pandas as pd

from assetval.analysis.frames import valuations_frame
from assetval.engine.valuation import evaluate
from assetval.store.io import ParquetWriter


class TestParquetWriter:
  """Tests for ParquetWriter."""

  def test_writes_table_and_sidecar(self, tmp_path, lathe, forklift, now):
    df = valuations_frame([evaluate(lathe, now), evaluate(forklift, now)])
    out_path = tmp_path / 'out' / 'valuations.parquet'

    meta_path = ParquetWriter().write(df,
                                      out_path,
                                      metadata={'scenario': 'default'},
                                      as_of=now.isoformat())

    assert out_path.exists()
    assert meta_path.name == 'valuations.parquet.meta.json'

    loaded = pd.read_parquet(out_path)
    assert list(loaded['asset_name']) == ['CNC Lathe', 'Forklift']

    meta = json.loads(meta_path.read_text(encoding='utf-8'))
    assert meta['nrows'] == 2
    assert meta['ncols'] == df.shape[1]
    assert meta['scenario'] == 'default'
    assert meta['as_of'] == now.isoformat()
    assert 'market_value' in meta['columns']

  def test_sidecar_totals(self, tmp_path, lathe, now):
    results = [evaluate(lathe, now), evaluate(lathe, now)]

    meta_path = ParquetWriter().write(valuations_frame(results),
                                      tmp_path / 'lathes.parquet')

    meta = json.loads(meta_path.read_text(encoding='utf-8'))
    assert meta['totals'] == {
        'acquisition_cost': 20000.0,
        'market_value': 8000.0,
        'liquidation_value': 4000.0,
    }
    assert meta['scenarios'] == ['default']
    assert 'as_of' not in meta
