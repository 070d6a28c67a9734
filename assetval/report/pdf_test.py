from dataclasses import replace

import pytest
from matplotlib.backends.backend_pdf import PdfPages

from assetval.engine.valuation import evaluate
from assetval.report.pdf import A4_PORTRAIT
from assetval.report.pdf import PdfReportWriter
from assetval.report.pdf import _PageLayout
from assetval.report.pdf import epoch_millis


def _is_pdf(path) -> bool:
  return path.read_bytes()[:4] == b'%PDF'


class TestEpochMillis:

  def test_utc(self, now):
    assert epoch_millis(now) == 1577858400000


class TestPageLayout:
  """Tests for table pagination."""

  def test_short_table_fits_one_page(self, tmp_path):
    with PdfPages(tmp_path / 'short.pdf') as pdf:
      layout = _PageLayout(pdf, A4_PORTRAIT, 'Title', 'Subtitle')
      layout.heading('Rows')
      layout.table([['a', '1'], ['b', '2']], header=['Key', 'Value'])
      pages = layout.close()

    assert pages == 1

  def test_long_table_continues(self, tmp_path):
    rows = [[f'row {i}', str(i)] for i in range(120)]

    with PdfPages(tmp_path / 'long.pdf') as pdf:
      layout = _PageLayout(pdf, A4_PORTRAIT, 'Title', 'Subtitle')
      layout.table(rows, header=['Key', 'Value'])
      pages = layout.close()

    assert pages > 1
    assert _is_pdf(tmp_path / 'long.pdf')


class TestPdfReportWriter:
  """Tests for PdfReportWriter."""

  def test_valuation_report(self, tmp_path, lathe, now):
    result = evaluate(lathe, now)

    record = PdfReportWriter(tmp_path).write_valuation_report(
        result, generated_at=now)

    assert record.filename == 'valuation_CNC_Lathe_1577858400000.pdf'
    assert record.valuation_id == result.id
    assert record.asset_name == 'CNC Lathe'
    assert record.market_value == 4000.0
    assert record.liquidation_value == 2000.0
    assert record.generated_at == now
    assert _is_pdf(tmp_path / record.filename)

  def test_report_id_is_stable(self, tmp_path, lathe, now):
    result = evaluate(lathe, now)
    writer = PdfReportWriter(tmp_path)

    first = writer.write_valuation_report(result, generated_at=now)
    second = writer.write_valuation_report(result, generated_at=now)

    assert first.id == second.id

  def test_creates_out_dir(self, tmp_path, forklift, now):
    out_dir = tmp_path / 'reports' / '2020'

    record = PdfReportWriter(out_dir).write_valuation_report(
        evaluate(forklift, now), generated_at=now)

    assert (out_dir / record.filename).exists()

  def test_comparison_report(self, tmp_path, lathe, forklift, now):
    results = [evaluate(lathe, now), evaluate(forklift, now)]

    path = PdfReportWriter(tmp_path).write_comparison_report(
        results, generated_at=now)

    assert path.name == 'comparison_report_1577858400000.pdf'
    assert _is_pdf(path)

  def test_comparison_report_empty(self, tmp_path, now):
    with pytest.raises(ValueError, match='No assets'):
      PdfReportWriter(tmp_path).write_comparison_report([], generated_at=now)

  def test_path_separator_in_name(self, tmp_path, lathe, now):
    result = evaluate(replace(lathe, asset_name='Lathe A/B'), now)

    record = PdfReportWriter(tmp_path).write_valuation_report(
        result, generated_at=now)

    assert record.filename == 'valuation_Lathe_A_B_1577858400000.pdf'
    assert record.asset_name == 'Lathe A/B'
    assert _is_pdf(tmp_path / record.filename)

  @pytest.mark.parametrize('name, expected', [
      ('..\\Bay 3: Press', 'valuation_.._Bay_3_Press_1577858400000.pdf'),
      ('Drill\tpress', 'valuation_Drill_press_1577858400000.pdf'),
      ('Forklift-2.b', 'valuation_Forklift-2.b_1577858400000.pdf'),
  ])
  def test_filename_characters(self, tmp_path, lathe, now, name, expected):
    result = evaluate(replace(lathe, asset_name=name), now)

    record = PdfReportWriter(tmp_path).write_valuation_report(
        result, generated_at=now)

    assert record.filename == expected
    assert [p.name for p in tmp_path.iterdir()] == [expected]

  def test_comparison_rows_fail_before_file_opens(self, tmp_path, lathe, now,
                                                   monkeypatch):

    def broken_rows(results):
      raise RuntimeError('bad rows')

    monkeypatch.setattr('assetval.report.pdf.comparison_rows', broken_rows)
    out_dir = tmp_path / 'reports'

    with pytest.raises(RuntimeError, match='bad rows'):
      PdfReportWriter(out_dir).write_comparison_report([evaluate(lathe, now)],
                                                       generated_at=now)

    assert not out_dir.exists()
