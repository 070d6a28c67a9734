'''
PDF report writer.

Renders single-asset valuation reports and multi-asset comparison reports
as paginated A4 documents using matplotlib's PDF backend. Tables that do
not fit on the current page continue on the next one.

Usage:
  writer = PdfReportWriter(Path('reports'))
  record = writer.write_valuation_report(result, generated_at=now)
  store.save_report(record)
'''

from datetime import datetime
import logging
from pathlib import Path
import re
import textwrap
from typing import Optional, Sequence, Tuple
import uuid

from matplotlib.backends.backend_pdf import PdfPages
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from assetval.domain.types import ReportRecord
from assetval.domain.types import ValuationResult
from assetval.engine.valuation import to_utc
from assetval.report.tables import Row
from assetval.report.tables import asset_info_rows
from assetval.report.tables import breakdown_rows
from assetval.report.tables import comparison_rows
from assetval.report.tables import format_date
from assetval.report.tables import portfolio_rows
from assetval.report.tables import result_rows

logger = logging.getLogger(__name__)

A4_PORTRAIT = (8.27, 11.69)
A4_LANDSCAPE = (11.69, 8.27)

HEADER_COLOR = '#3366cc'
STRIPE_COLOR = '#f2f2f2'
FOOTER_COLOR = '#808080'

MARGIN = 0.8  # inches
HEADER_HEIGHT = 1.4  # inches
ROW_HEIGHT = 0.28  # inches
HEADING_HEIGHT = 0.45  # inches
TEXT_LINE_HEIGHT = 0.2  # inches
FOOTER_HEIGHT = 0.6  # inches

FOOTER_LINES = (
    'AssetVal - Asset Valuation Report',
    'This report is for informational purposes only.',
)

REPORT_NAMESPACE = uuid.UUID('0b8e3a5c-7f21-4d6b-b0c9-5e4f1a2d3c87')


def epoch_millis(instant: datetime) -> int:
  return int(to_utc(instant).timestamp() * 1000)


class _PageLayout:
  '''
  Top-down layout cursor over a sequence of figure pages.

  Positions are tracked in inches from the bottom edge and converted to
  figure fractions when drawing.
  '''

  def __init__(self, pdf: PdfPages, pagesize: Tuple[float, float],
               title: str, subtitle: str):
    self.pdf = pdf
    self.width, self.height = pagesize
    self.title = title
    self.subtitle = subtitle
    self.fig: Optional[Figure] = None
    self.cursor = 0.0
    self.pages = 0

  @property
  def bottom(self) -> float:
    return MARGIN + FOOTER_HEIGHT

  def _fx(self, inches: float) -> float:
    return inches / self.width

  def _fy(self, inches: float) -> float:
    return inches / self.height

  def _finish_page(self) -> None:
    if self.fig is None:
      return
    for i, line in enumerate(FOOTER_LINES):
      self.fig.text(self._fx(MARGIN),
                    self._fy(MARGIN + (len(FOOTER_LINES) - 1 - i) * 0.18),
                    line,
                    fontsize=7,
                    color=FOOTER_COLOR)
    self.fig.text(1 - self._fx(MARGIN),
                  self._fy(MARGIN),
                  f'Page {self.pages}',
                  fontsize=7,
                  color=FOOTER_COLOR,
                  ha='right')
    self.pdf.savefig(self.fig)
    self.fig = None

  def new_page(self) -> None:
    self._finish_page()
    self.fig = Figure(figsize=(self.width, self.height))
    self.pages += 1

    if self.pages == 1:
      self.fig.add_artist(
          Rectangle((0, 1 - self._fy(HEADER_HEIGHT)),
                    1,
                    self._fy(HEADER_HEIGHT),
                    transform=self.fig.transFigure,
                    color=HEADER_COLOR))
      self.fig.text(self._fx(MARGIN),
                    1 - self._fy(HEADER_HEIGHT * 0.55),
                    self.title,
                    fontsize=22,
                    fontweight='bold',
                    color='white')
      self.fig.text(self._fx(MARGIN),
                    1 - self._fy(HEADER_HEIGHT * 0.85),
                    self.subtitle,
                    fontsize=10,
                    color='white')
      self.cursor = self.height - HEADER_HEIGHT - 0.3
    else:
      self.fig.text(self._fx(MARGIN),
                    1 - self._fy(MARGIN),
                    f'{self.title} (continued)',
                    fontsize=10,
                    color=FOOTER_COLOR)
      self.cursor = self.height - MARGIN - 0.3

  def _ensure(self, needed: float) -> None:
    if self.fig is None or self.cursor - needed < self.bottom:
      self.new_page()

  def heading(self, text: str) -> None:
    # keep a heading together with at least two table rows
    self._ensure(HEADING_HEIGHT + 2 * ROW_HEIGHT)
    self.cursor -= HEADING_HEIGHT
    self.fig.text(self._fx(MARGIN),
                  self._fy(self.cursor + 0.1),
                  text,
                  fontsize=15,
                  fontweight='bold')

  def paragraph(self, text: str, width_chars: int = 95) -> None:
    for line in textwrap.wrap(text, width=width_chars) or ['']:
      self._ensure(TEXT_LINE_HEIGHT)
      self.cursor -= TEXT_LINE_HEIGHT
      self.fig.text(self._fx(MARGIN), self._fy(self.cursor), line,
                    fontsize=9)
    self.cursor -= 0.2

  def table(self,
            rows: Sequence[Row],
            header: Optional[Row] = None,
            striped: bool = True,
            bold_first_column: bool = False) -> None:
    '''Draw a table, splitting it across pages as needed.'''
    remaining = list(rows)
    header_height = ROW_HEIGHT if header else 0.0

    while remaining:
      self._ensure(header_height + ROW_HEIGHT)
      available = self.cursor - self.bottom - header_height
      count = max(1, min(len(remaining), int(available // ROW_HEIGHT)))
      chunk, remaining = remaining[:count], remaining[count:]
      self._draw_table(chunk, header, striped, bold_first_column)
      if remaining:
        self.new_page()

    self.cursor -= 0.25

  def _draw_table(self, rows: Sequence[Row], header: Optional[Row],
                  striped: bool, bold_first_column: bool) -> None:
    n_lines = len(rows) + (1 if header else 0)
    height = n_lines * ROW_HEIGHT
    usable_width = self.width - 2 * MARGIN
    ax = self.fig.add_axes([
        self._fx(MARGIN),
        self._fy(self.cursor - height),
        self._fx(usable_width),
        self._fy(height),
    ])
    ax.set_axis_off()
    table = ax.table(cellText=[list(r) for r in rows],
                     colLabels=list(header) if header else None,
                     cellLoc='left',
                     bbox=[0, 0, 1, 1])
    table.auto_set_font_size(False)
    table.set_fontsize(9)

    offset = 1 if header else 0
    for (row, col), cell in table.get_celld().items():
      cell.set_edgecolor('#cccccc')
      if header and row == 0:
        cell.set_facecolor(HEADER_COLOR)
        cell.get_text().set_color('white')
        cell.get_text().set_fontweight('bold')
        continue
      if striped and (row - offset) % 2 == 1:
        cell.set_facecolor(STRIPE_COLOR)
      if bold_first_column and col == 0:
        cell.get_text().set_fontweight('bold')

    self.cursor -= height

  def close(self) -> int:
    self._finish_page()
    return self.pages


class PdfReportWriter:
  '''
  Write valuation and comparison reports as PDF files.

  The writer never evaluates anything; it lays out the rows produced from
  finished ValuationResult objects.
  '''

  def __init__(self, out_dir: Path):
    '''
    Initialize report writer.

    Args:
      out_dir: Directory for generated PDFs (created on first write)
    '''
    self.out_dir = Path(out_dir)

  def _open(self, filename: str) -> Tuple[Path, PdfPages]:
    self.out_dir.mkdir(parents=True, exist_ok=True)
    path = self.out_dir / filename
    return path, PdfPages(path)

  def write_valuation_report(self, result: ValuationResult,
                             generated_at: datetime) -> ReportRecord:
    '''
    Write a single-asset valuation report.

    Args:
      result: Valuation to report
      generated_at: Generation instant (also used in the filename)

    Returns:
      ReportRecord describing the written file
    '''
    stamp = epoch_millis(generated_at)
    safe_name = re.sub(r'[^\w.-]+', '_', result.asset_name)
    filename = f'valuation_{safe_name}_{stamp}.pdf'
    path, pdf = self._open(filename)

    with pdf:
      layout = _PageLayout(
          pdf, A4_PORTRAIT, 'Asset Valuation Report',
          f'Generated: {format_date(to_utc(generated_at).date())}')
      layout.heading('Asset Information')
      layout.table(asset_info_rows(result), bold_first_column=True)
      layout.heading('Valuation Results')
      layout.table(result_rows(result),
                   header=['Value Type', 'Amount', 'Methodology'],
                   striped=False)
      layout.heading('Calculation Breakdown')
      layout.table(breakdown_rows(result), header=['Component', 'Value'])
      if result.notes:
        layout.heading('Valuation Notes')
        layout.paragraph(result.notes)
      pages = layout.close()

    logger.info('Wrote %s (%d pages)', path, pages)

    return ReportRecord(
        id=str(uuid.uuid5(REPORT_NAMESPACE, f'{result.id}:{stamp}')),
        valuation_id=result.id,
        asset_name=result.asset_name,
        market_value=result.market_value,
        liquidation_value=result.liquidation_value,
        filename=filename,
        generated_at=to_utc(generated_at),
    )

  def write_comparison_report(self, results: Sequence[ValuationResult],
                              generated_at: datetime) -> Path:
    '''
    Write a landscape comparison report for several assets.

    Args:
      results: Valuations in comparison order
      generated_at: Generation instant (also used in the filename)

    Returns:
      Path of the written file

    Raises:
      ValueError: If results is empty
    '''
    if not results:
      raise ValueError('No assets to compare')

    filename = f'comparison_report_{epoch_millis(generated_at)}.pdf'
    rows = comparison_rows(results)
    path, pdf = self._open(filename)

    with pdf:
      layout = _PageLayout(
          pdf, A4_LANDSCAPE, 'Asset Comparison Report',
          f'Generated: {format_date(to_utc(generated_at).date())}')
      layout.table(rows[1:], header=rows[0], bold_first_column=True)
      layout.heading('Portfolio Summary')
      layout.table(portfolio_rows(results), header=['Metric', 'Value'])
      pages = layout.close()

    logger.info('Wrote %s (%d pages, %d assets)', path, pages, len(results))
    return path

