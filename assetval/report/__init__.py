"""Report formatting: table rows and PDF documents."""

from assetval.report.pdf import PdfReportWriter
from assetval.report.tables import asset_info_rows
from assetval.report.tables import breakdown_rows
from assetval.report.tables import comparison_rows
from assetval.report.tables import format_currency
from assetval.report.tables import format_date
from assetval.report.tables import portfolio_rows
from assetval.report.tables import result_rows

__all__ = [
    'PdfReportWriter',
    'asset_info_rows',
    'breakdown_rows',
    'comparison_rows',
    'format_currency',
    'format_date',
    'portfolio_rows',
    'result_rows',
]
