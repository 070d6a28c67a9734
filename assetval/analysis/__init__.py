'''
Valuation analysis utilities.

Note: To avoid RuntimeWarning when using -m flag, import directly:
  from assetval.analysis.batch_valuation import batch_valuation
  from assetval.analysis.comparison import comparison_table
  from assetval.analysis.dashboard import summarize
'''
