'''
Asset valuation with policy-based steps.

This package estimates an asset's market and liquidation value from its
acquisition data, condition and market/economic context. Each step
(depreciation, condition factor, comparable blend, demand and economic
adjustments) is a policy selected by a scenario configuration; the engine
that combines them is a pure function of the asset and an evaluation instant.

Usage:
  from datetime import date, datetime, timezone
  from assetval.domain.types import AssetDescription
  from assetval.engine.valuation import evaluate

  asset = AssetDescription(
      asset_name='CNC Lathe', category='machinery',
      acquisition_date=date(2019, 3, 1), acquisition_cost=10000,
      condition='good', useful_life=10, liquidation_factor=0.5)
  result = evaluate(asset, now=datetime.now(timezone.utc))
'''
