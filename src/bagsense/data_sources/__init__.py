"""Upstream data sources: DexScreener market data and the bags.fm platform API."""
