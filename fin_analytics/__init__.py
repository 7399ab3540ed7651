"""
Fin Analytics - Financial Metrics Aggregation for the Analytics Dashboard

Pure transformation layer used by the business-operations dashboard. Normalizes
loosely-typed forecast rows, resolves relative date windows and derives the
financial summary tiles (next quarter, year-to-date, projected annual, growth).
"""

__version__ = "0.1.0"
__author__ = "Fin Analytics Team"
