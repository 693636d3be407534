"""
Metrics and Reporting

- Summary statistics for a simulated run (totals, total return)
- Display formatting for points and currency amounts
- CSV / JSON export of DayResults
"""

from .summary import SimulationSummary, summarize, recent
from .formatting import format_amount, format_percent
from .export import results_to_records, export_csv, export_json

__all__ = [
    "SimulationSummary",
    "summarize",
    "recent",
    "format_amount",
    "format_percent",
    "results_to_records",
    "export_csv",
    "export_json"
]
