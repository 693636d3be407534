"""
Result Export

Writes a run's DayResults to CSV or JSON for download. Columns follow the
DayResult field order.
"""

from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Optional, Sequence, Union
import csv
import json

from ..core.entities import DayResult
from .summary import SimulationSummary


COLUMNS = [f.name for f in fields(DayResult)]


def results_to_records(results: Sequence[DayResult]) -> list[dict[str, Any]]:
    return [r.to_dict() for r in results]


def export_csv(results: Sequence[DayResult], path: Union[str, Path]) -> Path:
    """Write one CSV row per DayResult."""
    path = Path(path)
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=COLUMNS)
        writer.writeheader()
        writer.writerows(results_to_records(results))
    return path


def export_json(
    results: Sequence[DayResult],
    path: Union[str, Path],
    summary: Optional[SimulationSummary] = None
) -> Path:
    """Write results, and optionally the run summary, as a JSON document."""
    payload: dict[str, Any] = {"results": results_to_records(results)}
    if summary is not None:
        payload["summary"] = asdict(summary)

    path = Path(path)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path
