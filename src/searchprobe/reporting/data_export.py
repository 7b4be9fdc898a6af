"""JSON / CSV export of run results."""

from __future__ import annotations

import csv
import io
import json
import logging
from dataclasses import asdict
from pathlib import Path

from searchprobe.models import RunSummary

logger = logging.getLogger(__name__)

_CSV_COLUMNS = ("run_id", "name", "outcome", "failure_reason", "duration_ms", "screenshot_path")


def summary_to_json(summary: RunSummary) -> str:
    payload = asdict(summary)
    payload["totals"] = {
        "passed": summary.total_passed,
        "failed": summary.total_failed,
        "errors": summary.total_errors,
    }
    return json.dumps(payload, indent=2)


def summary_to_csv(summary: RunSummary) -> str:
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=_CSV_COLUMNS)
    writer.writeheader()
    for result in summary.results:
        writer.writerow({"run_id": summary.run_id, **asdict(result)})
    return buf.getvalue()


def export_to_file(summary: RunSummary, output_dir: str | Path, fmt: str = "json") -> Path:
    """Write an export file and return its path.

    *fmt* is ``"json"`` or ``"csv"``.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    if fmt == "csv":
        content = summary_to_csv(summary)
        suffix = ".csv"
    else:
        content = summary_to_json(summary)
        suffix = ".json"

    dest = output_dir / f"run_{summary.run_id}{suffix}"
    dest.write_text(content, encoding="utf-8")
    logger.info("Exported %s to %s.", fmt.upper(), dest)
    return dest
