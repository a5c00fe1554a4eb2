import csv
import logging
from pathlib import Path
from typing import Optional

from .models import BatchResult

FAILURE_HEADER = "Failed to create unique names for the following files:"


def format_failures(result: BatchResult) -> Optional[str]:
    """Newline-joined list of unnamed files, or None when every file got a name."""
    if not result.failures:
        return None
    lines = [FAILURE_HEADER]
    lines.extend(str(f.path) for f in result.failures)
    return "\n".join(lines)


class ReportGenerator:
    def __init__(self, result: BatchResult):
        self.result = result

    def write_csv(self, output_csv: Path):
        """
        One row per file: renamed, skipped and errored outcomes first,
        then the files no name could be derived for.
        """
        headers = ["Source Path", "Status", "Destination Path", "Notes"]

        with open(output_csv, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(headers)

            for outcome in self.result.outcomes:
                writer.writerow([
                    str(outcome.source),
                    outcome.status,
                    str(outcome.destination) if outcome.destination else "",
                    outcome.message,
                ])

            for failure in self.result.failures:
                writer.writerow([str(failure.path), "failed", "", failure.reason])

        logging.info(f"Report written: {output_csv}")
