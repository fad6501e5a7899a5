"""Per-check metrics written to a CSV file."""

import csv
import time
from pathlib import Path

from adblock_check.errors import ConfigurationError
from adblock_check.models import CheckRecord, CheckResult


class MetricsLogger:
    """Append one CSV row per checked request."""

    FIELDNAMES = [
        "timestamp",
        "url",
        "context",
        "type",
        "request_type",
        "latency_ms",
        "matched",
        "failed",
    ]

    def __init__(self, metrics_path: str) -> None:
        self.metrics_path = Path(metrics_path)
        self.metrics_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_header()

    def _ensure_header(self) -> None:
        if self.metrics_path.exists() and self.metrics_path.stat().st_size > 0:
            with self.metrics_path.open("r", newline="") as csv_file:
                existing_header = next(csv.reader(csv_file), [])
            if existing_header != self.FIELDNAMES:
                raise ConfigurationError(
                    f"{self.metrics_path} has an unexpected header: {existing_header}"
                )
            return

        with self.metrics_path.open("w", newline="") as csv_file:
            writer = csv.writer(csv_file)
            writer.writerow(self.FIELDNAMES)

    def log(
        self,
        record: CheckRecord,
        request_type: str,
        result: CheckResult,
        latency_ms: int,
    ) -> None:
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with self.metrics_path.open("a", newline="") as csv_file:
            writer = csv.writer(csv_file)
            writer.writerow(
                [
                    timestamp,
                    record.url,
                    record.context,
                    record.type,
                    request_type,
                    latency_ms,
                    int(result.matched),
                    int(result.failed),
                ]
            )
