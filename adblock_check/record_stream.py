"""Check newline-delimited JSON request records one at a time."""

import json
import time
from typing import Iterable, Iterator, Optional, Tuple, Union

from adblock_check.errors import EngineError, InputSyntaxError
from adblock_check.filter_engine import CheckEngine
from adblock_check.logger import CheckLogger
from adblock_check.metrics import MetricsLogger
from adblock_check.models import CheckRecord, CheckResult
from adblock_check.request_types import normalize_request_type

REQUIRED_KEYS = ("url", "type", "context")


def decode_line(raw_line: bytes, line_number: int) -> str:
    try:
        return raw_line.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InputSyntaxError(
            f"invalid UTF-8 ({exc.reason})",
            line_number,
            raw_line.decode("utf-8", errors="replace"),
        ) from exc


def parse_record(line: str, line_number: int) -> CheckRecord:
    """Parse one stream line into a CheckRecord.

    Raises InputSyntaxError if the line is not a JSON object holding string
    ``url``, ``type`` and ``context`` values.
    """
    try:
        data = json.loads(line)
    except json.JSONDecodeError as exc:
        raise InputSyntaxError(f"invalid JSON ({exc.msg})", line_number, line) from exc

    if not isinstance(data, dict) or any(key not in data for key in REQUIRED_KEYS):
        raise InputSyntaxError(
            'records must have "url", "type", and "context" keys', line_number, line
        )
    for key in REQUIRED_KEYS:
        if not isinstance(data[key], str):
            raise InputSyntaxError(f'"{key}" must be a string', line_number, line)

    return CheckRecord(url=data["url"], context=data["context"], type=data["type"])


class RecordStreamProcessor:
    """Runs records through an engine, keeping going past engine failures."""

    def __init__(
        self,
        engine: CheckEngine,
        logger: CheckLogger,
        metrics_logger: Optional[MetricsLogger] = None,
    ) -> None:
        self.engine = engine
        self.logger = logger
        self.metrics_logger = metrics_logger
        self.any_failure = False

    def check(self, record: CheckRecord) -> CheckResult:
        """Check one record, turning an engine failure into a failed result."""
        request_type = normalize_request_type(record.type)
        start = time.perf_counter()
        try:
            result = self.engine.check(record.url, record.context, request_type)
        except EngineError as exc:
            self.logger.error(
                "Failed to check url=%s context=%s type=%s: %s",
                record.url,
                record.context,
                record.type,
                exc,
            )
            self.any_failure = True
            result = CheckResult.failure(str(exc))
        latency_ms = int((time.perf_counter() - start) * 1000)

        self.logger.debug(
            "Checked %s (type %s -> %s): matched=%s",
            record.url,
            record.type,
            request_type,
            result.matched,
        )
        if self.metrics_logger is not None:
            self.metrics_logger.log(record, request_type, result, latency_ms)
        return result

    def process(
        self, lines: Iterable[Union[str, bytes]]
    ) -> Iterator[Tuple[CheckRecord, CheckResult]]:
        """Yield a result for each record, in input order.

        Lines may be text or UTF-8 bytes. Blank lines are skipped. A malformed
        line raises InputSyntaxError and nothing after it is read.
        """
        for line_number, raw_line in enumerate(lines, start=1):
            if isinstance(raw_line, bytes):
                raw_line = decode_line(raw_line, line_number)
            line = raw_line.strip()
            if not line:
                continue
            record = parse_record(line, line_number)
            yield record, self.check(record)
