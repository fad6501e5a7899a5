"""Entry point for checking requests against filter list rules."""

import argparse
import contextlib
import logging
import sys
from typing import BinaryIO, Iterator, List, Optional, Sequence

from adblock_check import __version__
from adblock_check.config import DATA_DIR_ENV, CheckConfig, get_check_config
from adblock_check.errors import ConfigurationError, InputSyntaxError
from adblock_check.filter_engine import (
    CheckEngine,
    build_engine,
    build_filter_set,
    load_rule_text,
)
from adblock_check.logger import CheckLogger
from adblock_check.metrics import MetricsLogger
from adblock_check.models import CheckRecord, RunMode
from adblock_check.record_stream import RecordStreamProcessor
from adblock_check.reporter import ResultReporter
from adblock_check.request_types import request_type_choices
from adblock_check.run_mode import select_run_mode

EXIT_USAGE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adblock-check",
        description="Check whether requests would be blocked by filter list rules",
    )
    parser.add_argument("-v", "--version", action="version", version=__version__)
    parser.add_argument(
        "--requests",
        default=None,
        help="File of newline-delimited JSON records with url, context and type "
        "keys (default: standard input)",
    )
    parser.add_argument("--url", help="The full URL to check")
    parser.add_argument(
        "--context",
        help="The security context the request occurred in, as a full URL",
    )
    parser.add_argument(
        "--type",
        choices=request_type_choices(),
        metavar="TYPE",
        help="The request type, either as used by filter lists (e.g. image) "
        "or as reported by Chromium (e.g. Image)",
    )
    parser.add_argument(
        "--rules",
        nargs="*",
        default=None,
        help="Filter list files to check against (default: EasyList and EasyPrivacy)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print the full check result, including the matching rule",
    )
    parser.add_argument(
        "--metrics-path",
        default=None,
        help="Append per-request check metrics to this CSV file",
    )
    parser.add_argument(
        "--log-file", default=None, help="Also write diagnostics to this file"
    )
    parser.add_argument(
        "--debug-log", action="store_true", help="Log every checked request"
    )
    return parser


def _read_rules_file(rules_path: str) -> str:
    try:
        return load_rule_text(rules_path)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read rules file {rules_path}: {exc}") from exc


def load_rule_sources(
    rule_paths: Optional[Sequence[str]], config: CheckConfig
) -> List[str]:
    """Read explicit rule files, or the default lists when none were given.

    Every default list must be present.
    """
    if rule_paths is not None:
        return [_read_rules_file(rules_path) for rules_path in rule_paths]

    missing = [path for path in config.default_rule_paths if not path.is_file()]
    if missing:
        raise ConfigurationError(
            "Default rules file(s) not found: "
            + ", ".join(str(path) for path in missing)
            + f" (pass --rules or set {DATA_DIR_ENV})"
        )
    return [_read_rules_file(str(path)) for path in config.default_rule_paths]


def create_engine(
    rule_paths: Optional[Sequence[str]], debug: bool, logger: CheckLogger
) -> CheckEngine:
    rule_sources = load_rule_sources(rule_paths, get_check_config())
    if not rule_sources:
        logger.warning("No filter rules loaded; no request will match")
    logger.debug("Building engine from %d rule source(s)", len(rule_sources))
    return build_engine(build_filter_set(rule_sources, debug=debug), debug=debug)


@contextlib.contextmanager
def open_requests(requests_path: Optional[str]) -> Iterator[BinaryIO]:
    """Open the record source in binary mode; lines are decoded one by one."""
    if requests_path is None or requests_path == "-":
        yield sys.stdin.buffer
        return
    try:
        requests_file = open(requests_path, "rb")
    except OSError as exc:
        raise ConfigurationError(
            f"Cannot read requests file {requests_path}: {exc}"
        ) from exc
    with requests_file:
        yield requests_file


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        run_mode = select_run_mode(args.url, args.context, args.type)
    except ConfigurationError as exc:
        parser.error(str(exc))
    if run_mode is RunMode.SINGLE_REQUEST and args.requests is not None:
        parser.error("--requests cannot be combined with --url, --context and --type")

    logger = CheckLogger(
        args.log_file, level=logging.DEBUG if args.debug_log else logging.INFO
    )
    try:
        # Verbose results report the matching rule, which needs a debug engine.
        engine = create_engine(args.rules, debug=args.verbose, logger=logger)
        metrics_logger = MetricsLogger(args.metrics_path) if args.metrics_path else None
        processor = RecordStreamProcessor(engine, logger, metrics_logger)
        reporter = ResultReporter(verbose=args.verbose, stream=sys.stdout)

        if run_mode is RunMode.SINGLE_REQUEST:
            record = CheckRecord(url=args.url, context=args.context, type=args.type)
            reporter.report(processor.check(record))
        else:
            with open_requests(args.requests) as lines:
                for _, result in processor.process(lines):
                    reporter.report(result)

        return reporter.exit_status(processor.any_failure)
    except (ConfigurationError, InputSyntaxError) as exc:
        logger.error("%s", exc)
        return EXIT_USAGE_ERROR
    finally:
        logger.close()


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
