"""Print check results and turn them into an exit status."""

import json
import sys
from typing import Optional, TextIO

from adblock_check.models import CheckResult

EXIT_SUCCESS = 0
EXIT_CHECK_FAILED = 1


class ResultReporter:
    """Writes one line of output per checked request."""

    def __init__(self, verbose: bool = False, stream: Optional[TextIO] = None) -> None:
        self.verbose = verbose
        self.stream = stream if stream is not None else sys.stdout

    def format_result(self, result: CheckResult) -> str:
        if result.failed:
            return "null"
        if self.verbose:
            return json.dumps(result.to_dict())
        return json.dumps(result.matched)

    def report(self, result: CheckResult) -> None:
        self.stream.write(self.format_result(result) + "\n")
        self.stream.flush()

    @staticmethod
    def exit_status(any_failure: bool) -> int:
        return EXIT_CHECK_FAILED if any_failure else EXIT_SUCCESS
