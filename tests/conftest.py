from __future__ import annotations

from typing import List, Optional, Set, Tuple

import pytest

from adblock_check.errors import EngineError
from adblock_check.logger import CheckLogger
from adblock_check.models import CheckResult


class FakeEngine:
    """Blocks URLs containing "/ad" and rejects URLs listed in ``broken``."""

    def __init__(self, broken: Optional[Set[str]] = None) -> None:
        self.broken = broken or set()
        self.calls: List[Tuple[str, str, str]] = []

    def check(self, url: str, context: str, request_type: str) -> CheckResult:
        self.calls.append((url, context, request_type))
        if url in self.broken:
            raise EngineError("invalid URL", url, context, request_type)
        if "/ad" in url:
            return CheckResult(matched=True, filter="/ad")
        return CheckResult(matched=False)


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def check_logger():
    logger = CheckLogger()
    yield logger
    logger.close()
