"""Adapter around the adblock engine used to check network requests."""

from pathlib import Path
from typing import Any, Iterable, Optional, Protocol

import adblock

from adblock_check.errors import EngineError
from adblock_check.models import CheckResult


class CheckEngine(Protocol):
    """Anything that can decide whether a single request is blocked."""

    def check(self, url: str, context: str, request_type: str) -> CheckResult:
        ...


def load_rule_text(rules_path: str) -> str:
    """Read a filter list file as text."""
    return Path(rules_path).read_text(encoding="utf-8")


def build_filter_set(
    rule_sources: Iterable[str], debug: bool = False
) -> adblock.FilterSet:
    """Accumulate the given rule texts, in order, into one filter set."""
    filter_set = adblock.FilterSet(debug=debug)
    for rules_text in rule_sources:
        filter_set.add_filter_list(rules_text)
    return filter_set


def build_engine(filter_set: adblock.FilterSet, debug: bool = False) -> "AdblockEngine":
    # Optimizing merges filters, which loses the rule text reported in debug results.
    engine = adblock.Engine(filter_set, optimize=not debug)
    return AdblockEngine(engine, debug=debug)


class AdblockEngine:
    """Checks requests with an ``adblock.Engine``."""

    def __init__(self, engine: Any, debug: bool = False) -> None:
        self.engine = engine
        self.debug = debug

    def check(self, url: str, context: str, request_type: str) -> CheckResult:
        """Check one request; ``request_type`` must already be normalized.

        Raises EngineError when the engine rejects the request, for example
        because the URL cannot be parsed.
        """
        try:
            blocker_result = self.engine.check_network_urls(url, context, request_type)
        except Exception as exc:
            raise EngineError(str(exc), url, context, request_type) from exc

        error: Optional[str] = getattr(blocker_result, "error", None)
        if error:
            raise EngineError(error, url, context, request_type)

        return CheckResult(
            matched=bool(blocker_result.matched),
            important=bool(getattr(blocker_result, "important", False)),
            redirect=getattr(blocker_result, "redirect", None),
            rewritten_url=getattr(blocker_result, "rewritten_url", None),
            exception=getattr(blocker_result, "exception", None),
            filter=getattr(blocker_result, "filter", None),
        )
