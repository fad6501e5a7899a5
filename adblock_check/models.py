"""Request records, check results and run modes."""

import enum
from dataclasses import dataclass
from typing import Any, Dict, Optional


class RunMode(enum.Enum):
    """How requests reach the checker for the lifetime of the process."""

    SINGLE_REQUEST = "single_request"
    STREAMING = "streaming"


@dataclass(frozen=True)
class CheckRecord:
    """One request to check: its URL, the page it came from and its type."""

    url: str
    context: str
    type: str


@dataclass(frozen=True)
class CheckResult:
    """Outcome of checking one request against the engine.

    A result with ``error`` set means the engine could not evaluate the
    request at all, which is not the same as the request not matching.
    """

    matched: bool = False
    important: bool = False
    redirect: Optional[str] = None
    rewritten_url: Optional[str] = None
    exception: Optional[str] = None
    filter: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def failure(cls, message: str) -> "CheckResult":
        return cls(error=message)

    @property
    def failed(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matched": self.matched,
            "important": self.important,
            "redirect": self.redirect,
            "rewritten_url": self.rewritten_url,
            "exception": self.exception,
            "filter": self.filter,
        }
