"""Choose between single-request and streaming runs."""

from typing import Optional

from adblock_check.errors import ConfigurationError
from adblock_check.models import RunMode

PARTIAL_REQUEST_MESSAGE = (
    "url, context, and type must be either all provided or none provided"
)


def select_run_mode(
    url: Optional[str], context: Optional[str], request_type: Optional[str]
) -> RunMode:
    """Classify the run from the request flags the user actually passed.

    No flags means records are streamed from the request source, all three
    means a single request. Anything in between is a configuration error.
    """
    provided = sum(value is not None for value in (url, context, request_type))
    if provided == 0:
        return RunMode.STREAMING
    if provided == 3:
        return RunMode.SINGLE_REQUEST
    raise ConfigurationError(PARTIAL_REQUEST_MESSAGE)
