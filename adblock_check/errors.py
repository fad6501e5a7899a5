"""Errors raised while configuring a run or checking requests."""


class AdblockCheckError(Exception):
    """Base class for adblock-check errors."""


class ConfigurationError(AdblockCheckError):
    """Command line options or rule sources are unusable."""


class InputSyntaxError(AdblockCheckError):
    """A line of the record stream is not a valid request record."""

    def __init__(self, message: str, line_number: int, line: str) -> None:
        super().__init__(f"line {line_number}: {message}: {line!r}")
        self.line_number = line_number
        self.line = line


class EngineError(AdblockCheckError):
    """The blocking engine could not evaluate a request."""

    def __init__(self, message: str, url: str, context: str, request_type: str) -> None:
        super().__init__(message)
        self.url = url
        self.context = context
        self.request_type = request_type
