"""Exceptions raised while analyzing a site."""

from typing import Optional


class InspectorError(Exception):
    """Base class for all web-inspector errors."""


class InvalidInputError(InspectorError):
    """The site URL is missing or malformed."""


class FetchError(InspectorError):
    """The page could not be retrieved."""


class FetchTimeout(FetchError):
    """The fetch did not finish within the timeout."""

    def __init__(self, timeout: float):
        super().__init__(f"Request timeout after {timeout:g} seconds")
        self.timeout = timeout


class HttpStatusError(FetchError):
    """The server answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str):
        super().__init__(f"HTTP {status_code}: {reason}")
        self.status_code = status_code
        self.reason = reason


class ConnectionFailure(FetchError):
    """DNS, TLS or network failure."""


class EvaluationFault(InspectorError):
    """A rule check raised an unexpected exception.

    Faults are contained to the rule that raised them; the engine turns
    them into a failed verdict and carries on.
    """

    def __init__(self, rule_id: str, cause: Optional[BaseException] = None):
        message = f"{type(cause).__name__}: {cause}" if cause else "unknown error"
        super().__init__(f"Check for rule {rule_id} failed: {message}")
        self.rule_id = rule_id
        self.cause = cause
