"""
Custom exceptions for apiharness
"""

from typing import Any


class HarnessError(Exception):
    """Base exception for all apiharness errors"""

    pass


class UnexpectedResponse(HarnessError):
    """
    Raised when the application answers with a status code outside 2xx.

    Carries everything needed to diagnose the failed call from a test report:
    the HTTP verb, the resolved URL, the status code and the raw response body.
    """

    BODY_EXCERPT_LENGTH = 500

    def __init__(self, verb: str, url: str, status_code: int | None, body: Any = None):
        self.verb = verb
        self.url = url
        self.status_code = status_code
        self.body = body

        excerpt = "" if body is None else str(body)
        if len(excerpt) > self.BODY_EXCERPT_LENGTH:
            excerpt = excerpt[: self.BODY_EXCERPT_LENGTH] + "..."

        super().__init__(f"{verb} {url} returned HTTP {status_code}: {excerpt}")


class TransportError(HarnessError):
    """
    Raised when no HTTP response was received at all.

    This covers connection refused, DNS failures and timeouts. It is kept
    separate from UnexpectedResponse so tests can tell "the server said no"
    apart from "the server was not there".
    """

    def __init__(self, verb: str, url: str, reason: str):
        self.verb = verb
        self.url = url
        self.reason = reason
        super().__init__(f"{verb} {url} failed: {reason}")


class DecodeError(HarnessError):
    """Raised when a response body cannot be decoded"""

    def __init__(self, message: str, raw_body: str | None = None):
        self.raw_body = raw_body
        super().__init__(message)


class UnknownKeyError(HarnessError, LookupError):
    """Raised when a fixture collection is asked for a key that was never set"""

    def __init__(self, collection_name: str, key: Any):
        self.collection_name = collection_name
        self.key = key
        super().__init__(
            f"Can't find test_data.{collection_name}[{key!r}]. Did you forget to set it?"
        )


class ConfigurationError(HarnessError):
    """
    Raised when required configuration values are missing or invalid.

    Missing required values are caught early rather than silently falling
    back to hardcoded defaults.
    """

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        if config_key:
            super().__init__(f"Configuration error for '{config_key}': {message}")
        else:
            super().__init__(f"Configuration error: {message}")
