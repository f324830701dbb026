"""Error hierarchy for xgpt.

Errors raised inside a single chat turn derive from CompletionError and are
recovered at the turn boundary. ConfigurationError is the only fatal one.
"""


class XGPTError(Exception):
    """Base class for all xgpt errors."""


class ConfigurationError(XGPTError):
    """Startup configuration is unusable (e.g. no API key)."""


class CompletionError(XGPTError):
    """A completion request failed; the current turn is abandoned."""


class UpstreamError(CompletionError):
    """The completion endpoint answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Request failed with status code {status_code}: {body}")


class ResponseShapeError(CompletionError):
    """A successful response body did not have the expected shape."""


class ConnectionFailedError(CompletionError):
    """The request never produced a response (DNS, refused, timeout...)."""
