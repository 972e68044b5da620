"""Exception types raised by figaro-webdriver."""

from __future__ import annotations

from typing import Any


class WebDriverException(Exception):
    """Base class for every error raised by this package."""


class MalformedCapabilities(WebDriverException):
    """The capabilities document cannot be expressed in both dialects."""


class HeaderConstructionError(WebDriverException):
    def __init__(self, header: str, reason: str) -> None:
        super().__init__(f"Invalid value for header {header}: {reason}")
        self.header = header


class DeserializationError(WebDriverException):
    """A JSON value did not match the shape it was decoded into."""

    def __init__(self, target: Any, cause: Exception) -> None:
        name = getattr(target, "__name__", None) or repr(target)
        super().__init__(f"Failed to decode {name}: {cause}")
        self.target = target
        self.cause = cause


class RemoteConnectionError(WebDriverException):
    """The remote end could not be reached or did not answer with JSON."""


class WebDriverError(WebDriverException):
    """The remote end answered with a WebDriver error payload."""

    def __init__(
        self,
        error: str,
        message: str = "",
        status_code: int | None = None,
        stacktrace: str | None = None,
    ) -> None:
        super().__init__(f"{error}: {message}" if message else error)
        self.error = error
        self.message = message
        self.status_code = status_code
        self.stacktrace = stacktrace

    @classmethod
    def from_response(cls, status_code: int, data: Any) -> WebDriverError:
        """Build an error from a W3C or legacy error response body."""
        value = data.get("value") if isinstance(data, dict) else None
        if isinstance(value, dict):
            return cls(
                error=str(value.get("error") or f"status {data.get('status', status_code)}"),
                message=str(value.get("message", "")),
                status_code=status_code,
                stacktrace=value.get("stacktrace"),
            )
        return cls(error=f"http {status_code}", message=str(value or ""), status_code=status_code)
