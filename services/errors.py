from __future__ import annotations

from typing import Any, Optional


class RegistryError(RuntimeError):
    """Base class for every failure raised by the registry extraction code."""


class InvalidParameter(RegistryError, ValueError):
    """A search parameter was rejected before any network access."""

    def __init__(self, param: str, value: Any, message: Optional[str] = None) -> None:
        self.param = param
        self.value = value
        super().__init__(message or f"Invalid {param} parameter: {value!r}")


class FetchFailure(RegistryError):
    """The page could not be retrieved. Never retried."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch page: {reason}")


class ParseFailure(RegistryError):
    """A required structural anchor was missing from the fetched document."""
