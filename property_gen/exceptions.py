"""Custom exception hierarchy for property-gen."""

from typing import Any


class PropertyGenError(Exception):
    """Base exception for all property-gen errors."""


class UsageError(PropertyGenError):
    """Raised when a request is missing or misuses a selection parameter.

    Parameters
    ----------
    message : str
        Short description of what is wrong.
    usage : dict[str, str] | None
        Example request shapes to show the caller.
    """

    def __init__(self, message: str, usage: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.usage = usage or {}

    def to_dict(self) -> dict[str, Any]:
        """Response body for the HTTP surface."""
        return {"success": False, "error": str(self), "usage": self.usage}


class MethodNotAllowedError(PropertyGenError):
    """Raised for HTTP methods other than GET and OPTIONS."""


class InvalidCountError(PropertyGenError, ValueError):
    """Raised when a negative record count reaches the synthesizer."""


class ConfigurationError(PropertyGenError):
    """Raised when configuration is invalid or missing."""


class SinkError(PropertyGenError):
    """Raised when a sink operation fails."""
