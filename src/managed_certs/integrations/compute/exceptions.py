"""Compute API exceptions."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorItem(BaseModel):
    """One entry of the ``error.errors[]`` list in a Compute error body."""

    model_config = ConfigDict(extra="ignore")

    reason: str = Field(default="", description="Machine-readable reason, e.g. quotaExceeded")
    message: str = Field(default="", description="Human-readable message")
    domain: str = Field(default="", description="Error domain, e.g. usageLimits")


class ComputeError(Exception):
    """Base exception for Compute errors."""

    def __init__(self, message: str, details: str | None = None) -> None:
        """Initialize exception.

        Args:
            message: Error message.
            details: Additional details.
        """
        super().__init__(message)
        self.message = message
        self.details = details


class ComputeConnectionError(ComputeError):
    """Raised when the Compute API cannot be reached or times out."""


class ComputeConfigError(ComputeError):
    """Raised when configuration is invalid or missing."""


class ComputeAPIError(ComputeError):
    """Raised when the Compute API returns an error response.

    Attributes:
        status_code: HTTP status code of the response.
        errors: Structured error items from the response body.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        errors: list[ErrorItem] | None = None,
        details: str | None = None,
    ) -> None:
        """Initialize exception.

        Args:
            message: Error message.
            status_code: HTTP status code.
            errors: Error items parsed from the response body.
            details: Additional details.
        """
        super().__init__(message, details)
        self.status_code = status_code
        self.errors = errors or []

    def __str__(self) -> str:
        """Return string representation of the error."""
        parts = [self.message]
        if self.status_code:
            parts.append(f"(status: {self.status_code})")
        reasons = [item.reason for item in self.errors if item.reason]
        if reasons:
            parts.append(f"[{', '.join(reasons)}]")
        return " ".join(parts)

    @classmethod
    def from_response_body(cls, status_code: int, body: dict[str, Any]) -> ComputeAPIError:
        """Build the matching exception from a decoded Compute error body.

        Args:
            status_code: HTTP status code of the response.
            body: JSON body, ``{"error": {"code", "message", "errors": [...]}}``.

        Returns:
            ComputeNotFoundError for 404, ComputeAPIError otherwise.
        """
        error = body.get("error") or {}
        items = [ErrorItem.model_validate(item) for item in error.get("errors", [])]
        message = error.get("message") or f"Compute API error: {status_code}"
        error_cls = ComputeNotFoundError if status_code == 404 else ComputeAPIError
        return error_cls(message, status_code=status_code, errors=items)


class ComputeNotFoundError(ComputeAPIError):
    """Raised when a resource is not found."""
