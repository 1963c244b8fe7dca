"""
Error classes for the Admin API Python client.

Validation errors are raised before any request is sent; transport errors
come from the fetch collaborator.
"""

from typing import Optional


class AdminApiClientError(Exception):
    """Base exception class for the Admin API client."""

    def __init__(self, message: str):
        """Initialize client error.

        Args:
            message: Error message
        """
        super().__init__(message)
        self.message = message


class ConfigurationError(AdminApiClientError):
    """Invalid client configuration (token, domain, version, retries)."""


class RequestValidationError(ConfigurationError):
    """Invalid per-call option, detected before the request is sent."""


class NetworkError(AdminApiClientError):
    """Network failure that persisted after all retries were used."""

    def __init__(self, message: str, attempts: Optional[int] = None):
        """Initialize network error.

        Args:
            message: Error message
            attempts: Number of attempts made before giving up (optional)
        """
        super().__init__(message)
        self.attempts = attempts
