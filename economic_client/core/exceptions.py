"""
Custom exception hierarchy for the application.

Provides specific exception types for remote failures and local validation.
"""

from typing import Any, Optional


class EconomicError(Exception):
    """Base exception for all e-conomic client errors."""
    pass


class ConfigurationError(EconomicError):
    """Raised when required settings or credentials are missing."""
    pass


class APIError(EconomicError):
    """Raised when a remote API call fails."""
    
    def __init__(self, message: str, operation: Optional[str] = None, response: Optional[Any] = None):
        super().__init__(message)
        self.operation = operation
        self.response = response


class TransportError(APIError):
    """Raised on network or transport level failures."""
    pass


class RemoteFault(APIError):
    """Raised when the remote system rejects a request (SOAP fault)."""
    
    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        code: Optional[str] = None,
        response: Optional[Any] = None
    ):
        super().__init__(message, operation=operation, response=response)
        self.code = code


class CreationError(EconomicError):
    """Raised when a freshly created entity has no valid handle."""
    
    def __init__(self, message: str, handle: Optional[Any] = None):
        super().__init__(message)
        self.handle = handle
