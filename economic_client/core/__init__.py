"""
Core module providing foundational components for the application.

Includes interfaces, exceptions and logging helpers.
"""

from .interfaces import AccountingClient, ResponseWriter
from .exceptions import (
    EconomicError,
    ConfigurationError,
    APIError,
    TransportError,
    RemoteFault,
    CreationError,
)

__all__ = [
    'AccountingClient',
    'ResponseWriter',
    'EconomicError',
    'ConfigurationError',
    'APIError',
    'TransportError',
    'RemoteFault',
    'CreationError',
]
