"""
Remote API clients.
"""

from .soap_client import EconomicSoapClient

__all__ = [
    'EconomicSoapClient',
]
