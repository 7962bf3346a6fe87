"""
Configuration management module.

Centralizes connection settings and credentials.
"""

from .settings import Settings, get_settings, set_settings, DEFAULT_WSDL_URL

__all__ = [
    'Settings',
    'get_settings',
    'set_settings',
    'DEFAULT_WSDL_URL',
]
