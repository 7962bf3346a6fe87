"""
Application settings and configuration.

Centralizes connection, credential and logging values read from the
environment (and a local .env file).
"""

import os
from typing import Optional, Dict, Any
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_WSDL_URL = 'https://api.e-conomic.com/secure/api1/EconomicWebservice.asmx?WSDL'


class Settings:
    """
    Application settings.
    
    Centralizes all configuration values.
    """
    
    def __init__(self):
        """Initialize settings from environment and defaults."""
        # API Settings
        self.wsdl_url = os.getenv('ECONOMIC_WSDL_URL', DEFAULT_WSDL_URL)
        self.request_timeout = float(os.getenv('REQUEST_TIMEOUT', '30'))
        
        # Credentials (agreement login)
        self.agreement_number = os.getenv('ECONOMIC_AGREEMENT_NUMBER')
        self.username = os.getenv('ECONOMIC_USERNAME')
        self.password = os.getenv('ECONOMIC_PASSWORD')
        
        # Credentials (token login)
        self.token = os.getenv('ECONOMIC_TOKEN')
        self.app_token = os.getenv('ECONOMIC_APP_TOKEN')
        
        # Logging Settings
        self.log_level = os.getenv('LOG_LEVEL', 'INFO')
        self.log_format = os.getenv(
            'LOG_FORMAT',
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        self.log_file = os.getenv('LOG_FILE') or None
    
    @property
    def uses_token_login(self) -> bool:
        """True when token credentials are configured."""
        return bool(self.token and self.app_token)
    
    def validate(self) -> bool:
        """
        Validate that one complete set of credentials is present.
        
        Returns:
            True if valid, False otherwise
        """
        if not self.wsdl_url:
            return False
        
        if self.uses_token_login:
            return True
        
        return all([self.agreement_number, self.username, self.password])
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary (excluding sensitive data)."""
        return {
            'wsdl_url': self.wsdl_url,
            'request_timeout': self.request_timeout,
            'agreement_number': self.agreement_number,
            'username': self.username,
            'uses_token_login': self.uses_token_login,
            'log_level': self.log_level,
            'log_file': self.log_file,
        }


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Optional[Settings]):
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
