"""
Logging setup for applications embedding the e-conomic client.

Library modules only call get_logger(__name__); nothing is printed until the
host application calls setup_logging (or configure_from_settings).
"""

import logging
import sys
from typing import Optional
from pathlib import Path

LIBRARY_LOGGER = 'economic_client'

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# zeep logs every WSDL import and urllib3 every pooled connection at DEBUG
NOISY_LOGGERS = ('zeep', 'urllib3')


def setup_logging(
    level: str = 'INFO',
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
    quiet_transport: bool = True
) -> None:
    """
    Route remote call, lookup and login messages to stdout and an optional file.

    Args:
        level: Level name; unknown names fall back to INFO
        format_string: Record format (DEFAULT_FORMAT if None)
        log_file: Also append to this file, creating its directory
        quiet_transport: Hold zeep/urllib3 at WARNING even when level is DEBUG,
            so 'Calling <operation>' lines stay readable
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=format_string or DEFAULT_FORMAT,
        handlers=handlers,
        force=True
    )

    if quiet_transport:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(max(log_level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Logger for a module of this package (pass __name__)."""
    return logging.getLogger(name)


def configure_from_settings(settings) -> None:
    """Apply LOG_LEVEL, LOG_FORMAT and LOG_FILE from a Settings object."""
    setup_logging(
        level=settings.log_level,
        format_string=settings.log_format,
        log_file=settings.log_file
    )


# Silent by default until the application configures logging
logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())
