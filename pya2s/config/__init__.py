"""
Configuration for the query client
"""

from .client_config import ClientConfig
from .validation import (
    ConfigValidationError,
    validate_host,
    validate_port,
    validate_timeout,
    validate_retries,
    parse_address,
)

__all__ = [
    'ClientConfig',
    'ConfigValidationError',
    'validate_host',
    'validate_port',
    'validate_timeout',
    'validate_retries',
    'parse_address',
]
