"""
Client Configuration - query client settings
"""

from dataclasses import dataclass
from typing import Dict, Any

from ..protocol.constants import (
    DEFAULT_BUFFER_SIZE,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_DELAY,
    DEFAULT_TIMEOUT,
)
from ..utils.logging_config import resolve_level
from .validation import validate_retries, validate_timeout, ConfigValidationError


@dataclass
class ClientConfig:
    """Client configuration settings"""

    # Per request deadline, re-armed before every send
    timeout: float = DEFAULT_TIMEOUT

    # Challenge retry policy
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: float = DEFAULT_RETRY_DELAY

    # Receive buffer for a single datagram
    buffer_size: int = DEFAULT_BUFFER_SIZE

    # Logging
    log_level: str = "INFO"
    log_packets: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'timeout': self.timeout,
            'max_retries': self.max_retries,
            'retry_delay': self.retry_delay,
            'buffer_size': self.buffer_size,
            'log_level': self.log_level,
            'log_packets': self.log_packets,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ClientConfig':
        """Create from dictionary"""
        return cls(**data)

    def update(self, **kwargs):
        """Update configuration values"""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def validate(self) -> 'ClientConfig':
        """Validate all settings, raising ConfigValidationError on the first bad one"""
        self.timeout = validate_timeout(self.timeout)
        self.max_retries = validate_retries(self.max_retries)
        if not isinstance(self.retry_delay, (int, float)) or self.retry_delay < 0:
            raise ConfigValidationError("Retry delay must be a non-negative number")
        if not isinstance(self.buffer_size, int) or self.buffer_size < 5:
            raise ConfigValidationError("Buffer size must be an integer of at least 5")
        try:
            resolve_level(self.log_level)
        except ValueError as e:
            raise ConfigValidationError(str(e))
        return self
