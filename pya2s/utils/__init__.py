"""
pya2s Utilities - logging helpers
"""

from .logging_config import ModuleLogger, configure_logging, hexdump

__all__ = [
    'ModuleLogger',
    'configure_logging',
    'hexdump',
]
