"""
Logging configuration for pya2s with clear module prefixes
"""

import logging
from typing import Union


class ModuleLogger:
    """Custom logger that adds module-specific prefixes"""

    # Module prefix mapping
    MODULE_PREFIXES = {
        'pya2s.client': '[CLIENT]',
        'pya2s.protocol': '[CODEC]',
        'pya2s.parsers': '[PARSE]',
        'pya2s.testing': '[MOCK]',
        'pya2s.cli': '[CLI]',
    }

    @classmethod
    def get_logger(cls, name: str, level: int = logging.DEBUG) -> logging.Logger:
        """Get a logger with appropriate prefix for the module"""
        logger = logging.getLogger(name)

        # Don't add handler if already configured
        if logger.handlers:
            logger.setLevel(level)
            return logger

        handler = logging.StreamHandler()

        prefix = '[A2S]'
        for module_name, module_prefix in cls.MODULE_PREFIXES.items():
            if name.startswith(module_name):
                prefix = module_prefix
                break

        handler.setFormatter(ModulePrefixFormatter(prefix))

        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False  # Don't propagate to root logger

        return logger


class ModulePrefixFormatter(logging.Formatter):
    """Custom formatter that adds module prefix to log messages"""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(
            fmt='%(asctime)s - %(prefix)s %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

    def format(self, record):
        record.prefix = self.prefix
        return super().format(record)


def resolve_level(level: Union[int, str]) -> int:
    """Turn 'DEBUG'/'info'/10 into a logging level number"""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def configure_logging(level: Union[int, str] = logging.INFO):
    """Configure logging for every pya2s module"""
    level = resolve_level(level)
    logging.getLogger().setLevel(level)

    for module_name in ModuleLogger.MODULE_PREFIXES:
        ModuleLogger.get_logger(module_name, level)


def hexdump(data: bytes) -> str:
    """Space separated hex bytes for packet logging"""
    return ' '.join(f'{b:02x}' for b in data)
