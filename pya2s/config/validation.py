"""
Configuration validation utilities
"""

from typing import Tuple, Union


class ConfigValidationError(ValueError):
    """Raised when configuration validation fails"""
    pass


def validate_host(host: str) -> str:
    """Validate host address"""
    if not host or not isinstance(host, str):
        raise ConfigValidationError("Host must be a non-empty string")

    if len(host.strip()) == 0:
        raise ConfigValidationError("Host cannot be empty or whitespace")

    return host.strip()


def validate_port(port: int) -> int:
    """Validate port number"""
    if isinstance(port, bool) or not isinstance(port, int):
        raise ConfigValidationError("Port must be an integer")

    if port < 1 or port > 65535:
        raise ConfigValidationError("Port must be between 1 and 65535")

    return port


def validate_timeout(timeout: float) -> float:
    """Validate timeout value"""
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
        raise ConfigValidationError("Timeout must be a number")

    if timeout <= 0:
        raise ConfigValidationError("Timeout must be greater than 0")

    return float(timeout)


def validate_retries(retries: int) -> int:
    """Validate the number of request attempts"""
    if isinstance(retries, bool) or not isinstance(retries, int):
        raise ConfigValidationError("Retries must be an integer")

    if retries < 1:
        raise ConfigValidationError("Retries must be at least 1")

    return retries


def parse_address(address: Union[str, Tuple[str, int]]) -> Tuple[str, int]:
    """
    Split a server address into (host, port).

    Accepts "host:port", "[v6addr]:port" or a (host, port) tuple.
    """
    if isinstance(address, tuple):
        if len(address) != 2:
            raise ConfigValidationError("Address tuple must be (host, port)")
        host, port = address
        return validate_host(host), validate_port(port)

    if not isinstance(address, str):
        raise ConfigValidationError("Address must be a string or (host, port) tuple")

    address = address.strip()
    if address.startswith('['):
        host, sep, rest = address[1:].partition(']')
        if not sep or not rest.startswith(':'):
            raise ConfigValidationError(f"Invalid address: {address}")
        port_str = rest[1:]
    else:
        host, sep, port_str = address.rpartition(':')
        if not sep:
            raise ConfigValidationError(f"Address must include a port: {address}")

    try:
        port = int(port_str)
    except ValueError:
        raise ConfigValidationError(f"Invalid port in address: {address}")

    return validate_host(host), validate_port(port)
