"""
Parsers for A2S response payloads
"""

from .info import parse_source_info, parse_goldsource_info
from .players import parse_players, parse_rules

__all__ = [
    'parse_source_info',
    'parse_goldsource_info',
    'parse_players',
    'parse_rules',
]
