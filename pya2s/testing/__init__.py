"""
Testing infrastructure for pya2s
"""

from .mock_server import (
    MockA2SServer,
    ServerScenario,
    single_packet,
    split_packet,
    challenge_packet,
    source_info_payload,
    goldsource_info_payload,
    players_payload,
    rules_payload,
)

__all__ = [
    'MockA2SServer', 'ServerScenario',
    'single_packet', 'split_packet', 'challenge_packet',
    'source_info_payload', 'goldsource_info_payload',
    'players_payload', 'rules_payload',
]
