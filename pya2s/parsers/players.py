"""
A2S_PLAYER and A2S_RULES payload parsers
"""

from typing import List

from ..exceptions import ShortResponseError
from ..models import PlayerInfo, Rule
from ..protocol.binary_reader import BinaryReader


def parse_players(data: bytes) -> List[PlayerInfo]:
    """
    Parse an A2S_PLAYER payload (response type 'D').

    Format: count(1) then per player index(1) name\\0 score(4) duration(4)

    Stops after count entries or when the buffer runs out, whichever
    comes first. A player cut inside its score or duration is an error.
    """
    if len(data) < 1:
        raise ShortResponseError()

    reader = BinaryReader(data)
    count = reader.read_byte()

    players = []
    while len(players) < count and reader.has_data(1):
        player = PlayerInfo()
        player.index = reader.read_byte()
        player.name = reader.read_string()
        player.score = reader.read_int32()
        player.duration = reader.read_float()
        players.append(player)

    return players


def parse_rules(data: bytes) -> List[Rule]:
    """
    Parse an A2S_RULES payload (response type 'E').

    Format: count(2) then per rule name\\0 value\\0

    Rules keep the server's order. Servers that announce more rules than
    fit in the datagram yield what was received.
    """
    if len(data) < 2:
        raise ShortResponseError()

    reader = BinaryReader(data)
    count = reader.read_uint16()

    rules = []
    while len(rules) < count and reader.has_data(1):
        name = reader.read_string()
        value = reader.read_string()
        rules.append(Rule(name, value))

    return rules
