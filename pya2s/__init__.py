"""
pya2s - A minimal Python client for the A2S server query protocol

Usage:
    from pya2s import A2SClient

    client = A2SClient(timeout=5.0)
    client.connect("127.0.0.1:27015")
    info = client.get_info()
    print(f"{info.name}: {info.players}/{info.max_players} on {info.map}")
    for player in client.get_players():
        print(player.name, player.score)
    client.close()

Or with context manager:
    with A2SClient() as client:
        client.connect(("127.0.0.1", 27015))
        rules = client.get_rules()

Or quick query:
    from pya2s import query

    info, players, rules = query("127.0.0.1:27015")
"""

__version__ = "1.0.0"

from .client import A2SClient, query
from .config import ClientConfig, ConfigValidationError
from .exceptions import (
    A2SError,
    A2SConnectionError,
    ChallengeNotReceivedError,
    ChallengeRequiredError,
    InvalidResponseError,
    NotConnectedError,
    ProtocolMismatchError,
    QueryTimeoutError,
    ShortResponseError,
    TooManyRetriesError,
    UnknownHeaderError,
    UnsupportedFeatureError,
)
from .models import ServerInfo, SourceTVInfo, PlayerInfo, Rule, ServerFeatures, rules_to_dict

__all__ = [
    "A2SClient",
    "query",
    "ClientConfig",
    "ConfigValidationError",
    "ServerInfo",
    "SourceTVInfo",
    "PlayerInfo",
    "Rule",
    "ServerFeatures",
    "rules_to_dict",
    "A2SError",
    "A2SConnectionError",
    "ChallengeNotReceivedError",
    "ChallengeRequiredError",
    "InvalidResponseError",
    "NotConnectedError",
    "ProtocolMismatchError",
    "QueryTimeoutError",
    "ShortResponseError",
    "TooManyRetriesError",
    "UnknownHeaderError",
    "UnsupportedFeatureError",
]
