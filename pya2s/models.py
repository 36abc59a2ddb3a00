"""
Data models for query results
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, Any, List, Iterator


SERVER_TYPE_NAMES = {
    "d": "Dedicated",
    "l": "Listen",
    "p": "SourceTV relay",
}

ENVIRONMENT_NAMES = {
    "l": "Linux",
    "w": "Windows",
    "m": "Mac",
    "o": "Mac",
}


@dataclass
class SourceTVInfo:
    """SourceTV relay advertised by the server"""
    port: int = 0
    name: str = ""


@dataclass
class ServerInfo:
    """Server details from an A2S_INFO response"""

    protocol: int = 0
    name: str = ""
    map: str = ""
    folder: str = ""
    game: str = ""
    app_id: int = 0
    players: int = 0
    max_players: int = 0
    bots: int = 0
    server_type: int = 0
    environment: int = 0
    visibility: int = 0
    vac: int = 0
    version: str = ""

    # Extra Data Flags section
    edf: int = 0
    game_port: int = 0
    steam_id: int = 0
    source_tv: SourceTVInfo = field(default_factory=SourceTVInfo)
    game_id: int = 0

    is_goldsource: bool = False

    @property
    def password_protected(self) -> bool:
        return self.visibility == 1

    @property
    def vac_enabled(self) -> bool:
        return self.vac == 1

    @property
    def server_type_name(self) -> str:
        """Human-readable server type ('d', 'l', 'p'; GoldSource sends upper case)"""
        return SERVER_TYPE_NAMES.get(chr(self.server_type).lower(), "Unknown")

    @property
    def environment_name(self) -> str:
        return ENVIRONMENT_NAMES.get(chr(self.environment).lower(), "Unknown")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return asdict(self)

    def __str__(self) -> str:
        return f"{self.name} [{self.map}] ({self.players}/{self.max_players} players)"


@dataclass
class PlayerInfo:
    """A player entry from an A2S_PLAYER response.

    index is the raw slot byte and is not stable between queries.
    deaths and money are only sent by game-specific protocol variants
    and stay at zero.
    """
    index: int = 0
    name: str = ""
    score: int = 0
    duration: float = 0.0
    deaths: int = 0
    money: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Rule:
    """A server rule (cvar) name/value pair"""
    name: str = ""
    value: str = ""

    def __iter__(self) -> Iterator[str]:
        return iter((self.name, self.value))


@dataclass
class ServerFeatures:
    """Query types a server answered during a live probe"""
    info: bool = True
    players: bool = False
    rules: bool = False
    ping: bool = False  # never probed


def rules_to_dict(rules: List[Rule]) -> Dict[str, str]:
    """Map rule names to values, keeping server order; later duplicates win"""
    return {rule.name: rule.value for rule in rules}
