"""
Mock A2S server for testing the client without a real game server
"""

import logging
import socket
import struct
import threading
from enum import Enum
from typing import Callable, List, Optional, Tuple

from ..models import PlayerInfo, Rule, ServerInfo
from ..protocol.constants import (
    HEADER_SINGLE,
    HEADER_SPLIT,
    EDF_GAME_ID,
    EDF_KEYWORDS,
    EDF_PORT,
    EDF_SOURCE_TV,
    EDF_STEAM_ID,
    RequestType,
    ResponseType,
)
from ..protocol.packets import pack_challenge, unpack_challenge


class ServerState(Enum):
    """Server state enumeration"""
    STOPPED = "stopped"
    RUNNING = "running"


# =============================================================================
# Response builders
# =============================================================================

def _cstr(value: str) -> bytes:
    return value.encode('utf-8') + b'\x00'


def single_packet(response_type: int, payload: bytes = b'') -> bytes:
    """Wrap a payload in a single-packet datagram"""
    return struct.pack('<IB', HEADER_SINGLE, response_type) + payload


def split_packet(response_type: int, payload: bytes, packet_id: int = 1,
                 total: int = 1, number: int = 0, size: int = 1248) -> bytes:
    """Wrap a payload in a split datagram: id(4) total(1) number(1) size(2) type(1)"""
    return struct.pack('<IiBBHB', HEADER_SPLIT, packet_id, total, number, size, response_type) + payload


def challenge_packet(challenge: int) -> bytes:
    return single_packet(ResponseType.CHALLENGE, pack_challenge(challenge))


def source_info_payload(info: ServerInfo, keywords: str = "") -> bytes:
    """Encode a ServerInfo as a Source A2S_INFO payload, EDF fields per info.edf"""
    data = bytearray()
    data.append(info.protocol)
    data += _cstr(info.name) + _cstr(info.map) + _cstr(info.folder) + _cstr(info.game)
    data += struct.pack('<H', info.app_id)
    data += bytes([info.players, info.max_players, info.bots,
                   info.server_type, info.environment, info.visibility, info.vac])
    data += _cstr(info.version)
    data.append(info.edf)
    if info.edf & EDF_PORT:
        data += struct.pack('<H', info.game_port)
    if info.edf & EDF_STEAM_ID:
        data += struct.pack('<Q', info.steam_id)
    if info.edf & EDF_SOURCE_TV:
        data += struct.pack('<H', info.source_tv.port) + _cstr(info.source_tv.name)
    if info.edf & EDF_KEYWORDS:
        data += _cstr(keywords)
    if info.edf & EDF_GAME_ID:
        data += struct.pack('<Q', info.game_id)
    return bytes(data)


def goldsource_info_payload(info: ServerInfo, address: str = "127.0.0.1:27015",
                            mod: bool = False) -> bytes:
    """Encode a ServerInfo as a GoldSource A2S_INFO payload"""
    data = bytearray()
    data += _cstr(address)
    data += _cstr(info.name) + _cstr(info.map) + _cstr(info.folder) + _cstr(info.game)
    data += bytes([info.players, info.max_players, info.protocol,
                   info.server_type, info.environment, info.visibility])
    if mod:
        data.append(1)
        data += _cstr("http://example.com/mod") + _cstr("http://example.com/mod.zip")
        data.append(0)
        data += struct.pack('<ii', 1, 184000000)
        data += bytes([0, 1])
    else:
        data.append(0)
    data.append(info.vac)
    data.append(info.bots)
    return bytes(data)


def players_payload(players: List[PlayerInfo], count: Optional[int] = None) -> bytes:
    data = bytearray([len(players) if count is None else count])
    for player in players:
        data.append(player.index)
        data += _cstr(player.name)
        data += struct.pack('<if', player.score, player.duration)
    return bytes(data)


def rules_payload(rules: List[Rule], count: Optional[int] = None) -> bytes:
    data = bytearray(struct.pack('<H', len(rules) if count is None else count))
    for rule in rules:
        data += _cstr(rule.name) + _cstr(rule.value)
    return bytes(data)


# =============================================================================
# Scenario
# =============================================================================

class ServerScenario:
    """Defines how the mock server answers each request type"""

    def __init__(self, name: str = "default", challenge: int = 0x12345678):
        self.name = name
        self.challenge = challenge
        self.info_requires_challenge = False
        self.info_response: Optional[bytes] = single_packet(
            ResponseType.INFO_SOURCE, source_info_payload(ServerInfo(
                protocol=17, name="Mock Server", map="de_dust2", folder="cstrike",
                game="Counter-Strike", app_id=10, players=2, max_players=16,
                server_type=ord('d'), environment=ord('l'), version="1.0.0.0")))
        self.player_response: Optional[bytes] = single_packet(
            ResponseType.PLAYER, players_payload([
                PlayerInfo(index=0, name="alice", score=10, duration=60.5),
                PlayerInfo(index=1, name="bob", score=-2, duration=12.0),
            ]))
        self.rules_response: Optional[bytes] = single_packet(
            ResponseType.RULES, rules_payload([Rule("mp_timelimit", "30"), Rule("sv_gravity", "800")]))

    def respond(self, request: bytes) -> Optional[bytes]:
        """Build the reply datagram for a request, None to stay silent"""
        if len(request) < 5:
            return None
        request_type = request[4]

        if request_type == RequestType.INFO:
            if self.info_requires_challenge and not self._info_has_challenge(request):
                return challenge_packet(self.challenge)
            return self.info_response

        if request_type in (RequestType.PLAYER, RequestType.RULES):
            if len(request) < 9 or unpack_challenge(request[5:9]) != self.challenge:
                return challenge_packet(self.challenge)
            if request_type == RequestType.PLAYER:
                return self.player_response
            return self.rules_response

        return None

    def _info_has_challenge(self, request: bytes) -> bool:
        return len(request) >= 9 and unpack_challenge(request[-4:]) == self.challenge


Handler = Callable[[bytes], Optional[bytes]]


class MockA2SServer:
    """UDP mock server answering A2S requests from a scenario or handler"""

    def __init__(self, host: str = "127.0.0.1", port: int = 0,
                 scenario: Optional[ServerScenario] = None):
        self.host = host
        self.port = port
        self.logger = logging.getLogger(__name__)

        self.state = ServerState.STOPPED
        self.socket: Optional[socket.socket] = None
        self.server_thread: Optional[threading.Thread] = None
        self.running = False

        self.scenario = scenario or ServerScenario()
        self.handler: Optional[Handler] = None
        self.requests: List[bytes] = []

    @property
    def address(self) -> Tuple[str, int]:
        return self.host, self.port

    def set_scenario(self, scenario: ServerScenario) -> None:
        self.scenario = scenario
        self.logger.debug(f"Set scenario: {scenario.name}")

    def set_handler(self, handler: Optional[Handler]) -> None:
        """Override the scenario with a request -> reply callable"""
        self.handler = handler

    def start(self) -> bool:
        """Start the mock server"""
        if self.state != ServerState.STOPPED:
            return False

        self.socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self.socket.bind((self.host, self.port))
        self.socket.settimeout(0.05)
        self.port = self.socket.getsockname()[1]

        self.running = True
        self.server_thread = threading.Thread(target=self._server_loop, daemon=True)
        self.server_thread.start()

        self.state = ServerState.RUNNING
        self.logger.info(f"Mock server started on {self.host}:{self.port}")
        return True

    def stop(self) -> None:
        """Stop the mock server"""
        if self.state != ServerState.RUNNING:
            return

        self.running = False
        if self.server_thread and self.server_thread.is_alive():
            self.server_thread.join(timeout=2.0)

        if self.socket:
            self.socket.close()
            self.socket = None

        self.state = ServerState.STOPPED
        self.logger.info("Mock server stopped")

    def _server_loop(self) -> None:
        while self.running:
            try:
                request, peer = self.socket.recvfrom(65535)
            except socket.timeout:
                continue
            except OSError as e:
                if self.running:
                    self.logger.error(f"Socket error in server loop: {e}")
                break

            self.requests.append(request)
            handler = self.handler or self.scenario.respond
            reply = handler(request)
            if reply is not None:
                self.socket.sendto(reply, peer)

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
        return False
