"""
pya2s - Client
Synchronous A2S query client for Source and GoldSource servers.

One client owns one UDP socket. Every request is a single datagram
write followed by a single datagram read, bounded by the configured
timeout. The client is not thread-safe.
"""

import dataclasses
import logging
import socket
import time
from typing import Optional, List, Tuple, Union

from .config import ClientConfig, parse_address
from .exceptions import (
    A2SError,
    A2SConnectionError,
    ChallengeNotReceivedError,
    ChallengeRequiredError,
    NotConnectedError,
    QueryTimeoutError,
    TooManyRetriesError,
    UnsupportedFeatureError,
)
from .models import ServerInfo, PlayerInfo, Rule, ServerFeatures
from .parsers import parse_source_info, parse_goldsource_info, parse_players, parse_rules
from .protocol.constants import (
    INFO_PAYLOAD,
    NO_CHALLENGE,
    RequestType,
    ResponseType,
)
from .protocol.packets import build_packet, decode_response
from .utils.logging_config import hexdump, resolve_level

logger = logging.getLogger(__name__)

Address = Union[str, Tuple[str, int]]


class A2SClient:
    """
    Query client for a single game server.

    Usage:
        client = A2SClient(timeout=5.0)
        client.connect("127.0.0.1:27015")
        info = client.get_info()
        players = client.get_players()
        rules = client.get_rules()
        client.close()

    Or with context manager:
        with A2SClient() as client:
            client.connect(("127.0.0.1", 27015))
            print(client.get_info().name)
    """

    def __init__(self, timeout: Optional[float] = None, config: Optional[ClientConfig] = None):
        """
        Create a new client.

        Args:
            timeout: Per-request timeout in seconds (overrides config.timeout)
            config: Client settings (defaults to ClientConfig())
        """
        self.config = dataclasses.replace(config or ClientConfig())
        if timeout is not None:
            self.config.timeout = timeout
        self.config.validate()
        logger.setLevel(resolve_level(self.config.log_level))

        self.address: Optional[Tuple[str, int]] = None
        # Cached challenge number, NO_CHALLENGE until the server sends one
        self.challenge = NO_CHALLENGE

        self._socket: Optional[socket.socket] = None
        self._connected = False

    @property
    def timeout(self) -> float:
        return self.config.timeout

    # =========================================================================
    # Connection
    # =========================================================================

    def connect(self, address: Address):
        """
        Open a UDP association with the server.

        Args:
            address: "host:port", "[v6addr]:port" or (host, port)

        Raises:
            ConfigValidationError: malformed address
            A2SConnectionError: name resolution or socket setup failed
        """
        host, port = parse_address(address)

        if self._socket:
            self.close()

        try:
            family, sock_type, proto, _, sockaddr = socket.getaddrinfo(
                host, port, 0, socket.SOCK_DGRAM)[0]
            sock = socket.socket(family, sock_type, proto)
        except OSError as e:
            raise A2SConnectionError(f"Failed to resolve {host}:{port}: {e}") from e

        try:
            sock.settimeout(self.timeout)
            sock.connect(sockaddr)
        except OSError as e:
            sock.close()
            raise A2SConnectionError(f"Failed to connect to {host}:{port}: {e}") from e

        self._socket = sock
        self._connected = True
        self.address = (host, port)
        logger.info(f"Connected to {host}:{port}")

    def close(self):
        """Close the UDP association"""
        if self._socket:
            self._connected = False
            self._socket.close()
            self._socket = None
            logger.info(f"Closed connection to {self.address[0]}:{self.address[1]}")

    def is_connected(self) -> bool:
        return self._connected and self._socket is not None

    def _require_connection(self):
        if not self.is_connected():
            raise NotConnectedError()

    # =========================================================================
    # Queries
    # =========================================================================

    def get_info(self) -> ServerInfo:
        """
        Query A2S_INFO.

        A Source reply is tried first. If that fails for any reason the
        request is sent once more expecting a GoldSource reply.
        """
        self._require_connection()

        try:
            response = self._send_request(RequestType.INFO, INFO_PAYLOAD, ResponseType.INFO_SOURCE)
        except A2SError as e:
            logger.debug(f"Source info query failed ({e}), trying GoldSource")
            response = self._send_request(RequestType.INFO, INFO_PAYLOAD, ResponseType.INFO_GOLDSOURCE)
            return parse_goldsource_info(response)

        return parse_source_info(response)

    def get_players(self) -> List[PlayerInfo]:
        """Query A2S_PLAYER, players are returned in server order"""
        response = self._query_with_challenge(RequestType.PLAYER, ResponseType.PLAYER)
        return parse_players(response)

    def get_rules(self) -> List[Rule]:
        """Query A2S_RULES, rules are returned in server order"""
        response = self._query_with_challenge(RequestType.RULES, ResponseType.RULES)
        return parse_rules(response)

    def check_features(self) -> ServerFeatures:
        """
        Probe which queries the server answers.

        Sends real PLAYER and RULES queries, so it costs network round
        trips and refreshes the cached challenge. Info is assumed to work;
        ping is never probed.
        """
        features = ServerFeatures(info=True)

        try:
            self.get_players()
            features.players = True
        except A2SError as e:
            logger.debug(f"Player query unsupported: {e}")

        try:
            self.get_rules()
            features.rules = True
        except A2SError as e:
            logger.debug(f"Rules query unsupported: {e}")

        return features

    def ping(self):
        """A2A_PING is deprecated by Valve and not implemented"""
        raise UnsupportedFeatureError("ping is not supported")

    # =========================================================================
    # Request handling
    # =========================================================================

    def _query_with_challenge(self, request_type: int, expect: int) -> bytes:
        self._require_connection()

        # Challenge probe: a challenge answer is the expected outcome
        try:
            self._send_request_raw(request_type, None, ResponseType.CHALLENGE, NO_CHALLENGE)
        except ChallengeRequiredError:
            pass

        if self.challenge == NO_CHALLENGE:
            raise ChallengeNotReceivedError()

        return self._send_request(request_type, None, expect)

    def _send_request(self, packet_type: int, payload: Optional[bytes], expect: int) -> bytes:
        """Send a request, retrying while the server keeps answering with a challenge"""
        attempts = self.config.max_retries
        for attempt in range(1, attempts + 1):
            try:
                return self._send_request_raw(packet_type, payload, expect)
            except ChallengeRequiredError:
                logger.debug(f"Challenge required (attempt {attempt}/{attempts})")
                if attempt < attempts:
                    time.sleep(self.config.retry_delay)

        raise TooManyRetriesError()

    def _send_request_raw(self, packet_type: int, payload: Optional[bytes], expect: int,
                          challenge: Optional[int] = None) -> bytes:
        """
        One write and one read.

        A challenge answer is cached on the client before
        ChallengeRequiredError propagates.
        """
        if challenge is None:
            challenge = self.challenge
        packet = build_packet(packet_type, payload, challenge)

        self._socket.settimeout(self.timeout)

        if self.config.log_packets:
            logger.debug(f"-> {hexdump(packet)}")
        try:
            self._socket.send(packet)
        except OSError as e:
            raise A2SConnectionError(f"write error: {e}") from e

        try:
            data = self._socket.recv(self.config.buffer_size)
        except socket.timeout:
            raise QueryTimeoutError() from None
        except OSError as e:
            raise A2SConnectionError(f"read error: {e}") from e

        if self.config.log_packets:
            logger.debug(f"<- {hexdump(data)}")

        try:
            return decode_response(data, expect)
        except ChallengeRequiredError as e:
            self.challenge = e.challenge
            raise

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


# =============================================================================
# Convenience Function
# =============================================================================

def query(address: Address, timeout: Optional[float] = None) -> Tuple[ServerInfo, List[PlayerInfo], List[Rule]]:
    """
    Fetch info, players and rules from a server in one session.

    Example:
        info, players, rules = query("127.0.0.1:27015")
    """
    with A2SClient(timeout=timeout) as client:
        client.connect(address)
        info = client.get_info()
        players = client.get_players()
        rules = client.get_rules()
    return info, players, rules
