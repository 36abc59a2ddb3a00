"""
A2S packet codec

Builds request datagrams and unwraps response datagrams. Decoding is
pure: a challenge answer is reported through ChallengeRequiredError and
the caller decides where to keep the number.
"""

import logging
import struct
from typing import Optional

from .constants import (
    HEADER_SINGLE,
    HEADER_SPLIT,
    HEADER_SIZE,
    NO_CHALLENGE,
    SPLIT_MIN_SIZE,
    SPLIT_BASE_OFFSET,
    SPLIT_SIZE_FIELD,
    RequestType,
    ResponseType,
)
from ..exceptions import (
    ChallengeRequiredError,
    InvalidResponseError,
    ProtocolMismatchError,
    ShortResponseError,
    UnknownHeaderError,
)

logger = logging.getLogger(__name__)


def pack_challenge(challenge: int) -> bytes:
    """Encode a signed challenge as its 4 little-endian bytes"""
    return struct.pack('<I', challenge & 0xFFFFFFFF)


def unpack_challenge(data: bytes) -> int:
    """Decode 4 little-endian bytes as a signed challenge"""
    return struct.unpack('<i', data[:4])[0]


def build_packet(packet_type: int, payload: Optional[bytes] = None,
                 challenge: int = NO_CHALLENGE) -> bytes:
    """
    Build a request datagram.

    Layout: header(4) + type(1) + [challenge(4)] + payload + [challenge(4)]

    PLAYER and RULES requests always carry the challenge right after the
    type byte. INFO requests append it after the payload, and only once a
    challenge is known.
    """
    challenge_at_beginning = packet_type in (RequestType.PLAYER, RequestType.RULES)
    challenge_at_end = packet_type == RequestType.INFO and challenge != NO_CHALLENGE

    packet = bytearray(struct.pack('<IB', HEADER_SINGLE, packet_type))
    if challenge_at_beginning:
        packet.extend(pack_challenge(challenge))
    if payload:
        packet.extend(payload)
    if challenge_at_end:
        packet.extend(pack_challenge(challenge))
    return bytes(packet)


def decode_response(data: bytes, expect: int) -> bytes:
    """
    Unwrap a response datagram.

    Returns the payload that follows the response type byte.

    Raises:
        ShortResponseError: datagram too short for its framing
        UnknownHeaderError: header is neither single nor split
        ChallengeRequiredError: server answered with a challenge
        ProtocolMismatchError: response type differs from expect
    """
    if len(data) < HEADER_SIZE:
        raise ShortResponseError()

    header = struct.unpack('<I', data[:HEADER_SIZE])[0]
    if header == HEADER_SINGLE:
        return decode_single_packet(data[HEADER_SIZE:], expect)
    if header == HEADER_SPLIT:
        return decode_split_packet(data[HEADER_SIZE:], expect)
    raise UnknownHeaderError(header)


def decode_single_packet(data: bytes, expect: int) -> bytes:
    """Check the response type of a single packet and strip it"""
    if len(data) < 1:
        raise ShortResponseError()

    response_type = data[0]

    if response_type == ResponseType.CHALLENGE:
        if len(data) < 5:
            raise ShortResponseError()
        challenge = unpack_challenge(data[1:5])
        logger.debug(f"Received challenge {challenge}")
        raise ChallengeRequiredError(challenge)

    if response_type != expect:
        raise ProtocolMismatchError(expect, response_type)

    return data[1:]


def decode_split_packet(data: bytes, expect: int) -> bytes:
    """
    Skip the split header of a single fragment.

    Fragments are not collected across datagrams; only the payload of
    the received fragment is decoded.
    """
    if len(data) < SPLIT_MIN_SIZE:
        raise ShortResponseError()

    payload_start = SPLIT_BASE_OFFSET
    if len(data) > 8:
        payload_start += SPLIT_SIZE_FIELD

    if payload_start >= len(data):
        raise InvalidResponseError()

    logger.debug(f"Split packet, payload at offset {payload_start}")
    return decode_single_packet(data[payload_start:], expect)
