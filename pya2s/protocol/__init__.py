"""
A2S wire protocol: constants, binary reader and packet codec
"""

from .binary_reader import BinaryReader
from .constants import RequestType, ResponseType, NO_CHALLENGE
from .packets import build_packet, decode_response

__all__ = [
    'BinaryReader',
    'RequestType',
    'ResponseType',
    'NO_CHALLENGE',
    'build_packet',
    'decode_response',
]
