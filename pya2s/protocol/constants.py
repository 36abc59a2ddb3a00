"""
Protocol constants for A2S server queries
"""

from enum import IntEnum

# Packet headers (little-endian uint32 on the wire)
HEADER_SINGLE = 0xFFFFFFFF
HEADER_SPLIT = 0xFFFFFFFE
HEADER_SIZE = 4

# Split header bytes after the 4-byte header: id(4) + total(1) + number(1) [+ size(2)]
SPLIT_MIN_SIZE = 9
SPLIT_BASE_OFFSET = 6
SPLIT_SIZE_FIELD = 2


class RequestType(IntEnum):
    """Client to server request types."""
    INFO = 0x54    # 'T'
    PLAYER = 0x55  # 'U'
    RULES = 0x56   # 'V'


class ResponseType(IntEnum):
    """Server to client response types."""
    CHALLENGE = 0x41        # 'A'
    INFO_SOURCE = 0x49      # 'I'
    INFO_GOLDSOURCE = 0x6D  # 'm'
    PLAYER = 0x44           # 'D'
    RULES = 0x45            # 'E'


# Challenge
NO_CHALLENGE = -1

# A2S_INFO request body
INFO_PAYLOAD = b'Source Engine Query\x00'

# Extra Data Flags
EDF_PORT = 0x80
EDF_STEAM_ID = 0x10
EDF_SOURCE_TV = 0x40
EDF_KEYWORDS = 0x20
EDF_GAME_ID = 0x01

# Minimum length of a Source A2S_INFO payload
SOURCE_INFO_MIN_SIZE = 20

# Client defaults
DEFAULT_TIMEOUT = 5.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAY = 0.1
DEFAULT_BUFFER_SIZE = 4096
