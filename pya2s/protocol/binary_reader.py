"""
Binary reader for A2S payloads

Sequential little-endian reader over a response buffer. The read
position lives on the reader, so parsers never pass offsets around.
"""

import struct

from ..exceptions import ShortResponseError


class BinaryReader:
    """Cursor over a byte buffer"""

    def __init__(self, data: bytes, pos: int = 0):
        self.data = data
        self.pos = pos

    def remaining(self) -> int:
        """Bytes remaining to read"""
        return max(len(self.data) - self.pos, 0)

    def has_data(self, num_bytes: int = 1) -> bool:
        """Check if num_bytes are available"""
        return self.remaining() >= num_bytes

    def _take(self, size: int) -> bytes:
        if not self.has_data(size):
            raise ShortResponseError(
                f"response too short: need {size} bytes at offset {self.pos}, "
                f"{self.remaining()} left"
            )
        chunk = self.data[self.pos:self.pos + size]
        self.pos += size
        return chunk

    def skip(self, size: int) -> None:
        """Advance past size bytes without decoding them"""
        self._take(size)

    def read_byte(self) -> int:
        """Read an unsigned 8-bit integer"""
        return self._take(1)[0]

    def read_uint16(self) -> int:
        return struct.unpack('<H', self._take(2))[0]

    def read_int32(self) -> int:
        return struct.unpack('<i', self._take(4))[0]

    def read_float(self) -> float:
        """Read a 32-bit IEEE-754 float"""
        return struct.unpack('<f', self._take(4))[0]

    def read_uint64(self) -> int:
        return struct.unpack('<Q', self._take(8))[0]

    def read_string(self) -> str:
        """Read a null-terminated string.

        Scans up to the next zero byte or the end of the buffer and moves
        past the terminator when there is one. At or past the end of the
        buffer an empty string is returned and the position is unchanged.
        """
        if self.pos >= len(self.data):
            return ""

        end = self.data.find(b'\x00', self.pos)
        if end == -1:
            raw = self.data[self.pos:]
            self.pos = len(self.data)
        else:
            raw = self.data[self.pos:end]
            self.pos = end + 1
        return raw.decode('utf-8', errors='replace')
