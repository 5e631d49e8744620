"""Fixed-width big-endian value readers for bootinfo payloads."""

import struct


def read_u8(data: bytes, offset: int = 0) -> int:
    """Return the unsigned byte at `offset`."""
    return data[offset]


def read_be16(data: bytes, offset: int = 0) -> int:
    """Return the unsigned 16-bit big-endian value at `offset`."""
    return struct.unpack_from('>H', data, offset)[0]


def read_be32(data: bytes, offset: int = 0) -> int:
    """Return the unsigned 32-bit big-endian value at `offset`."""
    return struct.unpack_from('>I', data, offset)[0]
