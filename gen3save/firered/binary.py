"""Little-endian integer reads over fixed-layout byte buffers."""

import struct

_U16 = struct.Struct('<H')
_U32 = struct.Struct('<I')


def _check_bounds(data: bytes, offset: int, width: int) -> None:
    # A bad offset means a wrong layout constant, never bad save data
    if offset < 0 or offset + width > len(data):
        raise IndexError(
            f"Read of {width} bytes at offset 0x{offset:X} is outside buffer of {len(data)} bytes"
        )


def read_u8(data: bytes, offset: int) -> int:
    _check_bounds(data, offset, 1)
    return data[offset]


def read_u16(data: bytes, offset: int) -> int:
    """Reads an unsigned 16-bit little-endian value."""
    _check_bounds(data, offset, 2)
    return _U16.unpack_from(data, offset)[0]


def read_u32(data: bytes, offset: int) -> int:
    """Reads an unsigned 32-bit little-endian value."""
    _check_bounds(data, offset, 4)
    return _U32.unpack_from(data, offset)[0]
