# protocol/bytesum.py
from __future__ import annotations

from typing import Optional

import numpy as np

from .span import ByteSource, byte_span, check_width


def _as_u8(message: ByteSource, nbytes: Optional[int]) -> np.ndarray:
    data = byte_span(message, nbytes)
    return np.fromiter(data, dtype=np.uint8, count=len(data))


def parity8(byte: int) -> int:
    """Bit parity of a single byte: 1 odd, 0 even."""
    check_width("byte", byte, 8)
    return bin(byte).count("1") & 1


def parity_bytes(message: ByteSource, *, nbytes: Optional[int] = None) -> int:
    """Bit parity over all bytes: 1 odd, 0 even."""
    bits = np.unpackbits(_as_u8(message, nbytes))
    return int(bits.sum()) & 1


def xor_bytes(message: ByteSource, *, nbytes: Optional[int] = None) -> int:
    """XOR (byte-wide parity) of all bytes; per bit position 1 odd, 0 even."""
    arr = _as_u8(message, nbytes)
    if arr.size == 0:
        return 0
    return int(np.bitwise_xor.reduce(arr))


def add_bytes(message: ByteSource, *, nbytes: Optional[int] = None) -> int:
    """Arithmetic sum of all bytes, not truncated to 8 bits."""
    return int(_as_u8(message, nbytes).sum(dtype=np.uint64))
