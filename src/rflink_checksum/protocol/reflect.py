# protocol/reflect.py
from __future__ import annotations

from typing import Optional, Union

import numpy as np

from .span import check_width


def reflect_bits(value: int, width: int) -> int:
    """Reverse the low `width` bits of value (bit 0 <-> bit width-1)."""
    if not isinstance(width, int) or width < 1:
        raise ValueError("width must be a positive int")
    check_width("value", value, width)

    r = 0
    for _ in range(width):
        r = (r << 1) | (value & 1)
        value >>= 1
    return r


# reverse8 lookup, index -> reflected byte
_REVERSE8 = np.array([reflect_bits(i, 8) for i in range(256)], dtype=np.uint8)


def reverse8(x: int) -> int:
    """
    Reverse (reflect) the bits in an 8-bit byte.

    reverse8(reverse8(x)) == x for every byte value.
    """
    check_width("x", x, 8)
    return int(_REVERSE8[x])


def reflect_bytes(buffer: Union[bytearray, memoryview], nbytes: Optional[int] = None) -> None:
    """
    Reflect (reverse LSB to MSB) each of the first `nbytes` bytes of buffer, in place.

    buffer must be writable (bytearray or writable memoryview).
    Returns None; the mutation is the only output.
    """
    if isinstance(buffer, memoryview):
        if buffer.readonly:
            raise TypeError("reflect_bytes: buffer is read-only")
    elif not isinstance(buffer, bytearray):
        raise TypeError("reflect_bytes: buffer must be a bytearray or writable memoryview")

    n = len(buffer) if nbytes is None else nbytes
    if not isinstance(n, int):
        raise TypeError("nbytes must be int")
    if not (0 <= n <= len(buffer)):
        raise ValueError(f"nbytes out of range [0,{len(buffer)}]: {n}")
    if n == 0:
        return

    head = np.frombuffer(bytes(buffer[:n]), dtype=np.uint8)
    buffer[:n] = _REVERSE8[head].tobytes()
