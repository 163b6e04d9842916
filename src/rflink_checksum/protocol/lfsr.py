# protocol/lfsr.py
from __future__ import annotations

from typing import Optional

from .span import ByteSource, byte_span, check_width


def lfsr_digest8(message: ByteSource, gen: int, key: int, *, nbytes: Optional[int] = None) -> int:
    """
    Digest-8 by "LFSR-based Toeplitz hash".

    For every message bit (MSB first) that is set, the current key is XORed
    into the digest; the key then rolls right and, if the dropped bit was
    set, is XORed with gen.

    gen: key stream generator, needs to include the MSB if the LFSR is rolling
    key: initial key
    """
    check_width("gen", gen, 8)
    check_width("key", key, 8)
    data = byte_span(message, nbytes)

    digest = 0
    for b in data:
        for i in range(7, -1, -1):
            if (b >> i) & 1:
                digest ^= key
            if key & 1:
                key = (key >> 1) ^ gen
            else:
                key >>= 1
    return digest


def lfsr_digest16(data: int, bits: int, gen: int, key: int) -> int:
    """
    Digest-16 by "LFSR-based Toeplitz hash" over the low `bits` bits of data.

    data: up to 32 bits, LSB aligned; bit (bits-1) is consumed first
    gen: key stream generator, needs to include the MSB if the LFSR is rolling
    key: initial key
    """
    check_width("data", data, 32)
    if not isinstance(bits, int):
        raise TypeError("bits must be int")
    if not (0 <= bits <= 32):
        raise ValueError(f"bits out of range [0,32]: {bits}")
    check_width("gen", gen, 16)
    check_width("key", key, 16)

    digest = 0
    for bit in range(bits - 1, -1, -1):
        if (data >> bit) & 1:
            digest ^= key
        if key & 1:
            key = (key >> 1) ^ gen
        else:
            key >>= 1
    return digest
