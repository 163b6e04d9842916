# protocol/crc.py
from __future__ import annotations

from enum import Enum
from typing import Optional

from .reflect import reflect_bits
from .span import ByteSource, byte_span, check_width


class BitOrder(Enum):
    """Which end of each message byte is shifted into the CRC register first."""
    MSB_FIRST = "msb"
    LSB_FIRST = "lsb"


def crc(
    message: ByteSource,
    *,
    width: int,
    poly: int,
    init: int = 0,
    bit_order: BitOrder = BitOrder.MSB_FIRST,
    nbytes: Optional[int] = None,
) -> int:
    """
    Generic bitwise CRC over the first `nbytes` bytes of message.

    poly and init are always given in normal (unreflected) catalogue form,
    with the x^width term implicit. For LSB_FIRST they are reflected here,
    so the result matches refin=refout=true catalogue entries (before xorout).
    """
    if not isinstance(width, int) or not (1 <= width <= 64):
        raise ValueError("width must be an int in [1,64]")
    check_width("poly", poly, width)
    check_width("init", init, width)
    bit_order = BitOrder(bit_order)
    data = byte_span(message, nbytes)

    if bit_order is BitOrder.LSB_FIRST:
        return _crc_lsb(data, width, reflect_bits(poly, width), reflect_bits(init, width))
    return _crc_msb(data, width, poly, init)


# ----------------------------
# Fixed-width entry points
# ----------------------------

def crc4(message: ByteSource, poly: int, init: int, *, nbytes: Optional[int] = None) -> int:
    """CRC-4, MSB first. poly holds x^3..x^0 (x^4 implicit)."""
    return _crc_msb(byte_span(message, nbytes), 4, check_width("poly", poly, 4), check_width("init", init, 4))


def crc7(message: ByteSource, poly: int, init: int, *, nbytes: Optional[int] = None) -> int:
    """CRC-7, MSB first. poly holds x^6..x^0 (x^7 implicit)."""
    return _crc_msb(byte_span(message, nbytes), 7, check_width("poly", poly, 7), check_width("init", init, 7))


def crc8(message: ByteSource, poly: int, init: int, *, nbytes: Optional[int] = None) -> int:
    """
    Generic CRC-8, MSB first.

    poly is x^7..x^0 with x^8 implicitly one:
      0x31 = x8 + x5 + x4 + 1
      0x80 = x8 + x7  (a plain bit-by-bit parity XOR)
    """
    return _crc_msb(byte_span(message, nbytes), 8, check_width("poly", poly, 8), check_width("init", init, 8))


def crc8le(message: ByteSource, poly: int, init: int, *, nbytes: Optional[int] = None) -> int:
    """
    "Little-endian" CRC-8: input and output are reflected, the least
    significant bit of each byte is shifted in first.

    poly and init must already be reflected (e.g. 0x8C for poly 0x31).
    """
    return _crc_lsb(byte_span(message, nbytes), 8, check_width("poly", poly, 8), check_width("init", init, 8))


def crc16(message: ByteSource, poly: int, init: int, *, nbytes: Optional[int] = None) -> int:
    """CRC-16, MSB first. crc16(b"123456789", 0x1021, 0xFFFF) == 0x29B1."""
    return _crc_msb(byte_span(message, nbytes), 16, check_width("poly", poly, 16), check_width("init", init, 16))


def crc16lsb(message: ByteSource, poly: int, init: int, *, nbytes: Optional[int] = None) -> int:
    """
    CRC-16, LSB first: input and output are reflected.
    Note that poly and init already need to be reflected (e.g. 0xA001 for 0x8005).
    """
    return _crc_lsb(byte_span(message, nbytes), 16, check_width("poly", poly, 16), check_width("init", init, 16))


# ----------------------------
# Internal
# ----------------------------

def _crc_msb(data: bytes, width: int, poly: int, init: int) -> int:
    # Registers narrower than a byte run left-aligned in 8 bits.
    w = max(width, 8)
    shift = w - width
    top = 1 << (w - 1)
    mask = (1 << w) - 1

    poly <<= shift
    reg = init << shift

    for b in data:
        reg ^= b << (w - 8)
        for _ in range(8):
            if reg & top:
                reg = ((reg << 1) ^ poly) & mask
            else:
                reg = (reg << 1) & mask

    return reg >> shift


def _crc_lsb(data: bytes, width: int, poly: int, init: int) -> int:
    mask = (1 << width) - 1
    reg = init

    for b in data:
        reg ^= b
        for _ in range(8):
            if reg & 1:
                reg = (reg >> 1) ^ poly
            else:
                reg >>= 1

    return reg & mask
